import logging
from dataclasses import asdict

from flask import Flask, jsonify, request

from passlens.config import load_config
from passlens.evaluator import analyze
from passlens.generator import generate
from passlens.logging_setup import configure_logging
from passlens.suggestions import hint_for, requirements

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    configure_logging(load_config().get("log_level", "WARNING"))
    app = Flask(__name__)

    @app.route('/')
    def home():
        return jsonify({
            "message": "PassLens API is running"
        })

    @app.route('/analyze', methods=['POST'])
    def analyze_route():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        password = data.get('password', '')
        if not isinstance(password, str):
            logger.info("Rejected /analyze request: password of type %s", type(password).__name__)
            return jsonify({'error': "'password' must be a string"}), 400
        result = analyze(password)
        payload = result.to_dict()
        payload['requirements'] = [asdict(r) for r in requirements(result)]
        payload['hint'] = hint_for(result).text
        return jsonify(payload)

    @app.route('/generate', methods=['POST'])
    def generate_route():
        return jsonify({'password': generate()})

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
