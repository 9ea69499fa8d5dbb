import json

from passlens.cli import main


def test_score_json(capsys):
    assert main(["score", "--json", "Password1!"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["score"] == 70
    assert data["strength"] == "good"
    assert data["hint"].startswith("Keep going")
    assert data["requirements"][0]["rule"] == "length"


def test_score_table(capsys):
    assert main(["score", "abc"]) == 0
    out = capsys.readouterr().out
    assert "Score: 1/100" in out
    assert "Avoid sequential characters" in out


def test_generate_copies(capsys):
    assert main(["generate", "--copies", "2"]) == 0
    out = capsys.readouterr().out
    assert "Password #1:" in out
    assert "Password #2:" in out


def test_config_saves_settings(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("PASSLENS_CONFIG_DIR", str(tmp_path))
    assert main(["config", "--no-reveal-generated", "--log-level", "INFO"]) == 0
    assert "Saved settings" in capsys.readouterr().out
    saved = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
    assert saved["reveal_generated"] is False
    assert saved["log_level"] == "INFO"


def test_config_without_flags_only_shows(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("PASSLENS_CONFIG_DIR", str(tmp_path))
    assert main(["config"]) == 0
    out = capsys.readouterr().out
    assert "reveal_generated" in out
    assert not (tmp_path / "config.json").exists()
