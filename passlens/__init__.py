"""PassLens: live password strength analysis and strong password generation."""

from .evaluator import AnalysisResult, Strength, analyze
from .generator import generate

__all__ = ["AnalysisResult", "Strength", "analyze", "generate"]
__version__ = "0.1.0"
