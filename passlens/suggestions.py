"""
passlens.suggestions

Turn an AnalysisResult into display data: the requirement checklist, the
single contextual hint, tier labels/colors and the composition chart slices.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import MIN_LENGTH
from .evaluator import AnalysisResult, Strength

STRENGTH_LABELS = {
    Strength.WEAK: "Weak",
    Strength.FAIR: "Fair",
    Strength.GOOD: "Good",
    Strength.STRONG: "Strong",
    Strength.VERY_STRONG: "Very Strong",
}

STRENGTH_COLORS = {
    Strength.WEAK: "#e74c3c",
    Strength.FAIR: "#e67e22",
    Strength.GOOD: "#f1c40f",
    Strength.STRONG: "#2ecc71",
    Strength.VERY_STRONG: "#27ae60",
}

# chart slice order and colors
COMPOSITION_LABELS = ("Uppercase", "Lowercase", "Numbers", "Special")
COMPOSITION_COLORS = ("#3498db", "#2ecc71", "#e74c3c", "#f39c12")


@dataclass(frozen=True)
class Requirement:
    rule: str
    label: str
    valid: bool
    value: Optional[str] = None


@dataclass(frozen=True)
class Hint:
    kind: str
    text: str


GENERATED_HINT = Hint("generated", "Strong password generated!")


def strength_label(strength: Strength) -> str:
    return STRENGTH_LABELS.get(strength, "Unknown")


def format_length(length: int) -> str:
    return f"{length} character{'' if length == 1 else 's'}"


def requirements(result: AnalysisResult) -> List[Requirement]:
    counts = result.character_counts
    return [
        Requirement("length", f"At least {MIN_LENGTH} characters",
                    result.length >= MIN_LENGTH, f"{result.length}/{MIN_LENGTH}"),
        Requirement("uppercase", "Uppercase letters (A-Z)", result.has_upper, str(counts.upper)),
        Requirement("lowercase", "Lowercase letters (a-z)", result.has_lower, str(counts.lower)),
        Requirement("numbers", "Numbers (0-9)", result.has_numbers, str(counts.numbers)),
        Requirement("special", "Special characters (!@#$...)", result.has_special, str(counts.special)),
        Requirement("sequence", "No sequential characters", not result.has_sequence),
        Requirement("common", "Not a common password", not result.is_common),
    ]


def missing_classes(result: AnalysisResult) -> List[str]:
    missing = []
    if not result.has_upper:
        missing.append("uppercase letters")
    if not result.has_lower:
        missing.append("lowercase letters")
    if not result.has_numbers:
        missing.append("numbers")
    if not result.has_special:
        missing.append("special characters")
    return missing


def hint_for(result: AnalysisResult) -> Hint:
    """Pick the single most important hint, highest priority first."""
    if result.length == 0:
        return Hint("empty", "Start typing to see strength analysis")
    if result.is_common:
        return Hint("common", "This is a commonly used password - try something more unique!")
    if result.has_sequence:
        return Hint("sequence", "Avoid sequential characters (abc, 123)")
    if result.length < MIN_LENGTH:
        return Hint("short", f"Make it longer! Aim for at least {MIN_LENGTH} characters")
    missing = missing_classes(result)
    if missing:
        return Hint("missing", f"Add {', '.join(missing)} to make it stronger")
    if result.score >= 90:
        return Hint("excellent", "Excellent password! This is very secure!")
    if result.score >= 75:
        return Hint("good", "Good password! Consider making it longer for extra security")
    return Hint("encourage", "Keep going! Try mixing different character types")


def composition(result: AnalysisResult) -> List[Tuple[str, int]]:
    return list(zip(COMPOSITION_LABELS, result.character_counts))
