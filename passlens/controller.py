"""
passlens.controller

Glue between a front-end and the analyzer. The controller owns the view it
renders to and re-runs the analysis on every change; it keeps no state about
previous passwords.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Tuple

from .evaluator import AnalysisResult, Strength, analyze
from .generator import generate
from .suggestions import (
    GENERATED_HINT,
    Hint,
    Requirement,
    composition,
    format_length,
    hint_for,
    requirements,
    strength_label,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stats:
    length: str
    crack_time: str
    combinations: str
    entropy: str


def stats_for(result: AnalysisResult) -> Stats:
    return Stats(
        length=format_length(result.length),
        crack_time=result.crack_time,
        combinations=result.combinations,
        entropy=f"{result.entropy} bits",
    )


class PasswordView(Protocol):
    def show_strength(self, score: int, strength: Strength, label: str) -> None: ...

    def show_requirements(self, reqs: List[Requirement]) -> None: ...

    def show_stats(self, stats: Stats) -> None: ...

    def show_hint(self, hint: Hint) -> None: ...

    def show_composition(self, slices: List[Tuple[str, int]]) -> None: ...

    def set_password(self, text: str) -> None: ...

    def set_revealed(self, revealed: bool) -> None: ...


class AnalyzerController:
    def __init__(
        self,
        view: PasswordView,
        analyzer: Callable[[str], AnalysisResult] = analyze,
        generator: Callable[[], str] = generate,
        reveal_generated: bool = True,
    ):
        self.view = view
        self.analyzer = analyzer
        self.generator = generator
        self.reveal_generated = reveal_generated
        self.revealed = False
        self.last_result: Optional[AnalysisResult] = None

    def render(self, result: AnalysisResult) -> None:
        self.view.show_strength(result.score, result.strength, strength_label(result.strength))
        self.view.show_requirements(requirements(result))
        self.view.show_stats(stats_for(result))
        self.view.show_hint(hint_for(result))
        self.view.show_composition(composition(result))

    def on_password_changed(self, text: str) -> AnalysisResult:
        result = self.analyzer(text)
        self.last_result = result
        self.render(result)
        return result

    def on_generate(self) -> str:
        password = self.generator()
        logger.info("Generated a new password")
        # set_password may fire the view's change signal; analyze explicitly anyway
        self.view.set_password(password)
        if self.reveal_generated:
            self.set_revealed(True)
        self.on_password_changed(password)
        self.view.show_hint(GENERATED_HINT)
        return password

    def set_revealed(self, revealed: bool) -> None:
        self.revealed = revealed
        self.view.set_revealed(revealed)

    def toggle_visibility(self) -> bool:
        self.set_revealed(not self.revealed)
        return self.revealed
