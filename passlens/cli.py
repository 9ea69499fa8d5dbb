"""CLI for PassLens — score a password, generate strong ones, manage settings, or open the GUI."""

import argparse
from dataclasses import asdict
from typing import List, Optional

from rich import print, print_json
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import config_path, load_config, save_config
from .controller import stats_for
from .evaluator import analyze
from .generator import generate
from .logging_setup import configure_logging
from .suggestions import (
    STRENGTH_COLORS,
    composition,
    hint_for,
    requirements,
    strength_label,
)


def _bar(score: int, width: int = 30) -> str:
    filled = round(score / 100 * width)
    return "█" * filled + "░" * (width - filled)


def cmd_score(args):
    result = analyze(args.password)
    if args.json:
        payload = result.to_dict()
        payload["requirements"] = [asdict(r) for r in requirements(result)]
        payload["hint"] = hint_for(result).text
        print_json(data=payload)
        return

    color = STRENGTH_COLORS[result.strength]
    header = f"[{color}]{strength_label(result.strength)}[/] — Score: {result.score}/100"
    stats = stats_for(result)
    body = (
        f"[{color}]{_bar(result.score)}[/]\n\n"
        f"Length: {stats.length}\n"
        f"Crack time: {stats.crack_time}\n"
        f"Combinations: {stats.combinations}\n"
        f"Entropy: {stats.entropy}"
    )
    print(Panel(body, title=header))

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Requirement")
    table.add_column("Status", justify="center")
    table.add_column("Value", justify="right")
    for req in requirements(result):
        status = "[green]✓[/green]" if req.valid else "[red]✗[/red]"
        table.add_row(req.label, status, req.value or "")
    print(table)

    comp = Table(show_header=True, header_style="bold magenta")
    comp.add_column("Composition")
    comp.add_column("Count", justify="right")
    for label, count in composition(result):
        comp.add_row(label, str(count))
    print(comp)

    print(f"[bold]Hint:[/bold] {hint_for(result).text}")


def cmd_generate(args):
    for i in range(args.copies):
        pw = generate()
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")


def cmd_config(args):
    cfg = load_config()
    changed = False
    if args.reveal_generated is not None:
        cfg["reveal_generated"] = args.reveal_generated
        changed = True
    if args.log_level:
        cfg["log_level"] = args.log_level
        changed = True
    if changed:
        save_config(cfg)
        print(f"[green]Saved settings to:[/green] {escape(config_path())}")

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in cfg.items():
        table.add_row(key, escape(str(value)))
    print(table)


def cmd_gui(args):
    from .gui import main as gui_main

    gui_main()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passlens")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sc = sub.add_parser("score", help="Analyze a password")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.add_argument("--json", action="store_true", help="Print the analysis as JSON")
    sc.set_defaults(func=cmd_score)

    gen = sub.add_parser("generate", help="Generate strong 16-character passwords")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.set_defaults(func=cmd_generate)

    cf = sub.add_parser("config", help="Show or change saved settings")
    cf.add_argument("--reveal-generated", action=argparse.BooleanOptionalAction, default=None,
                    help="Reveal generated passwords in the GUI")
    cf.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Default log level")
    cf.set_defaults(func=cmd_config)

    g = sub.add_parser("gui", help="Open the desktop visualizer")
    g.set_defaults(func=cmd_gui)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else load_config().get("log_level", "WARNING"))
    args.func(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
