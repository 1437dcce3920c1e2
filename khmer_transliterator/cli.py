"""
cli.py - command line front-end for the transliterator
Features:
- Argument mode: show every search tier for the given inputs and exit
- Demo mode: a fixed tour of exact, prefix and fuzzy lookups
- Interactive mode: type romanized Khmer, pick a suggestion to teach the engine
- Uses Rich for tables and formatting
"""

import argparse
import sys
import time
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from khmer_transliterator.core.transliterator import Explanation, Transliterator
from khmer_transliterator.utils.config_manager import Config, ConfigError
from khmer_transliterator.utils.logger_utils import Log, setup_logging
from khmer_transliterator.utils.metrics_tracker import Metrics

DEMO_CASES = [
    ("jg", "Exact match"),
    ("ban", "Exact match, several romanizations"),
    ("j", "Prefix search"),
    ("jong", "Mixed exact + prefix"),
    ("slah", "Fuzzy search (missing 'n')"),
    ("bna", "Fuzzy search (swapped chars)"),
    ("chxa", "Fuzzy search (wrong char)"),
    ("xyz", "No matches"),
    ("te", "All search types"),
    ("ch", "Prefix only"),
]

HELP = "Commands: /help /stats /config /quit  (exit or quit also work)"


class CLI:
    """Command-line interface to query the engine and feed back accepted suggestions."""

    def __init__(self, transliterator: Transliterator, console: Optional[Console] = None):
        self.t = transliterator
        self.console = console or Console()
        self.metrics = Metrics()
        self.running = True

    # ENTRY POINTS ---------------------------------------------------------------
    def run(self):
        """
        Main interactive loop:
        input -> tiers + top suggestions -> optional pick -> frequency learning
        """
        self.console.rule("[bold magenta]Khmer Transliterator[/bold magenta]")
        self.console.print("[cyan]Type romanized Khmer to get suggestions, e.g. 'jg', 'ban', 'slah'.[/cyan]")
        self.console.print(HELP + "\n")

        while self.running:
            try:
                text = Prompt.ask("[green]Input[/green]", default="", console=self.console).strip()
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break

            if not text:
                self.console.print("[dim](empty input - try 'jg' or 'ban')[/dim]")
                continue
            if text.lower() in ("exit", "quit"):
                self._exit()
                break
            if text.startswith("/"):
                self._handle_command(text)
                continue

            try:
                self._process_input(text)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break

    def show_many(self, inputs: Sequence[str]):
        for text in inputs:
            self.show(text)

    def demo(self):
        self.console.rule("[bold magenta]Demo[/bold magenta]")
        for text, description in DEMO_CASES:
            self.console.print(f"[bold]{description}[/bold]")
            self.show(text)
            self.console.rule(style="dim")
        self.console.print("[green]Demo completed.[/green]")

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str):
        c = cmd.split()[0].lower()
        if c in ("/q", "/quit", "/exit"):
            self._exit()
            return
        if c == "/help":
            self.console.print(HELP)
            return
        if c == "/stats":
            self._show_stats()
            return
        if c == "/config":
            self._show_config()
            return
        self.console.print(f"[red]Unknown command:[/red] {cmd}")

    # CORE INPUT PROCESSING ------------------------------------------------------
    def _process_input(self, text: str):
        suggestions = self.show(text)
        if not suggestions:
            return

        chosen = Prompt.ask("Pick # to accept / Enter to skip", default="", console=self.console).strip()
        if not chosen:
            return
        if chosen.isdigit() and 1 <= int(chosen) <= len(suggestions):
            word = suggestions[int(chosen) - 1]
            if self.t.accept(text, word):
                self.console.print(f"[green]Accepted:[/green] {word}")
            else:
                self.console.print(f"[yellow]Nothing learned for:[/yellow] {word}")
            return
        self.console.print(f"[red]Not a suggestion number:[/red] {chosen}")

    def show(self, text: str) -> List[str]:
        """Print every tier for `text`; return the top suggestions."""
        t0 = time.perf_counter()
        ex = self.t.explain(text)
        self.metrics.record("explain_time", time.perf_counter() - t0)
        self._display(ex)
        return ex.suggestions

    # DISPLAY --------------------------------------------------------------------
    def _display(self, ex: Explanation):
        limit = self.t.config.get("preview_limit", 5)
        table = Table(title=f"Input: '{ex.text}'", box=box.SIMPLE, show_edge=False)
        table.add_column("Tier", style="cyan")
        table.add_column("Matches", style="bold")
        if ex.exact:
            table.add_row("Exact", ", ".join(ex.exact))
        if ex.prefix:
            table.add_row(f"Prefix (top {limit})", ", ".join(ex.prefix))
        if ex.fuzzy:
            table.add_row(f"Fuzzy (top {limit})", ", ".join(ex.fuzzy))
        if table.row_count:
            self.console.print(table)

        if not ex.suggestions:
            self.console.print("[dim](no suggestions)[/dim]")
            return
        top = Table(title="Suggestions", box=box.SIMPLE, show_edge=False)
        top.add_column("#", justify="right", style="cyan")
        top.add_column("Word", style="green")
        for i, word in enumerate(ex.suggestions, 1):
            top.add_row(str(i), word)
        self.console.print(top)

    def _show_stats(self):
        stats = self.t.tracker.stats()
        table = Table(title="Learning", box=box.MINIMAL)
        table.add_column("Romanization")
        table.add_column("Word")
        table.add_column("Accepted", justify="right")
        for key, word, n in stats["top_accepted"]:
            table.add_row(key, word, str(n))
        self.console.print(table)
        self.console.print(
            f"events={stats['total_events']} pairs={stats['unique_pairs']} "
            f"keys={len(self.t.index)}"
        )
        for key, count, avg in self.metrics.as_rows():
            self.console.print(f"{key:15} n={count} avg={avg * 1000:.2f}ms")

    def _show_config(self):
        lines = "\n".join(f"{k:20} = {v}" for k, v in self.t.config.as_dict().items())
        self.console.print(Panel(lines, title="Config", border_style="cyan"))

    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="khmer-transliterator",
        description="Romanized Khmer to Khmer script suggestions.",
    )
    parser.add_argument("inputs", nargs="*", help="inputs to look up, then exit")
    parser.add_argument("--demo", action="store_true", help="run the demo inputs")
    parser.add_argument("--tui", action="store_true", help="start the terminal UI")
    parser.add_argument("--dataset", help="corpus file (default: packaged dataset)")
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument("--set", nargs=2, action="append", metavar=("KEY", "VALUE"),
                        default=[], help="override a config option")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--log-file", help="also write logs to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()

    cfg = Config.from_env(args.config)
    for key, val in args.set:
        try:
            cfg.set(key, val, persist=False)
        except ConfigError as e:
            console.print(f"[red]Config error:[/red] {e}")
            return 2
    setup_logging(args.log_level or cfg["log_level"], args.log_file)

    with Log.time_block("startup"):
        t = Transliterator.from_corpus(args.dataset, config=cfg)

    if args.tui:
        from khmer_transliterator.tui_app import TransliteratorApp

        TransliteratorApp(t).run()
        return 0

    cli = CLI(t, console=console)
    if args.inputs:
        cli.show_many(args.inputs)
    elif args.demo:
        cli.demo()
    else:
        cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
