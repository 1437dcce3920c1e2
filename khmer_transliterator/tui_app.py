# tui_app.py - Khmer transliterator TUI
# -------------------------------------------------------
# Small keyboard-like terminal UI on top of the Transliterator:
#  - live top-3 suggestions as you type the romanization
#  - accept with 1-3 (Tab takes the first one)
#  - accepted words are appended to the composed text and learned
#  - latency of the last lookup in the status bar
# A digit 1-3 only picks when that many suggestions are on screen;
# otherwise it is typed into the romanization like any other character.
# -------------------------------------------------------

from __future__ import annotations

import logging
import time
from typing import List

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from khmer_transliterator.core.transliterator import Transliterator

logger = logging.getLogger(__name__)

PICK_KEYS = ("1", "2", "3")


class RomanInput(Input):
    """Romanization box. Digits 1-3 pick the matching on-screen suggestion."""

    async def _on_key(self, event: events.Key) -> None:
        if event.character not in PICK_KEYS:
            return
        app = self.app
        idx = PICK_KEYS.index(event.character)
        if isinstance(app, TransliteratorApp) and idx < len(app.suggestions):
            # stop Input._on_key from typing the digit
            event.stop()
            event.prevent_default()
            app.action_accept(idx)


class SuggestionPanel(Static):
    """Right-side panel: numbered suggestions, best first."""

    def update_suggestions(self, suggestions: List[str]) -> None:
        if not suggestions:
            self.update("[dim]No suggestions[/dim]")
            return
        lines = [f"[b]{i}[/b] • [green]{word}[/green]" for i, word in enumerate(suggestions, 1)]
        self.update("\n".join(lines))


class ComposedText(Static):
    """Text built from accepted words."""

    def set_text(self, text: str) -> None:
        self.update(text or "[dim]Accepted words appear here[/dim]")


class TypingLatency(Static):
    def set_latency(self, seconds: float) -> None:
        self.update(f"[dim]Latency:[/dim] {seconds * 1000:.1f}ms")


class TransliteratorApp(App):
    """
    UI events -> Transliterator.suggest -> reactive state -> widgets.
    Accepting a suggestion calls Transliterator.accept so ranking learns.
    """

    TITLE = "Khmer Transliterator"
    CSS = """
    #left { width: 2fr; }
    #right { width: 1fr; border: round $accent; padding: 0 1; }
    #composed { padding: 1 0; }
    #bottom { height: 1; }
    """

    BINDINGS = [
        Binding("tab", "accept(0)", "Accept top", priority=True),
        Binding("ctrl+l", "clear_text", "Clear text"),
    ]

    suggestions = reactive(list, init=False)
    composed = reactive("", init=False)
    latency = reactive(0.0, init=False)

    def __init__(self, transliterator: Transliterator):
        super().__init__()
        self.t = transliterator

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Container(id="left"):
                yield RomanInput(placeholder="Type romanized Khmer…", id="roman")
                yield ComposedText(id="composed")
            with Container(id="right"):
                yield SuggestionPanel(id="suggestions")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(Input).focus()
        self.query_one(ComposedText).set_text(self.composed)
        self.query_one(SuggestionPanel).update_suggestions(self.suggestions)

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-run suggest on every keystroke."""
        start = time.perf_counter()
        self.suggestions = self.t.suggest(event.value)
        self.latency = time.perf_counter() - start

    # Reactive state (watchers) ---------------------------------------------
    def watch_suggestions(self, suggestions: List[str]) -> None:
        self.query_one(SuggestionPanel).update_suggestions(suggestions)

    def watch_composed(self, composed: str) -> None:
        self.query_one(ComposedText).set_text(composed)

    def watch_latency(self, latency: float) -> None:
        self.query_one(TypingLatency).set_latency(latency)

    # Actions ---------------------------------------------------------------
    def action_accept(self, idx: int) -> None:
        """Accept suggestion `idx`: learn it, append it, reset the input."""
        if not 0 <= idx < len(self.suggestions):
            return
        word = self.suggestions[idx]
        roman = self.query_one(Input)
        self.t.accept(roman.value, word)
        logger.debug("tui accepted %r for %r", word, roman.value)
        self.composed = self.composed + word
        roman.value = ""
        self.suggestions = []

    def action_clear_text(self) -> None:
        self.composed = ""
