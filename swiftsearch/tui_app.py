# tui_app.py - SwiftSearch TUI Application
# -------------------------------------------------------
# Full-screen search box over the prefix index.
# Features:
#  - Suggestions refresh on every keystroke
#  - Typed fragment highlighted inside each suggestion
#  - Up/Down to move through the list (wraps), Enter to pick, Escape to close
#  - Suggestion count + query latency in the status line
# -------------------------------------------------------

from __future__ import annotations
import time

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from swiftsearch.core.autocompleter import AutoCompleter
from swiftsearch.tui.navigator import SuggestionNavigator
from swiftsearch.utils.highlight import highlight


class SuggestionPanel(Static):
    """
    Dropdown under the input.
    Shows the current suggestions with the typed part in bold and the
    highlighted row reversed; empty when the list is closed.
    """
    def update_suggestions(self, nav: SuggestionNavigator):
        if not nav.is_open:
            self.update("")
            return
        if not nav.suggestions:
            self.update("[dim]No suggestions[/dim]")
            return

        out = Text()
        for i, word in enumerate(nav.suggestions):
            line = highlight(word, nav.query)
            if i == nav.active_index:
                line.stylize("reverse")
            if i:
                out.append("\n")
            out.append_text(line)
        self.update(out)


class StatusLine(Static):
    """Bottom readout: how many suggestions and how long the query took."""
    def show(self, count: int, seconds: float):
        ms = seconds * 1000
        self.update(f"[dim]{count} suggestions · {ms:.3f} ms · ↑ ↓ ↵ to navigate[/dim]")


# Main Application -----------------------------------------------------------------
class SwiftSearchApp(App):
    """
    The main Textual app.
    Architecture:
     - Input events to AutoCompleter.search
     - results into the SuggestionNavigator
     - navigator state to the panel
    """
    CSS_PATH = "tui_style.css"
    TITLE = "SwiftSearch"

    BINDINGS = [
        Binding("down", "cursor_down", "Next", priority=True),
        Binding("up", "cursor_up", "Previous", priority=True),
        Binding("escape", "close", "Close", priority=True),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    latency = reactive(0.0)  # last measured query time

    def __init__(self, ac: AutoCompleter):
        super().__init__()
        self.ac = ac
        self.nav = SuggestionNavigator()
        self._picked = False

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="search"):
            yield Input(placeholder="Search for technologies...", id="query")
            yield SuggestionPanel(id="suggestions")
        with Horizontal(id="bottom"):
            yield StatusLine(id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(Input).focus()

    # Typing: re-run the prefix query on every change
    def on_input_changed(self, event: Input.Changed) -> None:
        fragment = event.value
        start = time.perf_counter()
        results = self.ac.search(fragment)
        self.latency = time.perf_counter() - start

        self.nav.update(fragment, results)
        if self._picked:
            # value changed because a suggestion was picked, keep the list shut
            self._picked = False
            self.nav.close()
        self._refresh_panel()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        word = self.nav.select()
        if word is None:
            return
        input_widget = self.query_one(Input)
        if input_widget.value == word:
            self._refresh_panel()
            return
        self._picked = True
        input_widget.value = word
        input_widget.cursor_position = len(word)

    # Actions ----------------------------------------------------------------------
    def action_cursor_down(self) -> None:
        self.nav.move_down()
        self._refresh_panel()

    def action_cursor_up(self) -> None:
        self.nav.move_up()
        self._refresh_panel()

    def action_close(self) -> None:
        self.nav.close()
        self._refresh_panel()

    def _refresh_panel(self) -> None:
        self.query_one(SuggestionPanel).update_suggestions(self.nav)
        self.query_one(StatusLine).show(len(self.nav.suggestions), self.latency)


if __name__ == "__main__":
    SwiftSearchApp(AutoCompleter()).run()
