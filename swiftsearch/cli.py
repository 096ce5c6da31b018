"""
cli.py - command line front-end for the SwiftSearch index
Features:
- Type a prefix, get the matching dictionary words (typed part highlighted)
- Slash commands to add words, check membership, tweak config, look at stats
- One-shot mode (--query) for scripts, --tui for the full-screen search box
- Uses Rich for tables and formatting
"""

import argparse
import shlex
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table
from rich import box
from rich.markup import escape

from swiftsearch.core.autocompleter import AutoCompleter
from swiftsearch.profiling.profile import benchmark, summarize
from swiftsearch.utils.cache_utils import timed
from swiftsearch.utils.config_manager import Config
from swiftsearch.utils.highlight import highlight
from swiftsearch.utils.logger_utils import Log
from swiftsearch.utils.metrics_tracker import Metrics

# initialise console for rich output
console = Console()

HELP = (
    "cmds: /add <word>, /has <word>, /limit <n>, /config [key val]\n"
    "      /stats, /bench, /help, /quit"
)


class CLI:
    """Interactive loop: anything not starting with / is treated as a prefix."""

    def __init__(self, ac: AutoCompleter, metrics: Optional[Metrics] = None):
        self.ac = ac
        self.cfg = ac.cfg
        self.metrics = metrics if metrics is not None else Metrics(self.cfg.get("metrics_path"))
        self.running = True
        self._search = timed(self.ac.search)

    def run(self):
        console.rule("[bold magenta]SwiftSearch[/bold magenta]")
        console.print(f"[cyan]{len(self.ac.index)} words loaded. Type a prefix, /help for commands.[/cyan]")
        while self.running:
            try:
                line = Prompt.ask("[green]>>[/green]", default="", console=console)
            except (EOFError, KeyboardInterrupt):
                console.print("\nbye.")
                break
            self.handle(line)

    def handle(self, line: str):
        line = line.strip()
        if not line:
            return
        if line.startswith("/"):
            self.cmd(line)
        else:
            self.suggest(line)

    # QUERIES -----------------------------------------------------------
    def suggest(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        out, dt = self._search(prefix, limit)
        self.metrics.record("query_time", dt)
        if not out:
            console.print("[dim](no suggestions)[/dim]")
            return out

        table = Table(box=box.SIMPLE, show_header=True, header_style="bold cyan")
        table.add_column("#", justify="right", style="dim")
        table.add_column("suggestion")
        for i, word in enumerate(out, 1):
            table.add_row(str(i), highlight(word, prefix, style="bold yellow"))
        console.print(table)
        console.print(f"[dim]{len(out)} suggestions in {dt * 1000:.3f} ms[/dim]")
        return out

    # COMMAND HANDLING -----------------------------------------------------------
    def cmd(self, line: str):
        try:
            p = shlex.split(line)
        except ValueError as e:
            console.print(f"[red]bad input:[/red] {e}")
            return
        c = p[0].lower()
        args = p[1:]

        if c in ("/q", "/quit", "/exit"):
            self.running = False
            console.print("bye.")

        elif c == "/help":
            console.print(HELP)

        elif c == "/add" and args:
            word = " ".join(args)
            if self.ac.add_word(word):
                console.print(f"[green]added:[/green] {escape(word)}")
            else:
                console.print(f"[yellow]already known:[/yellow] {escape(word)}")

        elif c == "/has" and args:
            word = " ".join(args)
            found = self.ac.contains(word)
            console.print(f"{escape(word)}: " + ("[green]yes[/green]" if found else "[red]no[/red]"))

        elif c == "/limit" and len(args) == 1:
            self._set_option("limit", args[0])

        elif c == "/config":
            if not args:
                self._show_config()
            elif len(args) == 2:
                self._set_option(args[0], args[1])
            else:
                console.print("usage: /config [key val]")

        elif c == "/stats":
            self._show_stats()

        elif c == "/bench":
            self._bench()

        else:
            console.print(f"[red]Unknown command:[/red] {escape(line)}")

    def _set_option(self, key, val):
        try:
            self.cfg.set(key, val)
        except (KeyError, ValueError) as e:
            console.print(f"[red]config:[/red] {e.args[0] if e.args else e}")
            return
        if key == "log_level":
            self.ac.log.set_level(self.cfg[key])
        console.print(f"{key} = {self.cfg[key]}")

    def _show_config(self):
        table = Table(box=box.SIMPLE, show_header=False)
        for k, v in self.cfg.items():
            table.add_row(k, str(v))
        console.print(table)

    def _show_stats(self):
        s = self.ac.stats()
        cache = s["cache"]
        console.print(
            f"words={s['words']} nodes={s['nodes']} uptime={s['uptime_s']}s\n"
            f"cache entries={cache['entries']} hits={cache['hits']} misses={cache['misses']}"
        )
        for k, v in self.metrics.snapshot().items():
            console.print(f"  {k:15} {v['avg'] * 1000:.4f} ms avg over {v['count']}")

    def _bench(self):
        prefixes = sorted({w[:2] for w in self.ac.index.iter_words() if len(w) >= 2})
        cold = summarize(benchmark(self.ac, prefixes, iterations=200, cold=True, seed=7))
        warm = summarize(benchmark(self.ac, prefixes, iterations=200, seed=7))
        console.print(
            f"bench: cold median {cold['median_ms']:.4f} ms, "
            f"cached median {warm['median_ms']:.4f} ms over {cold['count']} queries"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="swiftsearch", description="Prefix autocomplete over a word list.")
    parser.add_argument("--words", help="word file, one word per line")
    parser.add_argument("--limit", type=int, help="suggestions per query (default 8)")
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument("--log", help="log file path")
    parser.add_argument("--query", help="print suggestions for PREFIX and exit")
    parser.add_argument("--tui", action="store_true", help="open the full-screen search box")
    return parser


def build_autocompleter(args) -> AutoCompleter:
    cfg = Config(args.config)
    if args.words:
        cfg.set("words_file", args.words, persist=False)
    if args.limit is not None:
        cfg.set("limit", args.limit, persist=False)
    if args.log:
        cfg.set("log_path", args.log, persist=False)
    log = Log(path=cfg.get("log_path"), level=cfg.get("log_level", "INFO"))
    return AutoCompleter(config=cfg, log=log)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        ac = build_autocompleter(args)
    except (FileNotFoundError, KeyError, ValueError) as e:
        console.print(f"[red]error:[/red] {e.args[0] if e.args else e}")
        return 1

    if args.query is not None:
        for word in ac.search(args.query):
            console.print(word, markup=False, highlight=False)
        return 0

    if args.tui:
        from swiftsearch.tui_app import SwiftSearchApp

        SwiftSearchApp(ac).run()
        return 0

    CLI(ac).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
