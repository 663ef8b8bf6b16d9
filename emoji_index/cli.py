"""
cli.py - interactive emoji lookup shell
Features:
- Loads emoji_data_<language>.json files into an EmojiIndex
- Prefix search in one or several languages, shown as Rich tables
- Editor-style suggestions with popularity tracking
- Language add/remove/reload while running
- One-shot mode: --query prints JSON and exits
"""

from __future__ import annotations

import argparse
import shlex
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from emoji_index.core.errors import EmojiIndexError, MalformedInput
from emoji_index.core.index import EmojiIndex
from emoji_index.popularity import PopularityTracker
from emoji_index.suggest import EmojiSuggester, find_trigger, random_emoji
from emoji_index.utils.config_manager import Config
from emoji_index.utils.data_loader import dataset_path, load_dataset, load_language_file
from emoji_index.utils.logger_utils import LEVELS, Log

HELP = (
    "cmds: /search <q> [lang], /multi <q> <lang,lang>, /suggest <q>, /accept <n>\n"
    "      /langs, /stats, /load <lang>, /remove <lang>, /reload\n"
    "      /top, /reset, /random, /config [key val], /help, /quit"
)


class CLI:
    """Command-line shell around one EmojiIndex. Plain input goes through trigger detection, then /suggest."""

    def __init__(
        self,
        cfg: Config,
        *,
        index: Optional[EmojiIndex] = None,
        popularity: Optional[PopularityTracker] = None,
        console: Optional[Console] = None,
    ):
        self.cfg = cfg
        self.console = console or Console()
        self.index = index or EmojiIndex()
        self.popularity = popularity or PopularityTracker()
        self.suggester = EmojiSuggester.from_config(self.index, cfg, self.popularity)
        self.last_suggestions: List[str] = []
        self.running = True

    # STATE ---------------------------------------------------------------------
    def reload(self) -> bool:
        """(Re)build the whole index from the data directory."""
        data_dir = self.cfg.get("data_dir")
        try:
            self.index.initialize(load_dataset(data_dir))
        except (OSError, EmojiIndexError) as e:
            Log.error(f"[CLI] load from {data_dir} failed: {e}")
            self.console.print(f"[red]Load failed:[/red] {e}")
            return False
        self.console.print(f"[dim]Loaded {', '.join(sorted(self.index.get_languages())) or 'no languages'}.[/dim]")
        return True

    def _sync_suggester(self):
        self.suggester.default_language = self.cfg.get("default_language")
        self.suggester.show_keywords = self.cfg.get("show_keywords")
        self.suggester.max_suggestions = self.cfg.get("max_suggestions")

    # LOOP ------------------------------------------------------------------------
    def run(self):
        self.console.rule("[bold magenta]Emoji Index[/bold magenta]")
        self.console.print("[cyan]Type a keyword for suggestions, /help for commands.[/cyan]")
        while self.running:
            try:
                line = Prompt.ask("[green]>>[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                break
            self.handle(line)

    def handle(self, line: str):
        line = line.strip()
        if not line:
            return
        if not line.startswith("/"):
            # "I feel :roc" suggests for "roc"; a bare keyword is used as is
            m = find_trigger(line, len(line), self.cfg.get("trigger_char"))
            self._suggest(m.query if m else line)
            return
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]bad input:[/red] {e}")
            return
        cmd, args = parts[0].lower(), parts[1:]

        if cmd in ("/q", "/quit", "/exit"):
            self.running = False
            self.console.print("bye.")
        elif cmd == "/help":
            self.console.print(HELP)
        elif cmd == "/search" and args:
            lang = args[1] if len(args) > 1 else self.cfg.get("default_language")
            self._show_matches(self.index.search(args[0], lang), f"{args[0]!r} in {lang}")
        elif cmd == "/multi" and len(args) > 1:
            langs = [x for x in args[1].split(",") if x]
            self._show_matches(self.index.search_multiple(args[0], langs), f"{args[0]!r} in {', '.join(langs)}")
        elif cmd == "/suggest" and args:
            self._suggest(" ".join(args))
        elif cmd == "/accept" and args:
            self._accept(args[0])
        elif cmd == "/langs":
            self.console.print(", ".join(sorted(self.index.get_languages())) or "(none)")
        elif cmd == "/stats":
            self._show_stats()
        elif cmd == "/load" and args:
            self._load_language(args[0])
        elif cmd == "/remove" and args:
            self.index.remove_language(args[0])
            self.console.print(f"[yellow]removed[/yellow] {args[0].lower()}")
        elif cmd == "/reload":
            self.reload()
        elif cmd == "/top":
            self._show_top()
        elif cmd == "/reset":
            self.popularity.reset()
            self.console.print("[yellow]Emoji popularity statistics have been reset.[/yellow]")
        elif cmd == "/random":
            self.console.print(random_emoji())
        elif cmd == "/config":
            self._config(args)
        else:
            self.console.print("unknown cmd")

    # COMMANDS ----------------------------------------------------------------------
    def _suggest(self, query: str):
        self.last_suggestions = self.suggester.suggest(query)
        if not self.last_suggestions:
            self.console.print("[dim](no suggestions)[/dim]")
            return
        table = Table(title="Suggestions", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Emoji")
        for i, value in enumerate(self.last_suggestions, 1):
            table.add_row(str(i), value)
        self.console.print(table)

    def _accept(self, choice: str):
        if not choice.isdigit() or not 1 <= int(choice) <= len(self.last_suggestions):
            self.console.print("[red]pick a number from the last suggestion list[/red]")
            return
        glyph = self.suggester.accept(self.last_suggestions[int(choice) - 1])
        self.console.print(f"[green]Accepted:[/green] {glyph}")

    def _show_matches(self, matches, title: str):
        if not matches:
            self.console.print("[dim](no matches)[/dim]")
            return
        table = Table(title=f"Matches for {title}", box=box.SIMPLE, show_edge=False)
        table.add_column("Keyword", style="bold")
        table.add_column("Emojis")
        for keyword, glyphs in matches:
            table.add_row(keyword, " ".join(glyphs))
        self.console.print(table)

    def _show_stats(self):
        table = Table(title="Loaded Languages", box=box.MINIMAL)
        table.add_column("Language")
        table.add_column("Keywords", justify="right")
        for lang, n in sorted(self.index.get_stats().items()):
            table.add_row(lang, str(n))
        self.console.print(table)

    def _show_top(self):
        top = self.popularity.top(10)
        if not top:
            self.console.print("No emojis used yet")
            return
        lines = [f"{glyph}  Used {n} time{'s' if n != 1 else ''}" for glyph, n in top]
        self.console.print(Panel("\n".join(lines), title="Your Most Used Emojis", border_style="cyan"))

    def _load_language(self, lang: str):
        path = dataset_path(self.cfg.get("data_dir"), lang)
        try:
            self.index.update_language(lang, load_language_file(path))
        except (OSError, MalformedInput) as e:
            self.console.print(f"[red]Load failed:[/red] {e}")
            return
        self.console.print(f"[green]loaded[/green] {lang.lower()} ({self.index.get_stats()[lang.lower()]} keywords)")

    def _config(self, args: List[str]):
        if not args:
            table = Table(title="Config", box=box.MINIMAL)
            table.add_column("Option", style="cyan")
            table.add_column("Value")
            for k, v in self.cfg.data.items():
                table.add_row(k, str(v))
            self.console.print(table)
            return
        if len(args) != 2:
            self.console.print("usage: /config [key val]")
            return
        try:
            self.cfg.set(args[0], args[1])
        except KeyError:
            self.console.print("No such option")
            return
        except ValueError:
            self.console.print("bad val")
            return
        self._sync_suggester()
        if args[0] == "data_dir":
            self.reload()
        self.console.print(f"{args[0]} = {self.cfg.get(args[0])}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="emoji-index", description="Keyword -> emoji lookup")
    parser.add_argument("--config", default="config.json", help="path of the JSON config file")
    parser.add_argument("--data-dir", help="folder with emoji_data_<language>.json files")
    parser.add_argument("--popularity", default=None, help="JSON file for emoji usage counters")
    parser.add_argument("--query", help="run one search, print JSON and exit")
    parser.add_argument("--lang", action="append", help="language(s) for --query, repeatable")
    parser.add_argument(
        "--log-level", default="WARNING", type=str.upper, choices=LEVELS,
        help="minimum level echoed/logged",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # stdout carries only the JSON in one-shot mode
    Log.configure(min_level=args.log_level, echo=args.query is None)

    cfg = Config(args.config)
    if args.data_dir:
        cfg.data["data_dir"] = args.data_dir

    console = Console(stderr=args.query is not None)
    cli = CLI(cfg, popularity=PopularityTracker(args.popularity), console=console)
    if not cli.reload():
        return 1

    if args.query is not None:
        langs = args.lang or [cfg.get("default_language")]
        print(cli.index.search_multiple_json(args.query, langs))
        return 0

    cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
