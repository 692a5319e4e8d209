"""
cli.py - interactive word suggester
Features:
- Load words as "word" or "word:popularity" tokens (arguments, a file, or typed in)
- Menu: search by prefix (with "did you mean" fallback), show all words, exit
- Uses Rich for tables and formatting
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from word_suggester.cli.tokens import is_valid_word, parse_entry, split_tokens
from word_suggester.core.engine import CORRECTION, SuggestionEngine
from word_suggester.core.errors import InvalidWord, ResourceExhausted
from word_suggester.core.ranker import Suggestion
from word_suggester.utils.config_manager import Config
from word_suggester.utils.logger_utils import setup_logging

logger = logging.getLogger(__name__)

MENU = "\n[bold]Menu:[/bold]\n1. Search by prefix\n2. Show all words\n3. Exit"


class CLI:
    """Command-line interface: load a vocabulary, then serve the menu loop."""

    def __init__(self, cfg: Optional[Config] = None,
                 console: Optional[Console] = None,
                 stream: Optional[TextIO] = None):
        """
        stream: read answers from this file instead of stdin (used by tests/pipes)
        """
        self.cfg = cfg or Config()
        self.console = console or Console()
        self.stream = stream
        self.engine = SuggestionEngine(
            max_suggestions=self.cfg["max_suggestions"],
            max_distance=self.cfg["max_distance"],
        )
        self.running = True
        self._pending: List[str] = []

    # INPUT -----------------------------------------------------------
    def _read_line(self, prompt: str) -> str:
        line = self.console.input(prompt, stream=self.stream)
        if self.stream is not None and not line:
            raise EOFError
        return line.strip()

    def _read_token(self, prompt: str) -> str:
        # one whitespace-separated token at a time, several may share a line
        while not self._pending:
            self._pending.extend(self._read_line(prompt).split())
        return self._pending.pop(0)

    # LOADING ---------------------------------------------------------
    def load_tokens(self, tokens: Iterable[str]) -> int:
        """Insert every valid token, report and skip invalid ones. Returns the count inserted."""
        n = 0
        for tok in tokens:
            try:
                word, popularity = parse_entry(tok, self.cfg["max_word_length"])
            except InvalidWord as e:
                self.console.print(f"[red]Invalid word[/red] {escape(repr(tok))}: {escape(str(e))}")
                continue
            self.engine.insert(word, popularity)
            n += 1
        logger.info("loaded %d words", n)
        return n

    def load_file(self, path: str) -> int:
        with open(path, "r", encoding="utf-8") as f:
            return self.load_tokens(split_tokens(f))

    def prompt_words(self) -> int:
        """Ask how many words, then read that many valid tokens."""
        max_words = self.cfg["max_words"]
        count = self._ask_count(max_words)
        self.console.print("Enter words (one per line) with optional popularity (word:popularity):")
        n = 0
        while n < count:
            tok = self._read_token("")
            try:
                word, popularity = parse_entry(tok, self.cfg["max_word_length"])
            except InvalidWord:
                self.console.print("[red]Invalid word. Try again.[/red]")
                continue
            self.engine.insert(word, popularity)
            n += 1
        return n

    def _ask_count(self, max_words: int) -> int:
        prompt = f"How many words do you want to enter? (1-{max_words}): "
        while True:
            raw = self._read_token(prompt)
            try:
                count = int(raw)
            except ValueError:
                count = 0
            if 1 <= count <= max_words:
                return count
            self._pending.clear()
            prompt = f"Invalid input. Enter a number between 1 and {max_words}: "

    # MENU ------------------------------------------------------------
    def run(self) -> None:
        while self.running:
            try:
                self.console.print(MENU)
                choice = self._read_line("Choose an option: ")
                self.handle_choice(choice)
            except (EOFError, KeyboardInterrupt):
                self._exit()

    def handle_choice(self, choice: str) -> None:
        if choice == "1":
            prefix = self._read_line("Enter prefix to search: ")
            self.search(prefix)
        elif choice == "2":
            self.show_all()
        elif choice == "3":
            self._exit()
        else:
            self.console.print("[red]Invalid choice. Try again.[/red]")

    def search(self, prefix: str) -> None:
        prefix = prefix.split()[0] if prefix.split() else ""
        if not is_valid_word(prefix):
            self.console.print("[red]Invalid prefix. Only letters allowed.[/red]")
            return

        result = self.engine.suggest(prefix)
        if result.kind == CORRECTION:
            self.console.print(f'No words with prefix "{prefix}". Trying spell correction...')
            if result.items:
                self._print_table("Did you mean:", result.items, "distance")
            else:
                self.console.print("No similar words found.")
            return
        self._print_table(f'Suggestions for "{prefix}":', result.items, "frequency")

    def show_all(self) -> None:
        self.console.print("\nAll words in the Trie:")
        table = Table(box=box.SIMPLE)
        table.add_column("#", justify="right")
        table.add_column("word")
        for i, (word, _popularity) in enumerate(self.engine.list_all(), 1):
            table.add_row(str(i), word)
        self.console.print(table)

    def _print_table(self, title: str, items: List[Suggestion], column: str) -> None:
        self.console.print(title)
        table = Table(box=box.SIMPLE)
        table.add_column("#", justify="right")
        table.add_column("word")
        table.add_column(column, justify="right")
        for i, s in enumerate(items, 1):
            value = s.distance if column == "distance" else s.popularity
            table.add_row(str(i), s.word, str(value))
        self.console.print(table)

    def _exit(self) -> None:
        self.console.print("Exiting...")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="word-suggester",
        description="Trie-based word suggestions with spell correction.",
    )
    p.add_argument("entries", nargs="*", help="words as word or word:popularity")
    p.add_argument("--file", "-f", help="read word[:popularity] tokens from a file")
    p.add_argument("--config", "-c", help="JSON config file")
    p.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return p


def main(argv: Optional[List[str]] = None, stream: Optional[TextIO] = None,
         console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    setup_logging("DEBUG" if args.verbose else cfg["log_level"])

    cli = CLI(cfg, console=console, stream=stream)
    cli.console.rule("[bold magenta]Trie-Based Word Suggestion System[/bold magenta]")
    try:
        if args.entries or args.file:
            if args.file:
                cli.load_file(args.file)
            cli.load_tokens(args.entries)
        else:
            try:
                cli.prompt_words()
            except (EOFError, KeyboardInterrupt):
                cli.console.print("Exiting...")
                return 0
        cli.run()
    except ResourceExhausted as e:
        logger.error("out of memory: %s", e)
        return 1
    except OSError as e:
        logger.error("cannot read words: %s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
