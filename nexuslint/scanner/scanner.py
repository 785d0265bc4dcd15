"""Comment/quote scanner."""

from __future__ import annotations

from dataclasses import dataclass

from nexuslint.diagnostics import (
    SCAN_UNCLOSED_COMMENT,
    SCAN_UNCLOSED_QUOTE,
    SCAN_UNEXPECTED_CLOSING_BRACKET,
    Diagnostic,
)
from nexuslint.text import TextRange

QUOTE = "'"
OPEN_COMMENT = "["
CLOSE_COMMENT = "]"


@dataclass(frozen=True, slots=True)
class BalanceReport:
    """Bracket and quote balance of one document."""

    unclosed_quote: bool
    unexpected_closing: tuple[int, ...]
    unclosed_openings: tuple[int, ...]
    end_offset: int

    @property
    def is_balanced(self) -> bool:
        return not (self.unclosed_quote or self.unexpected_closing or self.unclosed_openings)

    @property
    def unclosed_region(self) -> TextRange | None:
        """Outermost unclosed `[` up to end-of-document.

        Nested unclosed comments share this one region so a host draws a
        single highlight instead of one per nesting level.
        """
        if not self.unclosed_openings:
            return None
        return TextRange.from_offsets(self.unclosed_openings[0], self.end_offset)

    def diagnostics(self) -> list[Diagnostic]:
        diagnostics = [
            Diagnostic.from_spec(SCAN_UNEXPECTED_CLOSING_BRACKET, TextRange.single(offset))
            for offset in self.unexpected_closing
        ]
        diagnostics.extend(
            Diagnostic.from_spec(SCAN_UNCLOSED_COMMENT, TextRange.single(offset))
            for offset in self.unclosed_openings
        )
        if self.unclosed_quote:
            last = max(self.end_offset - 1, 0)
            diagnostics.append(Diagnostic.from_spec(SCAN_UNCLOSED_QUOTE, TextRange.from_offsets(last, self.end_offset)))
        return diagnostics


class CommentQuoteScanner:
    """Single-pass scanner tracking quote state and nested `[...]` comment depth.

    Quotes are recognised at every depth, and while a quote is open brackets
    are literal data. A doubled `''` inside a quote is an escaped quote and
    never toggles quote state.
    """

    def __init__(self, source: str, *, collect_text: bool = False) -> None:
        self._source = source
        self._position = 0
        self._in_quote = False
        self._open_stack: list[int] = []
        self._unexpected: list[int] = []
        self._collect_text = collect_text
        self._kept: list[str] = []

    @property
    def depth(self) -> int:
        return len(self._open_stack)

    @property
    def in_quote(self) -> bool:
        return self._in_quote

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def scan(self) -> CommentQuoteScanner:
        while not self.is_eof:
            self._step()
        return self

    def report(self) -> BalanceReport:
        return BalanceReport(
            unclosed_quote=self._in_quote,
            unexpected_closing=tuple(self._unexpected),
            unclosed_openings=tuple(self._open_stack),
            end_offset=len(self._source),
        )

    def kept_text(self) -> str:
        """Text outside comments with quote delimiters and whitespace removed."""
        if not self._collect_text:
            raise ValueError("Scanner was not created with collect_text=True")
        return "".join("".join(self._kept).split())

    def _step(self) -> None:
        ch = self._current_char()

        if ch == QUOTE:
            if self._in_quote and self._peek_char() == QUOTE:
                self._keep(QUOTE)
                self._advance(2)
                return
            self._in_quote = not self._in_quote
            self._advance(1)
            return

        if self._in_quote:
            self._keep(ch)
            self._advance(1)
            return

        if ch == OPEN_COMMENT:
            self._open_stack.append(self._position)
        elif ch == CLOSE_COMMENT:
            if self._open_stack:
                self._open_stack.pop()
            else:
                self._unexpected.append(self._position)
        else:
            self._keep(ch)
        self._advance(1)

    def _keep(self, ch: str) -> None:
        if self._collect_text and not self._open_stack:
            self._kept.append(ch)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def scan_balance(text: str) -> BalanceReport:
    """Check bracket and quote balance over a whole document."""
    return CommentQuoteScanner(text).scan().report()


def strip_comments(text: str) -> str:
    """Remove comments, quote delimiters and whitespace from `text`.

    >>> strip_comments("AC[ comment ]GT  TT")
    'ACGTTT'
    """
    return CommentQuoteScanner(text, collect_text=True).scan().kept_text()
