"""Score lexer: line-buffered, pull-based scanner over a text stream.

Design decisions:
- One physical line is buffered at a time; tokens never span lines.
- Only spaces and tabs separate tokens. Line terminators end the line.
- Spans are found with the combined TOKEN_REGEX, then classified by
  re-checking the ordered grammar entries (see `tokens.classify`).
- Unrecognised text is not an error: it becomes an ANY_STRING token.
"""

from __future__ import annotations

import io
import logging
from typing import Iterator, TextIO

from chiptab.lexer.tokens import TOKEN_REGEX, Token, TokenType, classify

logger = logging.getLogger(__name__)


class LexerError(Exception):
    """Raised when scanning cannot continue, with source location."""

    def __init__(self, message: str, line: int, column: int, file: str = "<unknown>"):
        self.line = line
        self.column = column
        self.file = file
        super().__init__(f"{file}:{line}:{column}: {message}")


class Lexer:
    """Tokenizes score text into `Token` objects, one at a time.

    Usage::

        lexer = Lexer(stream, filename="song.mml")
        while lexer.advance():
            token = lexer.fetch()

    `source` may be any object with a ``readline()`` method returning
    text, or a plain string.
    """

    WHITESPACE = " \t"

    def __init__(self, source: TextIO | str, filename: str = "<unknown>") -> None:
        if isinstance(source, str):
            source = io.StringIO(source)
        self.source = source
        self.filename = filename
        self.line = 0
        self.column = 1
        self.rest = ""
        self._pending: tuple[str, int] | None = None
        self._exhausted = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def exhausted(self) -> bool:
        """True once the stream has ended and the last line is consumed."""
        return self._exhausted

    def advance(self) -> bool:
        """Move to the next token. Returns False at the end of the input."""
        self._pending = None
        while not self._exhausted:
            self._skip_spaces()
            if self.rest:
                match = TOKEN_REGEX.match(self.rest)
                if match is not None:
                    text = match.group()
                    self._pending = (text, self.column)
                    self.column += len(text)
                    self.rest = self.rest[match.end():]
                    return True
            self._read_line()
        return False

    def fetch(self) -> Token:
        """Return the token found by the last successful `advance()`."""
        if self._pending is None:
            raise LexerError(
                "fetch() called without a successful advance()",
                self.line, self.column, self.filename,
            )
        text, column = self._pending
        token_type, groups = classify(text)
        if token_type is TokenType.ANY_STRING:
            logger.debug("%s:%d:%d: unrecognised text %r", self.filename, self.line, column, text)
        return Token(token_type, text, self.line, column, groups, self.filename)

    def tokenize(self) -> list[Token]:
        """Tokenize the rest of the input and return the token list."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while self.advance():
            yield self.fetch()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _skip_spaces(self) -> None:
        """Skip horizontal whitespace (spaces and tabs, not newlines)."""
        stripped = self.rest.lstrip(self.WHITESPACE)
        self.column += len(self.rest) - len(stripped)
        self.rest = stripped

    def _read_line(self) -> None:
        """Replace the consumed remainder with the next physical line."""
        try:
            line = self.source.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise LexerError(
                f"can't read next line: {e}",
                self.line + 1, 1, self.filename,
            ) from e

        if not line:
            self._exhausted = True
            self.rest = ""
            logger.debug("%s: end of input after %d line(s)", self.filename, self.line)
            return

        self.line += 1
        self.column = 1
        self.rest = line.rstrip("\r\n")
        logger.debug("%s:%d: read %d character(s)", self.filename, self.line, len(self.rest))
