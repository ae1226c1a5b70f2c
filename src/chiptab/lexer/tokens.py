"""Token types, the ordered grammar and the Token dataclass for the score lexer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple


class TokenType(Enum):
    """Every distinct token the score lexer can produce."""

    # Fallback for anything the grammar does not recognise
    ANY_STRING = auto()

    # Structure
    COMMENT = auto()        # # ...
    SEND_ARROW = auto()     # <-
    LOOP_TAG = auto()       # loop:
    OPEN_KEY = auto()       # {
    CLOSE_TUPLE = auto()    # }3
    CLOSE_KEY = auto()      # }
    ADSR_VECTOR = auto()    # adsr: 10->80, 20->40, 30, 50
    MAP_ENTRY = auto()      # wave: square
    SEPARATOR = auto()      # |
    CONST_NAME = auto()     # $intro
    ASSIGN = auto()         # :=
    CHANNEL_ID = auto()     # @ch1
    CHANNEL_SYNC = auto()   # --

    # Tablature
    NOTE = auto()
    SILENCE = auto()
    OCTAVE = auto()
    OCTAVE_STEP = auto()
    NUMBER = auto()


class TokenDef(NamedTuple):
    """One lexical class: a token type and the pattern that recognises it."""

    type: TokenType
    pattern: re.Pattern[str]


def _define(token_type: TokenType, pattern: str) -> TokenDef:
    return TokenDef(token_type, re.compile(pattern, re.ASCII))


# Ordered grammar. The first entry matching at a position wins, whatever the
# match length. Tablature entries are permissive (a bare letter is a note) so
# they must stay at the bottom, below every structural entry.
TOKEN_DEFS: tuple[TokenDef, ...] = (
    _define(TokenType.COMMENT, r"#.*"),
    _define(TokenType.SEND_ARROW, r"<-"),
    _define(TokenType.LOOP_TAG, r"[Ll][Oo][Oo][Pp]\s*:"),
    _define(TokenType.OPEN_KEY, r"\{"),
    _define(TokenType.CLOSE_TUPLE, r"\}(\d+)"),
    _define(TokenType.CLOSE_KEY, r"\}"),
    _define(
        TokenType.ADSR_VECTOR,
        r"[Aa][Dd][Ss][Rr]\s*:\s*(\d+)\s*->\s*(\d+)\s*,\s*(\d+)\s*->\s*(\d+)"
        r"\s*,\s*(\d+)\s*,\s*(\d+)",
    ),
    _define(TokenType.MAP_ENTRY, r"(\w+)\s*:\s*(\w+)"),
    _define(TokenType.SEPARATOR, r"\|+"),
    _define(TokenType.CONST_NAME, r"\$(\w+)"),
    _define(TokenType.ASSIGN, r":="),
    _define(TokenType.CHANNEL_ID, r"@(\w+)"),
    _define(TokenType.CHANNEL_SYNC, r"-{2,}"),
    # Tablature
    _define(TokenType.NOTE, r"([a-gA-G])([#+\-]?)(\d*)(\.*)"),
    _define(TokenType.SILENCE, r"[Rr](\d*)"),
    _define(TokenType.OCTAVE, r"[Oo](\d)"),
    _define(TokenType.OCTAVE_STEP, r"(<|>)"),
    _define(TokenType.NUMBER, r"(\d+)"),
)

# Catch-all for unrecognised input: the whole run of non-whitespace.
_ANY_STRING_PATTERN = r"\S+"

# A single matcher for finding token spans. Alternatives are tried in
# TOKEN_DEFS order and re.match anchors all of them at the scan position.
TOKEN_REGEX: re.Pattern[str] = re.compile(
    "|".join(f"(?:{d.pattern.pattern})" for d in TOKEN_DEFS)
    + f"|(?:{_ANY_STRING_PATTERN})",
    re.ASCII,
)


def classify(text: str) -> tuple[TokenType, tuple[str, ...]]:
    """Return the type and capture groups of an already matched span.

    The ordered entries are re-applied to the whole span, so each type keeps
    its own capture groups. Text matching no entry is ``ANY_STRING``.
    """
    for token_def in TOKEN_DEFS:
        match = token_def.pattern.fullmatch(text)
        if match is not None:
            return token_def.type, match.groups(default="")
    return TokenType.ANY_STRING, ()


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the lexer.

    Tokens are immutable and carry their source location. `groups` holds
    the capture groups of the grammar entry that recognised `value`.
    """

    type: TokenType
    value: str
    line: int
    column: int
    groups: tuple[str, ...] = ()
    file: str = "<unknown>"

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
