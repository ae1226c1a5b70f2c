"""Per-type decoders turning tokens into typed song values.

Every decoder accepts only tokens of its own type. Handing it anything else
is a programming error in the caller and raises `TokenContractError`.
Invalid user input that the grammar cannot rule out (a note length out of
range) raises `DecodeError` instead, which callers are expected to report
and continue past.
"""

from __future__ import annotations

from datetime import timedelta

from chiptab.lexer.tokens import Token, TokenType
from chiptab.song.note import (
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MIN_LENGTH,
    PITCHES,
    Halftone,
    Note,
    Pitch,
    TimePoint,
)


class TokenContractError(RuntimeError):
    """A token was decoded in a way the grammar should have made impossible."""

    def __init__(self, message: str, token: Token):
        self.token = token
        super().__init__(f"BUG detected at {token.location}: {message}")


class DecodeError(Exception):
    """Raised when a well-formed token carries an invalid value."""

    def __init__(self, message: str, token: Token):
        self.token = token
        super().__init__(f"{token.location}: {message}")


class NoteLengthError(DecodeError):
    """Note length outside [MIN_LENGTH, MAX_LENGTH].

    `note` holds everything else that was decoded, with the default length.
    """

    def __init__(self, length: int, token: Token, note: Note):
        self.length = length
        self.min_length = MIN_LENGTH
        self.max_length = MAX_LENGTH
        self.note = note
        super().__init__(
            f"wrong note length: {length}. Must be in range {MIN_LENGTH} to {MAX_LENGTH}",
            token,
        )


_HALFTONES: dict[str, Halftone] = {
    "": Halftone.NONE,
    "#": Halftone.SHARP,
    "+": Halftone.SHARP,
    "-": Halftone.FLAT,
}

_OCTAVE_STEPS: dict[str, int] = {
    "<": -1,
    ">": +1,
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _expect(token: Token, expected: TokenType) -> None:
    if token.type is not expected:
        raise TokenContractError(
            f"expected type {expected.name}, got {token.type.name}", token,
        )


def _to_int(token: Token, digits: str) -> int:
    """Convert a capture the grammar guarantees to be a digit run."""
    if not digits.isdigit():
        raise TokenContractError(f"expected number, got {digits!r}", token)
    return int(digits)


# ---------------------------------------------------------------------------
# Tablature
# ---------------------------------------------------------------------------

def note_of(token: Token) -> Note:
    """Decode a NOTE token such as ``C#4..`` into a `Note`."""
    _expect(token, TokenType.NOTE)
    letter, halftone, length, dots = token.groups

    pitch = PITCHES.get(letter.upper())
    if pitch is None:
        raise TokenContractError(f"pitch can't be {letter!r}", token)
    if halftone not in _HALFTONES:
        raise TokenContractError(f"wrong halftone {halftone!r}", token)

    note = Note(
        pitch=pitch,
        length=DEFAULT_LENGTH,
        halftone=_HALFTONES[halftone],
        dots=len(dots),
    )
    if not length:
        return note

    value = _to_int(token, length)
    if value < MIN_LENGTH or value > MAX_LENGTH:
        raise NoteLengthError(value, token, note)
    return Note(note.pitch, value, note.halftone, note.dots)


def silence_of(token: Token) -> Note:
    """Decode a SILENCE token (``r`` or ``r8``). The length is not range checked."""
    _expect(token, TokenType.SILENCE)
    (length,) = token.groups
    if not length:
        return Note(Pitch.SILENCE, DEFAULT_LENGTH)
    return Note(Pitch.SILENCE, _to_int(token, length))


def octave_of(token: Token) -> int:
    _expect(token, TokenType.OCTAVE)
    return _to_int(token, token.groups[0])


def octave_step_of(token: Token) -> int:
    """``<`` steps one octave down, ``>`` one octave up."""
    _expect(token, TokenType.OCTAVE_STEP)
    try:
        return _OCTAVE_STEPS[token.value]
    except KeyError:
        raise TokenContractError(f"invalid octave step {token.value!r}", token) from None


def number_of(token: Token) -> int:
    _expect(token, TokenType.NUMBER)
    return _to_int(token, token.groups[0])


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------

def adsr_of(token: Token) -> list[TimePoint]:
    """Decode ``adsr: t1->l1, t2->l2, t3, t4`` into four envelope breakpoints.

    Times are milliseconds and levels are percentages. The sustain point
    holds the decay level and the release point always falls to zero.
    """
    _expect(token, TokenType.ADSR_VECTOR)
    attack_time, attack_level, decay_time, decay_level, sustain_time, release_time = (
        _to_int(token, g) for g in token.groups
    )
    attack = attack_level / 100.0
    decay = decay_level / 100.0
    return [
        TimePoint(timedelta(milliseconds=attack_time), attack),
        TimePoint(timedelta(milliseconds=decay_time), decay),
        TimePoint(timedelta(milliseconds=sustain_time), decay),
        TimePoint(timedelta(milliseconds=release_time), 0.0),
    ]


def map_key_of(token: Token) -> str:
    _expect(token, TokenType.MAP_ENTRY)
    return token.groups[0]


def map_value_of(token: Token) -> str:
    _expect(token, TokenType.MAP_ENTRY)
    return token.groups[1]


def wave_of(token: Token) -> str:
    """Waveform name from a ``wave: <name>`` entry. Names are not validated."""
    return map_value_of(token)


def const_name_of(token: Token) -> str:
    _expect(token, TokenType.CONST_NAME)
    return token.groups[0]


def channel_id_of(token: Token) -> str:
    _expect(token, TokenType.CHANNEL_ID)
    return token.groups[0]


def tuplet_count_of(token: Token) -> int:
    """Repeat multiplier of a closing ``}N``."""
    _expect(token, TokenType.CLOSE_TUPLE)
    return _to_int(token, token.groups[0])
