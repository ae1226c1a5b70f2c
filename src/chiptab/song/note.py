"""Note and envelope values produced by the token decoders.

These are plain immutable values; the song model that arranges them into
channels, loops and envelopes lives with the parser, not here.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping


# ---------------------------------------------------------------------------
# Duration constants
# ---------------------------------------------------------------------------

# Length is expressed as a fraction of a whole note: 4 is a quarter note.
DEFAULT_LENGTH = 4
MIN_LENGTH = 1
MAX_LENGTH = 64


# ---------------------------------------------------------------------------
# Pitch and halftone
# ---------------------------------------------------------------------------

class Pitch(Enum):
    """The seven natural pitches plus the silence marker."""

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    SILENCE = auto()


class Halftone(Enum):
    NONE = auto()
    SHARP = auto()
    FLAT = auto()


# Upper-case note letter to pitch. Callers upper-case before looking up.
PITCHES: Mapping[str, Pitch] = MappingProxyType({
    "A": Pitch.A,
    "B": Pitch.B,
    "C": Pitch.C,
    "D": Pitch.D,
    "E": Pitch.E,
    "F": Pitch.F,
    "G": Pitch.G,
})


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Note:
    """A single note or silence.

    `dots` is only counted here; how much each dot lengthens the note is
    decided by whoever schedules it.
    """

    pitch: Pitch
    length: int = DEFAULT_LENGTH
    halftone: Halftone = Halftone.NONE
    dots: int = 0

    @property
    def is_silence(self) -> bool:
        return self.pitch is Pitch.SILENCE


@dataclass(frozen=True, slots=True)
class TimePoint:
    """One envelope breakpoint: reach `value` (0.0 to 1.0) after `time`."""

    time: timedelta
    value: float
