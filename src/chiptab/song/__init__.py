"""Value types decoded from score tokens."""

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

__all__ = [
    "DEFAULT_LENGTH",
    "MAX_LENGTH",
    "MIN_LENGTH",
    "PITCHES",
    "Halftone",
    "Note",
    "Pitch",
    "TimePoint",
]
