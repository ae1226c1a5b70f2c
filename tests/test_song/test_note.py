"""Tests for the decoded note values."""

import pytest

from chiptab.song.note import (
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MIN_LENGTH,
    PITCHES,
    Halftone,
    Note,
    Pitch,
)


class TestPitchTable:
    def test_seven_letters(self):
        assert sorted(PITCHES) == ["A", "B", "C", "D", "E", "F", "G"]
        assert Pitch.SILENCE not in PITCHES.values()

    def test_read_only(self):
        with pytest.raises(TypeError):
            PITCHES["H"] = Pitch.B


class TestNote:
    def test_defaults(self):
        note = Note(Pitch.A)
        assert note.length == DEFAULT_LENGTH
        assert note.halftone == Halftone.NONE
        assert note.dots == 0
        assert not note.is_silence

    def test_silence(self):
        assert Note(Pitch.SILENCE).is_silence

    def test_default_length_in_range(self):
        assert MIN_LENGTH <= DEFAULT_LENGTH <= MAX_LENGTH
