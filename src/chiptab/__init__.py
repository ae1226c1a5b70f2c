"""chiptab: lexer for a macro-based chiptune score language."""

__version__ = "0.1.0"
