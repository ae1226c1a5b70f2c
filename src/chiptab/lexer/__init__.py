"""chiptab lexer: ordered-grammar tokenizer for score text."""

from chiptab.lexer.tokens import TOKEN_DEFS, Token, TokenType
from chiptab.lexer.lexer import Lexer, LexerError
from chiptab.lexer.decode import DecodeError, NoteLengthError, TokenContractError

__all__ = [
    "TOKEN_DEFS",
    "Token",
    "TokenType",
    "Lexer",
    "LexerError",
    "DecodeError",
    "NoteLengthError",
    "TokenContractError",
]
