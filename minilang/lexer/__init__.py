"""
MiniLang Lexer Package

Implements the lexical analyzer (tokenizer) for MiniLang. Token classes are
tried in a fixed priority order at every position, anchored at the cursor.

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS
from .lexer import Lexer, tokenize, tokenize_file
from .errors import Diagnostic, FrontendError, LexicalError

__all__ = [
    "Lexer",
    "tokenize",
    "tokenize_file",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "Diagnostic",
    "FrontendError",
    "LexicalError",
]
