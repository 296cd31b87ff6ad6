"""
MiniLang Lexer - turns source text into a list of tokens

Every position is tried against an ordered table of recognizers and the
first one producing a non-empty match wins. There is no error recovery:
one unrecognized character aborts the whole run.

xwest
"""

from typing import List, Optional

from .tokens import Token, TokenType, SourceLocation, TOKEN_PATTERNS
from .errors import create_unrecognized_input_error


class Lexer:
    """
    MiniLang lexical analyzer.

    Converts source code text into tokens. Whitespace is recognised but
    never emitted.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for token locations
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens (no whitespace, no EOF marker)

        Raises:
            LexicalError: If no token class matches at some position
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []

        while self.pos < len(self.source):
            token = self._next_token()
            if token:
                self.tokens.append(token)

        return self.tokens

    def _next_token(self) -> Optional[Token]:
        """Match one lexeme at the cursor; returns None for whitespace."""
        location = SourceLocation(self.filename, self.line, self.column, self.pos)

        for token_type, pattern in TOKEN_PATTERNS:
            match = pattern.match(self.source, self.pos)
            # Empty matches would never advance the cursor
            if not match or not match.group(0):
                continue

            lexeme = match.group(0)
            self._advance_by(len(lexeme))

            if token_type == TokenType.WHITESPACE:
                return None
            return Token(token_type, lexeme, location)

        raise create_unrecognized_input_error(self.source[self.pos:])

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()


def tokenize(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for token locations

    Returns:
        List of tokens

    Raises:
        LexicalError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexicalError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize(source, filepath)
