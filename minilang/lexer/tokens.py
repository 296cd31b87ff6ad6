"""
Token definitions for the MiniLang lexer.

MiniLang only distinguishes five token classes (plus whitespace, which is
recognised and thrown away):
- Keywords (reserved words such as let, if, while)
- Operators (arithmetic, comparison and assignment)
- Delimiters (single-character structural punctuation)
- Identifiers
- Constants (unsigned integer or decimal literals, kept as text)

Author: xwest
"""

import re
from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple


class TokenType(Enum):
    """
    Enumeration of all token classes in MiniLang.

    The declaration order is also the order in which the lexer tries them.
    """

    KEYWORD = auto()                # let, if, while, ...
    OPERATOR = auto()               # +, ==, <=, ++, ...
    DELIMITER = auto()              # ( ) { } ; , .
    IDENTIFIER = auto()             # counter, _tmp, x1
    CONSTANT = auto()               # 42, 3.14
    WHITESPACE = auto()             # matched and discarded, never emitted


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Only used for debugging output; error messages never mention it.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in MiniLang.

    Contains the token class, the exact lexeme matched in the source and
    where it was found.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.location!r})"

    def matches(self, token_type: TokenType, lexeme: str = None) -> bool:
        """Check the token class and, when given, the exact lexeme."""
        if self.type != token_type:
            return False
        return lexeme is None or self.lexeme == lexeme

    def to_dict(self) -> Dict[str, Any]:
        """Lossless JSON-ready form of the token."""
        return {"type": self.type.name, "lexeme": self.lexeme}


# Reserved words. Several of them (return, const, var, switch, ...) have no
# grammar production yet and only exist so they cannot be used as identifiers.
KEYWORDS = (
    "let", "if", "else", "while", "for", "class", "function", "return",
    "const", "var", "switch", "case", "break", "default", "continue",
)

DELIMITERS = "(){};,."

# Two-character increments come first so "++" is never split into "+", "+"
OPERATOR_PATTERN = r"\+\+|--|[+\-*/=<>!]=?"

# Operators that may join two terms inside an expression
BINARY_OPERATOR_PATTERN = re.compile(r"^[+\-*/<>=!]=?$")

# Recognizers in priority order. Keyword must precede identifier so reserved
# words win, and both must end at a word boundary so "classroom" stays an
# identifier. Matching is anchored at the cursor. Word characters are ASCII only.
TOKEN_PATTERNS: List[Tuple[TokenType, re.Pattern]] = [
    (TokenType.KEYWORD, re.compile(r"(?:" + "|".join(KEYWORDS) + r")\b", re.ASCII)),
    (TokenType.OPERATOR, re.compile(OPERATOR_PATTERN)),
    (TokenType.DELIMITER, re.compile("[" + re.escape(DELIMITERS) + "]")),
    (TokenType.IDENTIFIER, re.compile(r"[a-zA-Z_]\w*\b", re.ASCII)),
    (TokenType.CONSTANT, re.compile(r"\d+(?:\.\d+)?\b", re.ASCII)),
    (TokenType.WHITESPACE, re.compile(r"\s+")),
]
