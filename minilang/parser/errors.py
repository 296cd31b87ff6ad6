"""
Error handling for the MiniLang parser.

The parser stops at the first mismatch, so there is no recovery machinery
here: only the exception type and the helpers that build it.

Author: xwest
"""

from typing import Optional

from ..lexer.tokens import Token
from ..lexer.errors import FrontendError


class ParseError(FrontendError):
    """
    Exception raised when the parser meets a token it did not expect.

    ``expected`` describes what the grammar wanted (a token class name or an
    exact lexeme); ``found`` is the offending token, or None when the input
    ran out.
    """

    def __init__(
        self,
        message: str,
        expected: Optional[str] = None,
        found: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(
            message,
            code=code,
            help_text=help_text,
            context=found.lexeme if found is not None else None
        )
        self.expected = expected
        self.found = found

    @property
    def at_end_of_input(self) -> bool:
        return self.found is None


def create_unexpected_token_error(expected: str, found: Token) -> ParseError:
    """Create an error for an unexpected token."""
    return ParseError(
        message=f'Syntax error: expected "{expected}" but found "{found.lexeme}"',
        expected=expected,
        found=found,
        code="P001",
        help_text=f"The parser expected to see {expected} at this position, "
                  f"but found {found.type.name} {found.lexeme!r} instead."
    )


def create_unexpected_eof_error(expected: str) -> ParseError:
    """Create an error for unexpected end of input."""
    return ParseError(
        message=f'Syntax error: expected "{expected}" but found end of input',
        expected=expected,
        code="P002",
        help_text=f"The parser reached the end of the input while expecting {expected}."
    )


def create_invalid_term_error(found: Optional[Token]) -> ParseError:
    """Create an error for a token that cannot start a term."""
    found_str = found.lexeme if found is not None else "end of input"
    return ParseError(
        message=f'Syntax error: invalid term at "{found_str}"',
        expected="IDENTIFIER or CONSTANT",
        found=found,
        code="P003",
        help_text="A term must be a single identifier or a numeric constant."
    )
