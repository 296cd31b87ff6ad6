"""
Error handling for the MiniLang lexer.

Defines the diagnostic record shared by every front-end error and the
exception raised when no token class matches the input.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Base record for front-end diagnostics."""
    message: str
    severity: str  # "error" or "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    context: Optional[str] = None  # Offending source text or token

    def __str__(self) -> str:
        result = f"{self.severity.upper()}"
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class FrontendError(Exception):
    """
    Base class for errors raised by the lexer or the parser.

    str() of the error is the plain human-readable message; the full
    diagnostic is available as ``error.diagnostic``.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        context: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text,
            context=context
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return self.message


class LexicalError(FrontendError):
    """
    Raised when no token class matches at the current input position.

    ``remaining`` holds the unmatched input from that position onwards.
    """

    def __init__(self, message: str, remaining: str, code: Optional[str] = None,
                 help_text: Optional[str] = None):
        super().__init__(message, code=code, help_text=help_text, context=remaining)
        self.remaining = remaining


def create_unrecognized_input_error(remaining: str) -> LexicalError:
    """Create an error for input that no token class recognizes."""
    char = remaining[:1]
    if char.isprintable():
        help_text = f"The character '{char}' does not start any MiniLang token."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexicalError(
        message=f'Lexical error: unrecognized character in "{remaining}"',
        remaining=remaining,
        code="L001",
        help_text=help_text
    )
