"""
Front-end pipeline: source text -> tokens -> syntax tree.

Callers that display results (editors, the command line tool) run the whole
pipeline again on every new input instead of updating an old result.

Author: xwest
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .lexer.lexer import Lexer
from .lexer.tokens import Token
from .lexer.errors import FrontendError
from .parser.parser import Parser
from .parser.ast_nodes import Program


@dataclass
class AnalysisResult:
    """
    Outcome of one pipeline run.

    On success ``tokens`` and ``tree`` are set and ``error`` is None. On
    failure only ``error`` is set: no tokens and no partial tree are kept.
    """
    tokens: List[Token] = field(default_factory=list)
    tree: Optional[Program] = None
    error: Optional[FrontendError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        """Human-readable error message, or None on success."""
        return str(self.error) if self.error is not None else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "tokens": [token.to_dict() for token in self.tokens],
            "tree": self.tree.to_dict() if self.tree is not None else None,
            "error": self.message,
        }


def analyze(source: str, filename: str = "<string>") -> AnalysisResult:
    """
    Tokenize and parse ``source``.

    Lexical and syntax errors are caught and returned in the result; any
    other exception propagates.
    """
    try:
        tokens = Lexer(source, filename).tokenize()
        tree = Parser(tokens).parse()
    except FrontendError as e:
        return AnalysisResult(error=e)

    return AnalysisResult(tokens=tokens, tree=tree)


def analyze_file(filepath: str) -> AnalysisResult:
    """Read a UTF-8 source file and run the pipeline on it."""
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return analyze(source, filepath)
