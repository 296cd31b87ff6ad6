"""
MiniLang Front-end Package

Lexer and recursive descent parser for MiniLang, a small imperative
teaching language.

Architecture:
    minilang/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Syntax analysis and AST generation
    ├── pipeline.py      # Source -> tokens -> tree in one call
    └── cli.py           # `mlc` command line tool

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

# Core front-end exports
from .lexer import Lexer, Token, TokenType, LexicalError, FrontendError, tokenize
from .parser import Parser, Program, ParseError, parse
from .pipeline import AnalysisResult, analyze

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "Program",
    "AnalysisResult",

    # Functions
    "tokenize",
    "parse",
    "analyze",

    # Errors
    "FrontendError",
    "LexicalError",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
