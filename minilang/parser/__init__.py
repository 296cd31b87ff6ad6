"""
MiniLang Parser Package

Implements a recursive descent parser for MiniLang. Produces an immutable
syntax tree from the lexer's token list and stops at the first syntax error.

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, parse
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "parse",

    # AST nodes
    "AST", "ASTNode", "ASTNodeType", "ASTVisitor", "ASTSerializer",
    "Program", "Declaration", "Expression", "Node",
    "Assignment", "Conditional", "WhileLoop", "ForLoop",
    "ClassDef", "FunctionDef", "ExpressionStatement",
    "Operation", "Term",

    # Error handling
    "ParseError",
]
