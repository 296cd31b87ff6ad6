"""
MiniLang Recursive Descent Parser

Each grammar production is one method working on a single shared cursor.
Productions are chosen with one token of lookahead (token class plus, for
keywords, the exact lexeme) and never backtrack. The first mismatch aborts
the parse; there is no partial tree.

Grammar:
    program     := declaration*                       (stops at EOF or '}')
    declaration := assignment | conditional | while | for | class
                 | function | expression ';'
    assignment  := 'let' IDENT '=' expression ';'
    conditional := 'if' '(' expression ')' '{' program '}'
                   ['else' '{' program '}']
    while       := 'while' '(' expression ')' '{' program '}'
    for         := 'for' '(' assignment expression ';' expression ')'
                   '{' program '}'
    class       := 'class' IDENT '{' function* '}'
    function    := 'function' IDENT '(' (IDENT [','])* ')' '{' program '}'
    expression  := term (OPERATOR term)*              (left-associative)
    term        := IDENT | CONSTANT

Author: xwest
"""

from typing import Callable, Dict, List, Optional

from ..lexer.tokens import Token, TokenType, BINARY_OPERATOR_PATTERN
from .ast_nodes import (
    Program, Declaration, Expression, Assignment, Conditional, WhileLoop,
    ForLoop, ClassDef, FunctionDef, ExpressionStatement, Operation, Term
)
from .errors import (
    create_unexpected_token_error, create_unexpected_eof_error,
    create_invalid_term_error
)


class Parser:
    """
    MiniLang recursive descent parser.

    A parser instance owns its cursor; create a new one per token list.
    """

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer (no whitespace)
        """
        self.tokens = tokens
        self.current = 0

        # Keyword-led declarations; anything else is an expression statement
        self.declaration_parsers: Dict[str, Callable[[], Declaration]] = {
            "let": self._parse_assignment,
            "if": self._parse_conditional,
            "while": self._parse_while,
            "for": self._parse_for,
            "class": self._parse_class,
            "function": self._parse_function,
        }

    def parse(self) -> Program:
        """
        Parse the token list into an AST.

        Returns:
            Program AST node for the declarations up to end of input or
            the first unmatched '}' (anything after it is not read)

        Raises:
            ParseError: On the first token that does not fit the grammar
        """
        self.current = 0
        return self._parse_program()

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def _parse_program(self) -> Program:
        """Parse declarations until end of input or a closing brace.

        The closing brace is left for the production that opened the block.
        """
        declarations = []
        while not self._is_at_end() and not self._check_lexeme("}"):
            declarations.append(self._parse_declaration())
        return Program(tuple(declarations))

    def _parse_declaration(self) -> Declaration:
        token = self._peek()
        if token is not None and token.type == TokenType.KEYWORD:
            parse_keyword = self.declaration_parsers.get(token.lexeme)
            if parse_keyword is not None:
                return parse_keyword()

        # Not a declaration keyword: must be an expression statement.
        # Keywords without a production (return, break, ...) fail in _parse_term.
        expression = self._parse_expression()
        self._consume(TokenType.DELIMITER, ";")
        return ExpressionStatement(expression)

    def _parse_assignment(self) -> Assignment:
        self._consume(TokenType.KEYWORD, "let")
        identifier = self._consume(TokenType.IDENTIFIER)
        self._consume(TokenType.OPERATOR, "=")
        expression = self._parse_expression()
        self._consume(TokenType.DELIMITER, ";")
        return Assignment(identifier, expression)

    def _parse_conditional(self) -> Conditional:
        self._consume(TokenType.KEYWORD, "if")
        condition = self._parse_parenthesized_condition()
        then_branch = self._parse_block()

        else_branch = None
        if self._check(TokenType.KEYWORD, "else"):
            self._consume(TokenType.KEYWORD, "else")
            else_branch = self._parse_block()

        return Conditional(condition, then_branch, else_branch)

    def _parse_while(self) -> WhileLoop:
        self._consume(TokenType.KEYWORD, "while")
        condition = self._parse_parenthesized_condition()
        body = self._parse_block()
        return WhileLoop(condition, body)

    def _parse_for(self) -> ForLoop:
        self._consume(TokenType.KEYWORD, "for")
        self._consume(TokenType.DELIMITER, "(")
        # The assignment consumes its own ';'
        initializer = self._parse_assignment()
        condition = self._parse_expression()
        self._consume(TokenType.DELIMITER, ";")
        update = self._parse_expression()
        self._consume(TokenType.DELIMITER, ")")
        body = self._parse_block()
        return ForLoop(initializer, condition, update, body)

    def _parse_class(self) -> ClassDef:
        self._consume(TokenType.KEYWORD, "class")
        name = self._consume(TokenType.IDENTIFIER)
        self._consume(TokenType.DELIMITER, "{")

        methods = []
        while not self._is_at_end() and not self._check_lexeme("}"):
            methods.append(self._parse_function())

        self._consume(TokenType.DELIMITER, "}")
        return ClassDef(name, tuple(methods))

    def _parse_function(self) -> FunctionDef:
        self._consume(TokenType.KEYWORD, "function")
        name = self._consume(TokenType.IDENTIFIER)
        self._consume(TokenType.DELIMITER, "(")

        # Commas are consumed when present, never required
        params = []
        while not self._is_at_end() and not self._check_lexeme(")"):
            params.append(self._consume(TokenType.IDENTIFIER))
            if self._check(TokenType.DELIMITER, ","):
                self._consume(TokenType.DELIMITER, ",")

        self._consume(TokenType.DELIMITER, ")")
        body = self._parse_block()
        return FunctionDef(name, tuple(params), body)

    def _parse_parenthesized_condition(self) -> Expression:
        self._consume(TokenType.DELIMITER, "(")
        condition = self._parse_expression()
        self._consume(TokenType.DELIMITER, ")")
        return condition

    def _parse_block(self) -> Program:
        """Parse '{' program '}'."""
        self._consume(TokenType.DELIMITER, "{")
        program = self._parse_program()
        self._consume(TokenType.DELIMITER, "}")
        return program

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _parse_expression(self) -> Expression:
        """Parse term (operator term)*, folding to the left.

        a + b - c becomes ((a + b) - c); all operators bind equally.
        """
        expression = self._parse_term()
        while self._check_binary_operator():
            operator = self._consume(TokenType.OPERATOR)
            right = self._parse_term()
            expression = Operation(operator, expression, right)
        return expression

    def _parse_term(self) -> Term:
        token = self._peek()
        if token is not None and token.type in (TokenType.IDENTIFIER, TokenType.CONSTANT):
            return Term(self._consume(token.type))
        raise create_invalid_term_error(token)

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _check_binary_operator(self) -> bool:
        token = self._peek()
        return (token is not None and token.type == TokenType.OPERATOR and
                BINARY_OPERATOR_PATTERN.match(token.lexeme) is not None)

    def _check(self, token_type: TokenType, lexeme: Optional[str] = None) -> bool:
        """Check if current token matches without consuming."""
        token = self._peek()
        return token is not None and token.matches(token_type, lexeme)

    def _check_lexeme(self, lexeme: str) -> bool:
        token = self._peek()
        return token is not None and token.lexeme == lexeme

    def _is_at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self.current >= len(self.tokens)

    def _peek(self) -> Optional[Token]:
        """Return current token without consuming, or None past the end."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None

    def _consume(self, token_type: TokenType, lexeme: Optional[str] = None) -> Token:
        """Consume token of expected class (and lexeme) or raise ParseError.

        This is the only method that moves the cursor.
        """
        expected = lexeme if lexeme is not None else token_type.name
        token = self._peek()

        if token is None:
            raise create_unexpected_eof_error(expected)
        if not token.matches(token_type, lexeme):
            raise create_unexpected_token_error(expected, token)

        self.current += 1
        return token


def parse(tokens: List[Token]) -> Program:
    """
    Convenience function to parse a token list.

    Raises:
        ParseError: If parsing fails
    """
    return Parser(tokens).parse()
