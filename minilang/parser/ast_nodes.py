"""
Abstract Syntax Tree node definitions for MiniLang.

The grammar is fixed, so the tree is a closed set of immutable node shapes.
Every node owns its children exclusively (sequences are tuples) and supports
the visitor pattern.

Author: xwest
"""

from abc import ABC
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Top-level
    PROGRAM = "Program"

    # Declarations
    ASSIGNMENT = "Assignment"
    CONDITIONAL = "Conditional"
    WHILE_LOOP = "WhileLoop"
    FOR_LOOP = "ForLoop"
    CLASS_DEF = "Class"
    FUNCTION_DEF = "Function"
    EXPRESSION_STMT = "ExpressionStatement"

    # Expressions
    OPERATION = "Operation"
    TERM = "Term"


class ASTVisitor(ABC):
    """
    Visitor interface for traversing AST nodes.

    ``visit`` dispatches to ``visit_<NodeClass>``. Subclasses are expected to
    implement a method for every node class; a missing one is a bug and
    raises NotImplementedError.
    """

    def visit(self, node: 'ASTNode') -> Any:
        method = getattr(self, f"visit_{type(node).__name__}", None)
        if method is None:
            raise NotImplementedError(
                f"{type(self).__name__} does not handle {type(node).__name__}"
            )
        return method(node)


@dataclass(frozen=True)
class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ClassVar[ASTNodeType]

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        return []

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form of the subtree rooted at this node."""
        return ASTSerializer().visit(self)

    def __str__(self) -> str:
        return self.node_type.value


# ============================================================================
# Expressions
# ============================================================================

@dataclass(frozen=True)
class Term(ASTNode):
    """Expression leaf: a single identifier or constant token."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.TERM

    token: Token

    @property
    def lexeme(self) -> str:
        return self.token.lexeme

    def __str__(self) -> str:
        return self.token.lexeme


@dataclass(frozen=True)
class Operation(ASTNode):
    """Binary operation; chains are folded left to right."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.OPERATION

    operator: Token
    left: 'Expression'
    right: 'Expression'

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def __str__(self) -> str:
        return f"({self.left} {self.operator.lexeme} {self.right})"


Expression = Union[Operation, Term]


# ============================================================================
# Declarations
# ============================================================================

@dataclass(frozen=True)
class Program(ASTNode):
    """A sequence of declarations: the whole input or the inside of a block."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.PROGRAM

    declarations: Tuple['Declaration', ...] = ()

    def children(self) -> List[ASTNode]:
        return list(self.declarations)


@dataclass(frozen=True)
class Assignment(ASTNode):
    """``let name = expression;``"""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.ASSIGNMENT

    identifier: Token
    expression: Expression

    def children(self) -> List[ASTNode]:
        return [self.expression]


@dataclass(frozen=True)
class Conditional(ASTNode):
    """``if (condition) { ... }`` with an optional ``else { ... }``."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.CONDITIONAL

    condition: Expression
    then_branch: Program
    else_branch: Optional[Program] = None

    def children(self) -> List[ASTNode]:
        children = [self.condition, self.then_branch]
        if self.else_branch is not None:
            children.append(self.else_branch)
        return children


@dataclass(frozen=True)
class WhileLoop(ASTNode):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.WHILE_LOOP

    condition: Expression
    body: Program

    def children(self) -> List[ASTNode]:
        return [self.condition, self.body]


@dataclass(frozen=True)
class ForLoop(ASTNode):
    """``for (let i = a; condition; update) { ... }``"""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.FOR_LOOP

    initializer: Assignment
    condition: Expression
    update: Expression
    body: Program

    def children(self) -> List[ASTNode]:
        return [self.initializer, self.condition, self.update, self.body]


@dataclass(frozen=True)
class FunctionDef(ASTNode):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.FUNCTION_DEF

    name: Token
    params: Tuple[Token, ...]
    body: Program

    def children(self) -> List[ASTNode]:
        return [self.body]


@dataclass(frozen=True)
class ClassDef(ASTNode):
    """A class is a name and a list of methods; nothing else is allowed inside."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.CLASS_DEF

    name: Token
    methods: Tuple[FunctionDef, ...] = ()

    def children(self) -> List[ASTNode]:
        return list(self.methods)


@dataclass(frozen=True)
class ExpressionStatement(ASTNode):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.EXPRESSION_STMT

    expression: Expression

    def children(self) -> List[ASTNode]:
        return [self.expression]


Declaration = Union[
    Assignment, Conditional, WhileLoop, ForLoop, ClassDef, FunctionDef,
    ExpressionStatement,
]

Node = Union[Program, Declaration, Operation, Term]


# ============================================================================
# Serialization
# ============================================================================

class ASTSerializer(ASTVisitor):
    """Converts a tree into nested dicts/lists suitable for json.dumps."""

    def _node(self, node: ASTNode, **fields: Any) -> Dict[str, Any]:
        result = {"type": node.node_type.value}
        result.update(fields)
        return result

    def visit_Program(self, node: Program) -> Dict[str, Any]:
        return self._node(node, declarations=[self.visit(d) for d in node.declarations])

    def visit_Assignment(self, node: Assignment) -> Dict[str, Any]:
        return self._node(
            node,
            identifier=node.identifier.to_dict(),
            expression=self.visit(node.expression),
        )

    def visit_Conditional(self, node: Conditional) -> Dict[str, Any]:
        return self._node(
            node,
            condition=self.visit(node.condition),
            then_branch=self.visit(node.then_branch),
            else_branch=self.visit(node.else_branch) if node.else_branch is not None else None,
        )

    def visit_WhileLoop(self, node: WhileLoop) -> Dict[str, Any]:
        return self._node(node, condition=self.visit(node.condition), body=self.visit(node.body))

    def visit_ForLoop(self, node: ForLoop) -> Dict[str, Any]:
        return self._node(
            node,
            initializer=self.visit(node.initializer),
            condition=self.visit(node.condition),
            update=self.visit(node.update),
            body=self.visit(node.body),
        )

    def visit_ClassDef(self, node: ClassDef) -> Dict[str, Any]:
        return self._node(
            node,
            name=node.name.to_dict(),
            methods=[self.visit(m) for m in node.methods],
        )

    def visit_FunctionDef(self, node: FunctionDef) -> Dict[str, Any]:
        return self._node(
            node,
            name=node.name.to_dict(),
            params=[p.to_dict() for p in node.params],
            body=self.visit(node.body),
        )

    def visit_ExpressionStatement(self, node: ExpressionStatement) -> Dict[str, Any]:
        return self._node(node, expression=self.visit(node.expression))

    def visit_Operation(self, node: Operation) -> Dict[str, Any]:
        return self._node(
            node,
            operator=node.operator.to_dict(),
            left=self.visit(node.left),
            right=self.visit(node.right),
        )

    def visit_Term(self, node: Term) -> Dict[str, Any]:
        return self._node(node, token=node.token.to_dict())


# Alias for the main AST type
AST = Program
