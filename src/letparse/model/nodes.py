# Copyright 2026 LetParse Contributors
# SPDX-License-Identifier: Apache-2.0

"""AST node models produced by the parser.

Every node records the half-open ``[start, end)`` offset span of the source
text it was built from. Nodes are immutable: the parser builds children first
and assembles each parent in one step.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict

# ###############
# Public Interface
# ###############


class NodeType(str, Enum):
    """Closed set of AST node tags."""

    PROGRAM = "Program"
    VARIABLE_DECLARATION = "VariableDeclaration"
    VARIABLE_DECLARATOR = "VariableDeclarator"
    IDENTIFIER = "Identifier"
    FUNCTION_EXPRESSION = "FunctionExpression"
    BLOCK_STATEMENT = "BlockStatement"


VariableDeclarationKind = Literal["var", "let", "const"]


class _Node(BaseModel):
    """Fields shared by every node: the source span."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int


class Identifier(_Node):
    """A bare name."""

    type: Literal["Identifier"] = "Identifier"
    name: str


class BlockStatement(_Node):
    """A brace-delimited statement list, spanning ``{`` through ``}``."""

    type: Literal["BlockStatement"] = "BlockStatement"
    body: tuple[Statement, ...] = ()


class FunctionExpression(_Node):
    """A function literal, optionally named."""

    type: Literal["FunctionExpression"] = "FunctionExpression"
    id: Identifier | None = None
    params: tuple[Identifier, ...] = ()
    body: BlockStatement


class VariableDeclarator(_Node):
    """The ``id = init`` pairing inside a declaration."""

    type: Literal["VariableDeclarator"] = "VariableDeclarator"
    id: Identifier
    init: Expression


class VariableDeclaration(_Node):
    """A ``let`` declaration.

    ``kind`` accepts every declaration keyword although the scanner only
    produces ``let`` today.
    """

    type: Literal["VariableDeclaration"] = "VariableDeclaration"
    kind: VariableDeclarationKind
    declarations: tuple[VariableDeclarator, ...] = ()


class Program(_Node):
    """Root of the tree: the top-level statements in source order."""

    type: Literal["Program"] = "Program"
    body: tuple[Statement, ...] = ()


# The grammar has a single statement form and a single expression form.
# Widen these to discriminated unions on `type` when more are added.
Statement = VariableDeclaration
Expression = FunctionExpression

Node = Program | VariableDeclaration | VariableDeclarator | Identifier | FunctionExpression | BlockStatement


def walk(node: Node) -> Iterator[Node]:
    """Yield *node* and all of its descendants in pre-order (source order)."""
    yield node
    for child in _children(node):
        yield from walk(child)


# ################
# Implementation
# ################


def _children(node: Node) -> list[Node]:
    if isinstance(node, Program | BlockStatement):
        return list(node.body)
    if isinstance(node, VariableDeclaration):
        return list(node.declarations)
    if isinstance(node, VariableDeclarator):
        return [node.id, node.init]
    if isinstance(node, FunctionExpression):
        head: list[Node] = [node.id] if node.id is not None else []
        return [*head, *node.params, node.body]
    return []


# Resolve forward references between the recursive node models.
BlockStatement.model_rebuild()
FunctionExpression.model_rebuild()
VariableDeclarator.model_rebuild()
VariableDeclaration.model_rebuild()
Program.model_rebuild()
