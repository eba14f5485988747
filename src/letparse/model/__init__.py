# Copyright 2026 LetParse Contributors
# SPDX-License-Identifier: Apache-2.0

"""AST model for parsed let/function declarations."""

from letparse.model.nodes import (
    BlockStatement,
    Expression,
    FunctionExpression,
    Identifier,
    Node,
    NodeType,
    Program,
    Statement,
    VariableDeclaration,
    VariableDeclarationKind,
    VariableDeclarator,
    walk,
)

__all__ = [
    "NodeType",
    "Node",
    "Program",
    "VariableDeclaration",
    "VariableDeclarationKind",
    "VariableDeclarator",
    "Identifier",
    "FunctionExpression",
    "BlockStatement",
    "Statement",
    "Expression",
    "walk",
]
