# Copyright 2026 LetParse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for let/function declarations.

Converts a token stream produced by the scanner into a span-annotated AST
rooted at a Program node.
"""

from collections.abc import Sequence

from letparse.compiler.scanner import Token, TokenType, tokenize
from letparse.model.nodes import (
    BlockStatement,
    FunctionExpression,
    Identifier,
    Program,
    Statement,
    VariableDeclaration,
    VariableDeclarator,
)

# ###############
# Public Interface
# ###############


class ParseError(Exception):
    """Raised when the parser encounters a syntactically invalid construct.

    Attributes:
        position: Offset of the offending token, or None at end of input.
    """

    def __init__(self, message: str, position: int | None) -> None:
        location = "End of input" if position is None else f"Offset {position}"
        super().__init__(f"{location}: {message}")
        self.position = position


class UnexpectedTokenError(ParseError):
    """Raised when the current token is not one the grammar allows at that point.

    Attributes:
        expected: The token types that would have been accepted.
        actual: The type of the token found, or None at end of input.
    """

    def __init__(
        self,
        expected: tuple[TokenType, ...],
        actual: TokenType | None,
        position: int | None,
    ) -> None:
        wanted = ", ".join(t.value for t in expected)
        found = "end of input" if actual is None else actual.value
        super().__init__(f"Expected {wanted}, got {found}", position)
        self.expected = expected
        self.actual = actual


def parse(tokens: Sequence[Token]) -> Program:
    """Parse a token sequence into a Program.

    Args:
        tokens: Tokens produced by :func:`letparse.compiler.scanner.tokenize`.

    Returns:
        The Program node. An empty token sequence yields an empty Program
        spanning ``[0, 0)``.

    Raises:
        UnexpectedTokenError: On the first token that does not fit the grammar.
        ParseError: If the declarations are nested too deeply to parse.
    """
    return _Parser(tokens).parse()


def parse_source(source: str, *, strict: bool = False) -> Program:
    """Tokenize and parse source text in one step.

    Raises:
        UnrecognizedCharacterError: In strict mode, on an unclassifiable character.
        UnexpectedTokenError: If the source is syntactically invalid.
    """
    return parse(tokenize(source, strict=strict))


# ################
# Implementation
# ################


class _Parser:
    """Recursive-descent parser over a token list with a single forward cursor."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def parse(self) -> Program:
        """Parse the full token stream and return a Program.

        Nesting deeper than the interpreter stack allows is reported as a
        ParseError at the token where parsing stopped.
        """
        body: list[Statement] = []
        try:
            while not self._at_end():
                body.append(self._parse_statement())
        except RecursionError:
            tok = self._current()
            raise ParseError("Nesting too deep", None if tok is None else tok.start) from None
        end = body[-1].end if body else 0
        return Program(body=tuple(body), start=0, end=end)

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        """Return True once every token has been consumed."""
        return self._pos >= len(self._tokens)

    def _current(self) -> Token | None:
        """Return the current (un-consumed) token, or None at end of input."""
        if self._at_end():
            return None
        return self._tokens[self._pos]

    def _previous(self) -> Token:
        """Return the most recently consumed token."""
        return self._tokens[self._pos - 1]

    def _check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types (without
        consuming).
        """
        tok = self._current()
        return tok is not None and tok.type in types

    def _expect(self, *types: TokenType) -> Token:
        """Consume the current token if it matches any of the given types.

        Raises UnexpectedTokenError if the current token does not match.
        """
        tok = self._current()
        if tok is None or tok.type not in types:
            raise self._unexpected(*types)
        self._pos += 1
        return tok

    def _unexpected(self, *expected: TokenType) -> UnexpectedTokenError:
        tok = self._current()
        if tok is None:
            return UnexpectedTokenError(expected, None, None)
        return UnexpectedTokenError(expected, tok.type, tok.start)

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _parse_statement(self, *terminators: TokenType) -> Statement:
        """Dispatch on the first token of a statement.

        *terminators* are the tokens that may also appear in its place, such as
        the closing brace of an enclosing block.
        """
        if self._check(TokenType.LET):
            return self._parse_variable_declaration()
        raise self._unexpected(TokenType.LET, *terminators)

    def _parse_variable_declaration(self) -> VariableDeclaration:
        """Parse: let <id> = <function expression>"""
        let_tok = self._expect(TokenType.LET)
        ident = self._parse_identifier()
        self._expect(TokenType.ASSIGN)
        init = self._parse_function_expression()
        declarator = VariableDeclarator(id=ident, init=init, start=let_tok.start, end=init.end)
        return VariableDeclaration(
            kind=let_tok.value,
            declarations=(declarator,),
            start=let_tok.start,
            end=self._previous().end,
        )

    def _parse_block_statement(self) -> BlockStatement:
        """Parse: { <statement>* }"""
        open_tok = self._expect(TokenType.LEFT_CURLY)
        body: list[Statement] = []
        while not self._check(TokenType.RIGHT_CURLY):
            body.append(self._parse_statement(TokenType.RIGHT_CURLY))
        close_tok = self._expect(TokenType.RIGHT_CURLY)
        return BlockStatement(body=tuple(body), start=open_tok.start, end=close_tok.end)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _parse_function_expression(self) -> FunctionExpression:
        """Parse: function [<id>] ( <id>* ) <block>"""
        function_tok = self._expect(TokenType.FUNCTION)
        name: Identifier | None = None
        if self._check(TokenType.IDENTIFIER):
            name = self._parse_identifier()
        params = self._parse_params()
        body = self._parse_block_statement()
        return FunctionExpression(id=name, params=params, body=body, start=function_tok.start, end=body.end)

    def _parse_params(self) -> tuple[Identifier, ...]:
        """Parse: ( <id>* )"""
        self._expect(TokenType.LEFT_PAREN)
        params: list[Identifier] = []
        while not self._check(TokenType.RIGHT_PAREN):
            if not self._check(TokenType.IDENTIFIER):
                raise self._unexpected(TokenType.IDENTIFIER, TokenType.RIGHT_PAREN)
            params.append(self._parse_identifier())
        self._expect(TokenType.RIGHT_PAREN)
        return tuple(params)

    def _parse_identifier(self) -> Identifier:
        tok = self._expect(TokenType.IDENTIFIER)
        return Identifier(name=tok.value, start=tok.start, end=tok.end)
