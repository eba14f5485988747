# Copyright 2026 LetParse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for let/function source text.

Converts raw source text into a flat sequence of offset-annotated tokens for
subsequent parsing.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the scanner."""

    # Keywords
    LET = "Let"
    FUNCTION = "Function"

    # Symbols
    ASSIGN = "Assign"
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    LEFT_CURLY = "LeftCurly"
    RIGHT_CURLY = "RightCurly"

    # Identifiers
    IDENTIFIER = "Identifier"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source span.

    Attributes:
        type: The kind of token.
        value: The literal text of the token. Keywords carry their canonical
            spelling, identifiers their name.
        start: Offset of the first character of the token.
        end: Offset one past the last character of the token.
    """

    type: TokenType
    value: str | None
    start: int
    end: int


class UnrecognizedCharacterError(Exception):
    """Raised in strict mode when the scanner meets a character it cannot classify.

    Attributes:
        character: The offending character.
        position: Offset of the character in the source.
    """

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f"Offset {position}: Unrecognized character {character!r}")
        self.character = character
        self.position = position


def tokenize(source: str, *, strict: bool = False) -> list[Token]:
    """Tokenize source text into a sequence of tokens.

    Spaces are consumed and not included in the output. Characters that belong
    to no token class are dropped unless *strict* is set.

    Args:
        source: The full source text.
        strict: Raise instead of silently skipping unrecognized characters.

    Returns:
        A list of Token objects in source order. Empty input yields an empty list.

    Raises:
        UnrecognizedCharacterError: In strict mode, on the first character that
            is neither a space, a letter, nor one of ``( ) { } =``.
    """
    return _Scanner(source, strict).tokenize()


# ################
# Implementation
# ################

# The keyword span is derived from the canonical spelling, so the spelling
# here must stay identical to the text the scanner matches.
_KEYWORDS: dict[str, TokenType] = {
    "let": TokenType.LET,
    "function": TokenType.FUNCTION,
}

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_CURLY,
    "}": TokenType.RIGHT_CURLY,
    "=": TokenType.ASSIGN,
}


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


class _Scanner:
    """Internal single-cursor scanner."""

    def __init__(self, source: str, strict: bool) -> None:
        self._source = source
        self._strict = strict
        self._pos = 0
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner over the whole input and return all tokens."""
        while self._pos < len(self._source):
            self._scan_token()
        return self._tokens

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _scan_token(self) -> None:
        """Dispatch on the current character."""
        ch = self._current()
        start = self._pos

        if ch == " ":
            self._pos += 1
        elif _is_letter(ch):
            self._scan_word(start)
        elif ch in _SINGLE_CHAR_TOKENS:
            self._pos += 1
            self._tokens.append(Token(_SINGLE_CHAR_TOKENS[ch], ch, start, start + 1))
        elif self._strict:
            raise UnrecognizedCharacterError(ch, start)
        else:
            self._pos += 1

    def _scan_word(self, start: int) -> None:
        """Scan a maximal run of letters as a keyword or an identifier."""
        while _is_letter(self._current()):
            self._pos += 1
        text = self._source[start : self._pos]
        keyword = _KEYWORDS.get(text)
        if keyword is not None:
            self._tokens.append(Token(keyword, text, start, start + len(text)))
        else:
            self._tokens.append(Token(TokenType.IDENTIFIER, text, start, self._pos))
