# Copyright 2026 LetParse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner and recursive-descent parser for let/function declarations."""

from letparse.compiler import (
    ParseError,
    UnexpectedTokenError,
    UnrecognizedCharacterError,
    parse,
    parse_source,
    tokenize,
)

__all__ = [
    "tokenize",
    "parse",
    "parse_source",
    "ParseError",
    "UnexpectedTokenError",
    "UnrecognizedCharacterError",
]
