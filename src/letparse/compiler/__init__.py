# Copyright 2026 LetParse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler front end: scanning, parsing, and artifact serialization."""

from letparse.compiler.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from letparse.compiler.parser import ParseError, UnexpectedTokenError, parse, parse_source
from letparse.compiler.scanner import Token, TokenType, UnrecognizedCharacterError, tokenize

__all__ = [
    "tokenize",
    "Token",
    "TokenType",
    "UnrecognizedCharacterError",
    "parse",
    "parse_source",
    "ParseError",
    "UnexpectedTokenError",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
]
