# Copyright 2026 LetParse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of parsed Program artifacts.

Artifacts are stored as JSON documents for portability and human-readability.
The format is versioned so future schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path

from letparse.model.nodes import Program

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".ast.json"


def serialize(program: Program, indent: int | None = None) -> str:
    """Serialize a Program to a JSON string.

    Args:
        program: The tree to serialize.
        indent: Indentation width; None produces compact output.

    Raises:
        ValueError: If the tree is nested too deeply to serialize.
    """
    try:
        document = {"v": ARTIFACT_FORMAT_VERSION, "program": program.model_dump(mode="json")}
        if indent is None:
            return json.dumps(document, separators=(",", ":"))
        return json.dumps(document, indent=indent)
    except RecursionError:
        raise ValueError("Program is nested too deeply to serialize") from None


def deserialize(data: str) -> Program:
    """Deserialize a Program from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`Program`.

    Raises:
        ValueError: If the document is not a JSON object or its format version
            is not recognised.
        pydantic.ValidationError: If the program payload is malformed.
    """
    obj = json.loads(data)
    if not isinstance(obj, dict):
        raise ValueError("Artifact must be a JSON object")
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    return Program.model_validate(obj.get("program"))


def write_artifact(program: Program, path: Path, indent: int | None = None) -> None:
    """Write a serialized artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(program, indent=indent), encoding="utf-8")


def read_artifact(path: Path) -> Program:
    """Read and deserialize an artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))
