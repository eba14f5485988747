# Copyright 2026 LetParse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for Program artifact serialization."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from letparse.compiler.artifact import (
    ARTIFACT_FORMAT_VERSION,
    deserialize,
    read_artifact,
    serialize,
    write_artifact,
)
from letparse.compiler.parser import parse_source
from letparse.model.nodes import Program

# ###############
# Test Helpers
# ###############

_SOURCE = "let add = function add(x y) { let z = function() {} }"


def _program() -> Program:
    return parse_source(_SOURCE)


# ###############
# Serialization
# ###############


class TestSerialize:
    def test_document_carries_format_version(self) -> None:
        doc = json.loads(serialize(_program()))
        assert doc["v"] == ARTIFACT_FORMAT_VERSION

    def test_compact_output_has_no_whitespace(self) -> None:
        assert " " not in serialize(parse_source("let a = function() {}"))

    def test_indented_output(self) -> None:
        text = serialize(_program(), indent=2)
        assert text.startswith("{\n  ")

    def test_json_uses_node_type_tags(self) -> None:
        program = json.loads(serialize(_program()))["program"]
        assert program["type"] == "Program"
        decl = program["body"][0]
        assert decl["type"] == "VariableDeclaration"
        assert decl["kind"] == "let"
        init = decl["declarations"][0]["init"]
        assert init["type"] == "FunctionExpression"
        assert init["id"] == {"start": 19, "end": 22, "type": "Identifier", "name": "add"}
        assert [p["name"] for p in init["params"]] == ["x", "y"]
        assert init["body"]["type"] == "BlockStatement"

    def test_excessive_depth_becomes_value_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _overflow(*args: object, **kwargs: object) -> dict[str, object]:
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr(Program, "model_dump", _overflow)
        with pytest.raises(ValueError, match="nested too deeply"):
            serialize(_program())

    def test_anonymous_function_id_is_null(self) -> None:
        program = json.loads(serialize(parse_source("let a = function() {}")))["program"]
        assert program["body"][0]["declarations"][0]["init"]["id"] is None


# ###############
# Deserialization
# ###############


class TestDeserialize:
    def test_round_trip_restores_equal_program(self) -> None:
        program = _program()
        assert deserialize(serialize(program)) == program

    def test_round_trip_empty_program(self) -> None:
        program = parse_source("")
        restored = deserialize(serialize(program, indent=4))
        assert restored.body == ()
        assert restored.end == 0

    def test_unknown_version_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unsupported artifact format version"):
            deserialize('{"v": "99", "program": {}}')

    def test_missing_version_rejected(self) -> None:
        with pytest.raises(ValueError):
            deserialize('{"program": {}}')

    def test_non_object_document_rejected(self) -> None:
        with pytest.raises(ValueError, match="JSON object"):
            deserialize("[]")

    def test_wrong_node_tag_rejected(self) -> None:
        doc = json.loads(serialize(_program()))
        doc["program"]["body"][0]["type"] = "Program"
        with pytest.raises(ValidationError):
            deserialize(json.dumps(doc))

    def test_unknown_declaration_kind_rejected(self) -> None:
        doc = json.loads(serialize(_program()))
        doc["program"]["body"][0]["kind"] = "val"
        with pytest.raises(ValidationError):
            deserialize(json.dumps(doc))

    def test_const_kind_accepted(self) -> None:
        doc = json.loads(serialize(_program()))
        doc["program"]["body"][0]["kind"] = "const"
        assert deserialize(json.dumps(doc)).body[0].kind == "const"


# ###############
# File I/O
# ###############


class TestArtifactFiles:
    def test_write_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "out" / "nested" / "prog.ast.json"
        write_artifact(_program(), path)
        assert path.exists()

    def test_write_then_read(self, tmp_path: Path) -> None:
        path = tmp_path / "prog.ast.json"
        write_artifact(_program(), path, indent=2)
        assert read_artifact(path) == _program()
