#!/usr/bin/env python3
"""
Tests for tool descriptions, argument schemas and the tool wrapper
"""

import json

import pytest

from music_cadence.errors import ConfigurationError
from music_cadence.schemas import get_tool_schema, load_tools_yaml, validate_arguments
from music_cadence.tool_wrapper import (
    get_cadence_chords,
    get_cadence_roman_numerals,
    standardize_tool_output,
)


def test_tools_yaml_lists_both_tools():
    names = [tool["tool_name"] for tool in load_tools_yaml()]
    assert names == ["get_cadence_chords", "get_cadence_roman_numerals"]
    for tool in load_tools_yaml():
        assert tool["returns_schema"]["required"] == ["ok", "data"]


def test_get_tool_schema():
    schema = get_tool_schema("get_cadence_chords")
    assert schema["properties"]["octave"]["maximum"] == 8
    assert "octave" not in get_tool_schema("get_cadence_roman_numerals")["properties"]
    with pytest.raises(ConfigurationError, match="unknown tool"):
        get_tool_schema("get_score_basic_summary")


def test_validate_arguments():
    validate_arguments("get_cadence_chords", {"key": "F#", "octave": 8, "type": "half", "leading": 3})
    with pytest.raises(ConfigurationError, match="Parameter validation failed"):
        validate_arguments("get_cadence_chords", {"octave": 9})
    with pytest.raises(ConfigurationError, match="Parameter validation failed"):
        validate_arguments("get_cadence_roman_numerals", {"format": "midi"})


def test_missing_tools_yaml(monkeypatch, tmp_path):
    monkeypatch.setenv("CADENCE_TOOLS_YAML", str(tmp_path / "missing.yaml"))
    with pytest.raises(ConfigurationError, match="not found"):
        load_tools_yaml()


def test_get_cadence_chords_ok():
    result = get_cadence_chords(type="plagal")
    assert result["ok"] is True
    assert json.loads(result["data"]) == [["F", "A", "C"], ["C", "E", "G"]]


def test_get_cadence_chords_error():
    result = get_cadence_chords(type="evaded")
    assert result["ok"] is False
    assert "unknown cadence" in result["data"]


def test_get_cadence_roman_numerals():
    result = get_cadence_roman_numerals(key="A", scale="minor", type="plagal")
    assert result == {"ok": True, "data": json.dumps(["iv", "i"])}


def test_standardize_tool_output_passes_through_standard_results():
    @standardize_tool_output
    def tool():
        return {"ok": True, "data": "done"}

    assert tool() == {"ok": True, "data": "done"}


def test_standardize_tool_output_propagates_other_errors():
    @standardize_tool_output
    def tool():
        raise KeyError("boom")

    with pytest.raises(KeyError):
        tool()
