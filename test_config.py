#!/usr/bin/env python3
"""
Tests for environment-driven configuration
"""

import os

from music_cadence import MusicCadence
from music_cadence.config import DEFAULT_CONFIG, get_config, print_config


def test_defaults(monkeypatch):
    for name in DEFAULT_CONFIG:
        monkeypatch.delenv(name, raising=False)
    config = get_config()
    assert config["CADENCE_KEY"] == "C"
    assert config["CADENCE_SCALE"] == "major"
    assert config["CADENCE_OCTAVE"] == 0
    assert config["CADENCE_FORMAT"] == "isobase"
    assert config["CADENCE_TYPE"] == "perfect"
    assert os.path.basename(config["CADENCE_TOOLS_YAML"]) == "cadence_tools.yaml"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CADENCE_KEY", "G")
    monkeypatch.setenv("CADENCE_OCTAVE", "3")
    config = get_config()
    assert config["CADENCE_KEY"] == "G"
    assert config["CADENCE_OCTAVE"] == 3


def test_unparsable_integer_keeps_default(monkeypatch):
    monkeypatch.setenv("CADENCE_LEADING", "second")
    assert get_config()["CADENCE_LEADING"] == 1


def test_engine_reads_configured_defaults(monkeypatch):
    monkeypatch.setenv("CADENCE_KEY", "G")
    monkeypatch.setenv("CADENCE_TYPE", "plagal")
    mc = MusicCadence()
    assert mc.key == "G"
    assert mc.cadence() == [["C", "E", "G"], ["G", "B", "D"]]
    assert MusicCadence(key="F").cadence() == [["Bb", "D", "F"], ["F", "A", "C"]]


def test_print_config(monkeypatch, capsys):
    monkeypatch.delenv("CADENCE_KEY", raising=False)
    print_config()
    out = capsys.readouterr().out
    assert "Current Configuration:" in out
    assert "CADENCE_KEY: C" in out
