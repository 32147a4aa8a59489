#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions raised by the cadence engine
"""


class CadenceError(Exception):
    """Base class for every error raised by music_cadence."""


class ConfigurationError(CadenceError, ValueError):
    """The caller asked for something the engine does not support."""


class CollaboratorError(CadenceError, RuntimeError):
    """A music21-backed helper returned data the engine cannot use."""
