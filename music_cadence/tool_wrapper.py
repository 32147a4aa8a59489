#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tool wrapper: expose the cadence engine as tools returning a uniform
{"ok": bool, "data": str} result
"""

import functools
import json
from typing import Any, Dict

from .cadence import MusicCadence
from .errors import CadenceError

def standardize_tool_output(func):
    """
    Decorator: normalize a tool's output to the {"ok": bool, "data": str} format.

    Successful results are JSON encoded; a CadenceError becomes
    {"ok": False, "data": <message>}. Any other exception propagates.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Dict[str, Any]:
        try:
            result = func(*args, **kwargs)
        except CadenceError as e:
            return {"ok": False, "data": f"Error: {e}"}

        # Already in standard format
        if isinstance(result, dict) and "ok" in result and "data" in result:
            return result
        return {"ok": True, "data": json.dumps(result)}

    return wrapper

@standardize_tool_output
def get_cadence_chords(**arguments):
    """Return the chords of a cadence; arguments as in cadence_tools.yaml."""
    return MusicCadence().cadence(**arguments)

@standardize_tool_output
def get_cadence_roman_numerals(**arguments):
    """Return the roman numeral figures of a cadence's chords."""
    return MusicCadence().roman_numerals(**arguments)
