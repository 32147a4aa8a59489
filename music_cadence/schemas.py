#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tool descriptions and JSON Schema validation of cadence arguments
"""

import functools
import os
from typing import Any, Dict, List, Optional

import jsonschema
import yaml

from .config import get_config
from .errors import ConfigurationError


@functools.lru_cache(maxsize=None)
def _load(yaml_path: str) -> List[Dict[str, Any]]:
    if not os.path.exists(yaml_path):
        raise ConfigurationError(f"tool description file not found: {yaml_path}")
    with open(yaml_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or []


def load_tools_yaml(yaml_path: Optional[str] = None) -> List[Dict[str, Any]]:
    """Load the tool list, defaulting to CADENCE_TOOLS_YAML."""
    return _load(yaml_path or get_config()["CADENCE_TOOLS_YAML"])


def get_tool_schema(tool_name: str, yaml_path: Optional[str] = None) -> Dict[str, Any]:
    """Get the args_schema for a specific tool."""
    for tool in load_tools_yaml(yaml_path):
        if tool.get('tool_name') == tool_name:
            return tool.get('args_schema') or {"type": "object"}
    raise ConfigurationError(f"unknown tool: {tool_name}")


def validate_arguments(tool_name: str, arguments: Dict[str, Any]) -> None:
    """Validate tool arguments against its JSON schema.

    Raises:
        ConfigurationError: the arguments do not match the schema.
    """
    schema = get_tool_schema(tool_name)
    try:
        jsonschema.validate(instance=arguments, schema=schema)
    except jsonschema.ValidationError as e:
        raise ConfigurationError(f"Parameter validation failed: {e.message}")
