#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration settings for the cadence engine
"""

import os
from typing import Dict, Any

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

# Default configuration
DEFAULT_CONFIG: Dict[str, Any] = {
    # Tonal context
    "CADENCE_KEY": "C",
    "CADENCE_SCALE": "major",

    # Rendering
    "CADENCE_OCTAVE": 0,
    "CADENCE_FORMAT": "isobase",

    # Cadence selection
    "CADENCE_TYPE": "perfect",
    "CADENCE_LEADING": 1,
    "CADENCE_VARIATION": 1,

    # Tool descriptions
    "CADENCE_TOOLS_YAML": os.path.join(PACKAGE_DIR, "cadence_tools.yaml"),
}

def get_config() -> Dict[str, Any]:
    """Get configuration with environment variable overrides."""
    config = DEFAULT_CONFIG.copy()

    # Override with environment variables
    for key, default_value in DEFAULT_CONFIG.items():
        env_value = os.environ.get(key)
        if env_value is not None:
            # Type conversion based on default value type
            if isinstance(default_value, bool):
                config[key] = env_value.lower() in ('true', '1', 'yes', 'on')
            elif isinstance(default_value, int):
                try:
                    config[key] = int(env_value)
                except ValueError:
                    config[key] = default_value
            else:
                config[key] = env_value

    return config

def print_config():
    """Print current configuration."""
    config = get_config()
    print("Current Configuration:")
    print("=" * 50)
    for key, value in config.items():
        print(f"{key}: {value}")
    print("=" * 50)

if __name__ == "__main__":
    print_config()
