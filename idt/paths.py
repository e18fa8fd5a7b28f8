"""Configuration path helpers for idt."""

import os
from pathlib import Path


def get_config_dir() -> Path:
    """Return XDG-compliant config directory: ~/.config/idt"""
    return Path.home() / ".config" / "idt"


def get_config_path() -> Path:
    """Return path to the user settings file.

    Priority:
    1. IDT_CONFIG environment variable (if set)
    2. ~/.config/idt/config.yaml (default XDG location)
    """
    if "IDT_CONFIG" in os.environ:
        return Path(os.environ["IDT_CONFIG"])
    return get_config_dir() / "config.yaml"
