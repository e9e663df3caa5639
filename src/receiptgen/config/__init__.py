"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
"""

from .schema import ConfigModel, InputSettings, LayoutSettings, load_config

__all__ = ["ConfigModel", "InputSettings", "LayoutSettings", "load_config"]
