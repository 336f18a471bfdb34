# richerror/config/__init__.py
"""
richerror configuration: YAML over code defaults.
"""

from .loader import (
    DEFAULT_CONFIG_PATH,
    GenerateConfig,
    RenderingConfig,
    RichErrorConfig,
    apply_rendering_config,
    load_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "GenerateConfig",
    "RenderingConfig",
    "RichErrorConfig",
    "apply_rendering_config",
    "load_config",
]
