# richerror/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML

Example config.yml:

    generate:
      out_dir: src/myapp
      error_package: errors
      include_tags: [http]
    rendering:
      output_format: short_detailed
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import logging

import yaml

from richerror.core.errors import OutputFormat, RenderSettings, get_render_settings


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".richerror" / "config.yml"


@dataclass(frozen=True)
class GenerateConfig:
    """Defaults for `richerror generate` flags"""
    errors_definition_file: Optional[str] = None
    out_dir: str = "."
    error_package: str = "errors"
    include_tags: Tuple[str, ...] = ()
    exclude_tags: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "errors_definition_file": self.errors_definition_file,
            "out_dir": self.out_dir,
            "error_package": self.error_package,
            "include_tags": list(self.include_tags),
            "exclude_tags": list(self.exclude_tags),
        }


@dataclass(frozen=True)
class RenderingConfig:
    """Process-wide rendering defaults"""
    output_format: OutputFormat = OutputFormat.FULL_FORMATTED

    def to_dict(self) -> Dict[str, Any]:
        return {"output_format": self.output_format.value}


@dataclass(frozen=True)
class RichErrorConfig:
    """
    Unified richerror configuration.

    All fields have code defaults - YAML is optional.
    """
    generate: GenerateConfig = field(default_factory=GenerateConfig)
    rendering: RenderingConfig = field(default_factory=RenderingConfig)
    source: Optional[str] = None   # file the values came from, None for defaults

    @classmethod
    def default(cls) -> "RichErrorConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "RichErrorConfig":
        return cls(
            generate=_build_generate(data.get("generate") or {}),
            rendering=_build_rendering(data.get("rendering") or {}),
            source=source,
        )

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "RichErrorConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries ~/.richerror/config.yml

        Returns:
            Config with YAML values merged over code defaults
        """
        loaded = _load_yaml(config_path)
        if not loaded:
            return cls.default()
        path, yaml_data = loaded
        return cls.from_dict(yaml_data, source=str(path))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generate": self.generate.to_dict(),
            "rendering": self.rendering.to_dict(),
        }


def _as_tags(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    return tuple(str(tag).strip() for tag in value if str(tag).strip())


def _build_generate(data: Dict[str, Any]) -> GenerateConfig:
    default = GenerateConfig()
    known = {f.name for f in fields(GenerateConfig)}
    for key in data:
        if key not in known:
            logger.warning(f"Unknown generate config key '{key}' ignored")

    definition_file = data.get("errors_definition_file", default.errors_definition_file)
    return GenerateConfig(
        errors_definition_file=str(definition_file) if definition_file else None,
        out_dir=str(data.get("out_dir") or default.out_dir),
        error_package=str(data.get("error_package") or default.error_package),
        include_tags=_as_tags(data.get("include_tags")),
        exclude_tags=_as_tags(data.get("exclude_tags")),
    )


def _build_rendering(data: Dict[str, Any]) -> RenderingConfig:
    default = RenderingConfig()
    raw_format = data.get("output_format")
    if raw_format is None:
        return default
    try:
        return RenderingConfig(output_format=OutputFormat(str(raw_format).strip().lower()))
    except ValueError:
        valid = ", ".join(f.value for f in OutputFormat)
        logger.warning(f"Invalid rendering.output_format '{raw_format}' (expected one of: {valid}); using default")
        return default


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Tuple[Path, Dict[str, Any]]]:
    """Load YAML file, return None if not found (not an error)"""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.exists():
        if config_path:
            logger.warning(f"Config file {path} not found; using defaults")
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config file {path}: {e}; using defaults")
        return None

    if data is None:
        return None
    if not isinstance(data, dict):
        logger.warning(f"Config file {path} must contain a mapping; using defaults")
        return None
    return path, data


def load_config(config_path: Optional[Path] = None) -> RichErrorConfig:
    """
    Load richerror configuration.

    Args:
        config_path: Optional path to YAML file

    Returns:
        RichErrorConfig instance (always has code defaults)

    Note:
        - If YAML is not found or invalid, returns code defaults
        - System works without YAML (code is truth)
    """
    return RichErrorConfig.from_yaml(config_path)


def apply_rendering_config(
    config: RichErrorConfig,
    settings: Optional[RenderSettings] = None,
) -> RenderSettings:
    """
    Push the rendering section into a RenderSettings object
    (the process-wide one by default). Call once at startup.
    """
    settings = settings if settings is not None else get_render_settings()
    settings.output_format = config.rendering.output_format
    return settings
