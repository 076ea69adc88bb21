"""
claude-viz Configuration.

Settings for the scanner output and the local server. Values come from
defaults, then an optional JSON/YAML config file, then ``CLAUDE_VIZ_*``
environment variables.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from claude_viz.core.exceptions import ConfigError
from claude_viz.utils.logging import LogLevel, parse_log_level
from claude_viz.utils.project import GRAPH_DATA_FILENAME, default_visualizer_dir

CONFIG_FILENAMES = ("viz_config.yaml", "viz_config.yml", "viz_config.json")


# ============================================================================
# Configuration Classes
# ============================================================================


@dataclass
class ServerConfig:
    """Configuration for the local visualizer server."""

    host: str = "127.0.0.1"
    port: int = 3000
    port_attempts: int = 10
    dist_dir: Path | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServerConfig":
        dist_dir = data.get("dist_dir")
        return cls(
            host=data.get("host", "127.0.0.1"),
            port=int(data.get("port", 3000)),
            port_attempts=int(data.get("port_attempts", 10)),
            dist_dir=Path(dist_dir) if dist_dir else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "host": self.host,
            "port": self.port,
            "port_attempts": self.port_attempts,
            "dist_dir": str(self.dist_dir) if self.dist_dir else None,
        }


@dataclass
class ScanConfig:
    """Where scan output goes."""

    output_filename: str = GRAPH_DATA_FILENAME
    output_path: Path | None = None  # Overrides the visualizer dir default

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScanConfig":
        output_path = data.get("output_path")
        return cls(
            output_filename=data.get("output_filename", GRAPH_DATA_FILENAME),
            output_path=Path(output_path) if output_path else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "output_filename": self.output_filename,
            "output_path": str(self.output_path) if self.output_path else None,
        }


@dataclass
class VizConfig:
    """Main configuration for claude-viz."""

    server: ServerConfig = field(default_factory=ServerConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    log_level: str = LogLevel.INFO.value

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "VizConfig":
        """Load configuration from a JSON or YAML file.

        A missing file yields defaults. Environment overrides are applied
        in both cases.

        Raises:
            ConfigError: If the file or environment holds an invalid value
        """
        config = cls()
        if config_path is not None:
            config_path = Path(config_path)
            if config_path.exists():
                config = cls.from_dict(_read_config_file(config_path), str(config_path))
        config.apply_env()
        return config

    @classmethod
    def for_project(cls, project_root: str | Path) -> "VizConfig":
        """Load the first ``viz_config.*`` found in the visualizer dir."""
        viz_dir = default_visualizer_dir(project_root)
        for filename in CONFIG_FILENAMES:
            candidate = viz_dir / filename
            if candidate.exists():
                return cls.load(candidate)
        return cls.load(None)

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str = "config") -> "VizConfig":
        return cls(
            server=ServerConfig.from_dict(data.get("server", {})),
            scan=ScanConfig.from_dict(data.get("scan", {})),
            log_level=_validate_log_level(data.get("log_level", "INFO"), source),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "server": self.server.to_dict(),
            "scan": self.scan.to_dict(),
            "log_level": self.log_level,
        }

    def apply_env(self) -> None:
        """Apply ``CLAUDE_VIZ_HOST``/``_PORT``/``_LOG_LEVEL`` overrides."""
        if host := os.environ.get("CLAUDE_VIZ_HOST"):
            self.server.host = host
        if port := os.environ.get("CLAUDE_VIZ_PORT"):
            try:
                self.server.port = int(port)
            except ValueError:
                raise ConfigError("port", port, "CLAUDE_VIZ_PORT") from None
        if level := os.environ.get("CLAUDE_VIZ_LOG_LEVEL"):
            self.log_level = _validate_log_level(level, "CLAUDE_VIZ_LOG_LEVEL")

    def output_path_for(self, project_root: str | Path) -> Path:
        """Graph artifact location for a project."""
        if self.scan.output_path is not None:
            return self.scan.output_path
        return default_visualizer_dir(project_root) / self.scan.output_filename


def _validate_log_level(value: Any, source: str) -> str:
    try:
        return parse_log_level(value).value
    except ValueError:
        raise ConfigError("log_level", value, source) from None


def _read_config_file(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    with open(path, "r", encoding="utf-8") as f:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    return data or {}

