"""Exception hierarchy for claude-viz."""

from __future__ import annotations

from pathlib import Path


class ClaudeVizError(Exception):
    """Base class for claude-viz failures."""


class ProjectNotFoundError(ClaudeVizError):
    """Raised when the project root has no ``.claude`` directory."""

    def __init__(self, project_path: str | Path):
        self.project_path = Path(project_path)
        super().__init__(f"No .claude folder found in {self.project_path}")


class PortUnavailableError(ClaudeVizError):
    """Raised when no port in the probed range can be bound."""

    def __init__(self, preferred: int, attempts: int):
        self.preferred = preferred
        self.attempts = attempts
        super().__init__(
            f"No available port found near {preferred}. "
            f"Tried ports {preferred}-{preferred + attempts}."
        )


class ConfigError(ClaudeVizError):
    """Raised when a configuration value is invalid."""

    def __init__(self, key: str, value: object, source: str):
        self.key = key
        self.value = value
        self.source = source
        super().__init__(f"Invalid {key} {value!r} in {source}")
