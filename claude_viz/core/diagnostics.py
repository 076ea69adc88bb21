"""
Scan diagnostics.

Recoverable per-file problems are collected here and returned next to the
entities they affected, so a scan stays a pure function of the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ScanDiagnostic:
    """Warning about one skipped or degraded file.

    Attributes:
        path: File or directory the message is about
        message: What went wrong
    """

    path: str
    message: str

    def __str__(self) -> str:
        return f"warning: {self.path}: {self.message}"


@dataclass
class ScanResult(Generic[T]):
    """Entities found by one scanner plus what it had to skip."""

    entities: list[T] = field(default_factory=list)
    diagnostics: list[ScanDiagnostic] = field(default_factory=list)

    def warn(self, path: str, message: str) -> None:
        self.diagnostics.append(ScanDiagnostic(path=path, message=message))
