"""Core data models for script-list."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ScriptEntry:
    """A single named script declared in a manifest."""

    name: str
    command: str


@dataclass
class Manifest:
    """The parts of a package.json that script-list cares about."""

    path: Path | None = None
    name: str | None = None
    description: str | None = None
    scripts: dict[str, str] = field(default_factory=dict)

    def entries(self) -> list[ScriptEntry]:
        """Return script entries sorted by name."""
        return [
            ScriptEntry(name=name, command=command)
            for name, command in sorted(self.scripts.items())
        ]

    def display_name(self, fallback: str) -> str:
        return self.name or fallback
