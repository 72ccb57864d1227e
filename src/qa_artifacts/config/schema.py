"""Configuration schema for artifact generation."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

# Fields substituted into templates, in display order
TEXT_FIELDS: tuple[str, ...] = (
    "project",
    "release",
    "feature",
    "title",
    "owner",
    "approvers",
    "reported_by",
    "env",
)


@dataclass(frozen=True)
class ArtifactConfig:
    """Values used to name and fill in a generated artifact.

    Instances are immutable; `merge` returns a new config.
    """

    # Document identity
    project: str = "Project"
    release: str = "Release"
    feature: str = "Feature"
    title: str = "Bug title"

    # Ownership and sign-off
    owner: str = ""
    approvers: str = ""
    reported_by: str = ""
    env: str = ""

    # Output settings
    force: bool = False
    out: Path | None = None  # None = current working directory

    def merge(self, other: dict[str, Any]) -> ArtifactConfig:
        """Return a new config with known, non-None values from `other` applied."""
        known = {f.name for f in fields(self)}
        updates: dict[str, Any] = {}
        for key, value in other.items():
            if key not in known or value is None:
                continue
            if key == "out":
                updates[key] = Path(str(value))
            elif key == "force":
                updates[key] = bool(value)
            else:
                updates[key] = str(value)
        return replace(self, **updates)

    def replacements(self, date: str) -> dict[str, str]:
        """Build the placeholder substitution map for templates."""
        result = {"date": date}
        for name in TEXT_FIELDS:
            result[name] = getattr(self, name)
        return result


DEFAULT_CONFIG = ArtifactConfig()
