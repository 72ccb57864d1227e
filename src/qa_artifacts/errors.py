"""Errors raised while resolving options and rendering artifacts."""

from pathlib import Path


class QAArtifactsError(Exception):
    """Base exception for qa-artifacts failures reported to the user."""


class UsageError(QAArtifactsError):
    """Raised when command-line arguments are malformed or missing."""


class UnknownArtifactError(QAArtifactsError):
    """Raised when an artifact kind is not in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown artifact: {name}")


class TemplateNotFoundError(QAArtifactsError):
    """Raised when a catalog template is missing from disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Template not found: {path}")


class OverwriteRefusedError(QAArtifactsError):
    """Raised when the output file exists and --force was not given."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Refusing to overwrite existing file: {path} (use --force)")
