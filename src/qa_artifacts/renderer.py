"""Render catalog templates to files."""

from __future__ import annotations

import logging
from pathlib import Path

from qa_artifacts.catalog import ResolvedArtifact, resolve_artifact
from qa_artifacts.config.schema import ArtifactConfig
from qa_artifacts.errors import OverwriteRefusedError, TemplateNotFoundError

logger = logging.getLogger(__name__)


def get_templates_path() -> Path:
    """Get path to the package-bundled templates."""
    return Path(__file__).parent / "assets" / "templates"


def render_template(text: str, replacements: dict[str, str]) -> str:
    """Replace every ``{{key}}`` token for the keys in `replacements`.

    Tokens naming other keys are left as literal text.
    """
    for key, value in replacements.items():
        text = text.replace("{{" + key + "}}", value)
    return text


def get_output_path(artifact: ResolvedArtifact, config: ArtifactConfig) -> Path:
    """Resolve the output file path (defaults to the current directory)."""
    out_dir = (config.out if config.out is not None else Path.cwd()).resolve()
    return out_dir / artifact.output_name


def write_artifact(artifact: ResolvedArtifact, config: ArtifactConfig) -> Path:
    """Render a resolved artifact and write it to disk.

    The existence check and the write are separate steps; a concurrent
    writer to the same path is not guarded against.

    Returns:
        The absolute path of the written file.

    Raises:
        TemplateNotFoundError: If the template is missing from disk.
        OverwriteRefusedError: If the output exists and force is not set.
    """
    template_path = get_templates_path() / artifact.template
    if not template_path.is_file():
        raise TemplateNotFoundError(template_path)

    out_path = get_output_path(artifact, config)
    if out_path.exists() and not config.force:
        raise OverwriteRefusedError(out_path)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps the template line endings byte for byte
    with template_path.open(encoding="utf-8", newline="") as f:
        raw = f.read()
    rendered = render_template(raw, artifact.replacements)
    with out_path.open("w", encoding="utf-8", newline="") as f:
        f.write(rendered)

    logger.debug("Rendered %s from %s to %s", artifact.spec.name, template_path, out_path)
    return out_path


def create_artifact(
    name: str, config: ArtifactConfig, date: str | None = None
) -> Path:
    """Look up an artifact kind, render its template and write the result."""
    return write_artifact(resolve_artifact(name, config, date), config)
