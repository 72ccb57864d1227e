"""Resolve ``--key value`` command-line tokens into an artifact configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields

from qa_artifacts.config.schema import ArtifactConfig
from qa_artifacts.errors import UsageError

logger = logging.getLogger(__name__)

FLAG_PREFIX = "--"
FORCE_FLAG = "force"


@dataclass(frozen=True)
class ParsedArgs:
    """Result of scanning an argument vector."""

    options: dict[str, str]
    force: bool = False
    positionals: tuple[str, ...] = ()


def _option_name(token: str) -> str:
    """Strip the flag prefix and normalise dashes (--reported-by -> reported_by)."""
    name = token[len(FLAG_PREFIX) :].replace("-", "_")
    if not name:
        raise UsageError(f"Invalid option: {token}")
    return name


def parse_args(argv: list[str]) -> ParsedArgs:
    """Scan tokens left to right into options, the force flag and positionals.

    Every option except --force consumes the next token as its value.
    Repeated options overwrite earlier ones. Positionals keep their order.

    Raises:
        UsageError: If an option has no value, or its value looks like a flag.
    """
    options: dict[str, str] = {}
    positionals: list[str] = []
    force = False

    i = 0
    while i < len(argv):
        token = argv[i]
        if not token.startswith(FLAG_PREFIX):
            positionals.append(token)
            i += 1
            continue

        name = _option_name(token)
        if name == FORCE_FLAG:
            force = True
            i += 1
            continue

        if i + 1 >= len(argv) or argv[i + 1].startswith(FLAG_PREFIX):
            raise UsageError(f"Missing value for {token}")
        options[name] = argv[i + 1]
        i += 2

    return ParsedArgs(options=options, force=force, positionals=tuple(positionals))


def resolve_config(parsed: ParsedArgs, base: ArtifactConfig) -> ArtifactConfig:
    """Overlay parsed command-line options on a base configuration.

    Options that do not name a configuration field are ignored with a warning.
    """
    known = {f.name for f in fields(ArtifactConfig)} - {FORCE_FLAG}
    values: dict[str, object] = {}
    for name, value in parsed.options.items():
        if name not in known:
            logger.warning("Ignoring unknown option --%s", name)
            continue
        values[name] = value
    if parsed.force:
        values[FORCE_FLAG] = True
    return base.merge(values)
