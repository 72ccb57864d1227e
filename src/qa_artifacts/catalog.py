"""Static catalog of artifact kinds and their output naming rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime

from qa_artifacts.config.schema import ArtifactConfig
from qa_artifacts.errors import UnknownArtifactError

SLUG_MAX_LENGTH = 80
SLUG_FALLBACK = "item"

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: object) -> str:
    """Convert a value to a lowercase, hyphen-separated file name fragment.

    Runs of characters outside [a-z0-9] collapse to a single hyphen, edge
    hyphens are stripped and the result is capped at 80 characters (without
    a trailing hyphen, so the transform is idempotent).
    Returns "item" when nothing usable remains.
    """
    raw = str(value if value is not None else "").strip().lower()
    slug = _NON_ALNUM.sub("-", raw).strip("-")[:SLUG_MAX_LENGTH].rstrip("-")
    return slug or SLUG_FALLBACK


def today_iso() -> str:
    """Return today's UTC date as YYYY-MM-DD."""
    return datetime.now(UTC).isoformat()[:10]


@dataclass(frozen=True)
class ArtifactSpec:
    """Catalog entry binding an artifact kind to its template and file name.

    `output_pattern` is a str.format pattern over `date`, `release_slug`,
    `feature_slug` and `title_slug`.
    """

    name: str  # e.g. "test-plan", "bug-report"
    description: str
    template: str  # File name under the bundled template directory
    output_pattern: str

    def output_name(self, config: ArtifactConfig, date: str) -> str:
        """Derive the default output file name for a configuration."""
        return self.output_pattern.format(
            date=date,
            release_slug=slugify(config.release),
            feature_slug=slugify(config.feature),
            title_slug=slugify(config.title),
        )


@dataclass(frozen=True)
class ResolvedArtifact:
    """An artifact spec bound to a configuration, ready to render."""

    spec: ArtifactSpec
    template: str
    output_name: str
    replacements: dict[str, str]


TEST_PLAN = ArtifactSpec(
    name="test-plan",
    description="ISTQB-aligned test plan",
    template="test-plan.md",
    output_pattern="test-plan-{release_slug}.md",
)
TEST_SUMMARY = ArtifactSpec(
    name="test-summary",
    description="End-of-cycle summary report",
    template="test-summary-report.md",
    output_pattern="test-summary-{release_slug}.md",
)
TEST_CASES = ArtifactSpec(
    name="test-cases",
    description="Test cases CSV",
    template="test-cases.csv",
    output_pattern="test-cases-{feature_slug}.csv",
)
TEST_CONDITIONS = ArtifactSpec(
    name="test-conditions",
    description="Test conditions from test basis",
    template="test-conditions.md",
    output_pattern="test-conditions-{feature_slug}.md",
)
TRACEABILITY = ArtifactSpec(
    name="traceability",
    description="Requirements traceability matrix",
    template="traceability-matrix.csv",
    output_pattern="traceability-{feature_slug}.csv",
)
BUG_REPORT = ArtifactSpec(
    name="bug-report",
    description="Detailed defect report",
    template="bug-report.md",
    output_pattern="bug-{date}-{title_slug}.md",
)
BUG_LOG = ArtifactSpec(
    name="bug-log",
    description="Defect tracking log",
    template="bug-log.csv",
    output_pattern="bug-log-{release_slug}.csv",
)
REGRESSION_SUITE = ArtifactSpec(
    name="regression-suite",
    description="Regression suite definition",
    template="regression-suite.md",
    output_pattern="regression-suite.md",
)
PLAYWRIGHT_SPEC = ArtifactSpec(
    name="playwright-spec",
    description="Playwright test scaffold",
    template="playwright-spec.ts",
    output_pattern="{feature_slug}.spec.ts",
)
EXPLORATORY_CHARTER = ArtifactSpec(
    name="exploratory-charter",
    description="Exploratory testing charter",
    template="exploratory-charter.md",
    output_pattern="exploratory-charter-{feature_slug}.md",
)
ENVIRONMENT_CHECKLIST = ArtifactSpec(
    name="environment-checklist",
    description="Environment readiness checklist",
    template="test-environment-checklist.md",
    output_pattern="environment-checklist-{release_slug}.md",
)
RISK_ASSESSMENT = ArtifactSpec(
    name="risk-assessment",
    description="Quality risk assessment matrix",
    template="risk-assessment-matrix.md",
    output_pattern="risk-assessment-{release_slug}.md",
)

ARTIFACTS: tuple[ArtifactSpec, ...] = (
    TEST_PLAN,
    TEST_SUMMARY,
    TEST_CASES,
    TEST_CONDITIONS,
    TRACEABILITY,
    BUG_REPORT,
    BUG_LOG,
    REGRESSION_SUITE,
    PLAYWRIGHT_SPEC,
    EXPLORATORY_CHARTER,
    ENVIRONMENT_CHECKLIST,
    RISK_ASSESSMENT,
)


def get_artifact_names() -> list[str]:
    """Return artifact kind names in catalog order."""
    return [spec.name for spec in ARTIFACTS]


def get_artifact_by_name(name: str) -> ArtifactSpec:
    """Find an artifact spec by exact kind name.

    Raises:
        UnknownArtifactError: If the kind is not in the catalog.
    """
    for spec in ARTIFACTS:
        if spec.name == name:
            return spec
    raise UnknownArtifactError(name)


def resolve_artifact(
    name: str, config: ArtifactConfig, date: str | None = None
) -> ResolvedArtifact:
    """Look up an artifact kind and bind it to a configuration."""
    spec = get_artifact_by_name(name)
    date = date or today_iso()
    return ResolvedArtifact(
        spec=spec,
        template=spec.template,
        output_name=spec.output_name(config, date),
        replacements=config.replacements(date),
    )
