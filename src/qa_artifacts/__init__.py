"""qa-artifacts - generate ISTQB-style QA documents from templates."""

__version__ = "0.1.0"
