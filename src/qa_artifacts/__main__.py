"""Allow running as ``python -m qa_artifacts``."""

from qa_artifacts.cli import main

main()
