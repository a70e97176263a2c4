"""Allow ``python -m remotectl``."""

from remotectl.cli import cli

cli()
