"""Allow running as `python -m tranclator`."""

from tranclator.main import cli

cli()
