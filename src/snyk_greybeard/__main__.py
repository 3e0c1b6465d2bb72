"""Allow ``python -m snyk_greybeard`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m snyk_greybeard`` behaves identically to the
``snyk-greybeard`` console script.
"""

from __future__ import annotations

from snyk_greybeard.cli.app import cli

if __name__ == "__main__":
    cli()
