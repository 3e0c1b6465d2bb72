"""snyk-greybeard — Snyk CLI wrapper with a grumpy security greybeard.

Runs the Snyk CLI, then asks a chat-completion model to restate the
findings in the voice of a weary old-school security expert.
"""

from snyk_greybeard.version import __build_time__, __version__

__all__: list[str] = ["__build_time__", "__version__"]
