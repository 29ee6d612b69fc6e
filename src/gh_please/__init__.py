"""gh-please: GitHub CLI extension with structured, LLM-friendly output.

Any command not implemented natively is passed through to ``gh`` and its
JSON output is queried and re-encoded on the way back.
"""

from gh_please.version import __version__

__all__: list[str] = ["__version__"]
