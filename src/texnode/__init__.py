"""tex-node — BibTeX / JSON / TeX conversion for shell pipelines.

Each command reads input files in order and streams the transformed
result to stdout, so it composes with other UNIX tools.
"""

from texnode.version import __version__

__all__: list[str] = ["__version__"]
