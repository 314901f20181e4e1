"""Infrastructure layer — operating-system integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~texnode.exceptions.TexNodeError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from texnode.infra.filesystem import read_text

__all__: list[str] = ["read_text"]
