"""Provider contract for LLM execution.

Concrete providers implement :class:`Provider` in their own packages.
"""

from .base import Provider

__all__ = [
    "Provider",
]
