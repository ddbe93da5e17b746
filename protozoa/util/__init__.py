"""Core utilities."""

from protozoa.util.rng import MissingStreamError, require_stream

__all__ = [
    "MissingStreamError",
    "require_stream",
]
