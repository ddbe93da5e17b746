"""Protozoa exception hierarchy.

Centralised base classes so callers can catch the core's failures narrowly
instead of relying on bare ``except Exception`` blocks.
"""


class ProtozoaError(Exception):
    """Root of all Protozoa domain exceptions."""


class EntropyError(ProtozoaError):
    """Errors while turning external entropy into seeds or streams."""


class InvalidSeedError(EntropyError, ValueError):
    """Raw entropy was empty or malformed, or a seed value is out of range."""


class GeneticsError(ProtozoaError):
    """Trait genesis, inheritance, or mutation failure."""


class OutOfRangeError(GeneticsError):
    """A trait value fell outside its schema bounds.

    Genesis mapping functions should never produce this. Seeing it means the
    schema or a mapping function is wrong.
    """


class InheritanceMismatchError(GeneticsError):
    """Two parent records were built from incompatible trait schemas."""


class InvalidTraitRecordError(GeneticsError, ValueError):
    """Serialized trait record data could not be decoded."""


class ConfigurationError(ProtozoaError):
    """Invalid or missing configuration."""
