"""Stream access helpers for deterministic generation.

These helpers fail loudly when a deterministic stream is missing, rather
than silently creating an unseeded fallback that would break reproducibility.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from protozoa.entropy.stream import Stream


class MissingStreamError(RuntimeError):
    """Raised when a stream is required but was not provided.

    This indicates a wiring bug in the caller: every consumer must be handed
    its own stream derived from a seed.
    """


def require_stream(stream: Optional["Stream"], context: str) -> "Stream":
    """Validate that a stream parameter was provided, failing loudly if not.

    Use this instead of ``stream or random.Random()`` so that a missing
    stream surfaces immediately instead of producing organisms nobody can
    reproduce.

    Args:
        stream: The stream that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated stream

    Raises:
        MissingStreamError: If stream is None

    Example:
        def inherit(self, parent_a, parent_b, stream):
            stream = require_stream(stream, "GeneticInheritanceEngine.inherit")
    """
    if stream is None:
        raise MissingStreamError(
            f"Stream required: {context}. Derive one from a SeededEntropySource."
        )
    return stream
