"""Linear blending between two formation patterns."""

from protozoa.spatial.patterns import FormationPattern


def blend_patterns(a: FormationPattern, b: FormationPattern, alpha: float) -> FormationPattern:
    """Interpolate ``a`` toward ``b`` position by position.

    ``alpha`` is clamped to [0, 1]. The result has as many positions as the
    shorter input and keeps ``b``'s id once alpha reaches 1, otherwise ``a``'s.
    """
    alpha = max(0.0, min(1.0, float(alpha)))
    positions = tuple(
        start.lerp(end, alpha) for start, end in zip(a.positions, b.positions)
    )
    target = b if alpha >= 1.0 else a
    return FormationPattern(
        id=target.id,
        positions=positions,
        pattern_class=target.pattern_class,
        fallback=target.fallback,
    )
