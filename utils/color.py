"""
utils/color.py — Color helpers for Flappy Canvas.

Used by the renderers to build the vertical sky and ground gradients from
a handful of stops and to derive shaded pipe and bird edges from a base
color, so every shade does not have to be listed in settings.py.
"""

from typing import Sequence, Tuple

RGBColor = Tuple[int, int, int]


def clamp(value: int, lo: int = 0, hi: int = 255) -> int:
    """Clamp an integer value to [lo, hi]."""
    return max(lo, min(hi, value))


def darker(color: RGBColor, amount: int = 40) -> RGBColor:
    """Return `color` with `amount` subtracted from each channel."""
    r, g, b = color
    return (clamp(r - amount), clamp(g - amount), clamp(b - amount))


def with_alpha(color: RGBColor, alpha: float) -> Tuple[int, int, int, int]:
    """Append an alpha channel to an RGB tuple.

    Args:
        color: Base RGB tuple.
        alpha: Opacity in [0.0, 1.0].

    Returns:
        An RGBA tuple for drawing onto SRCALPHA surfaces.
    """
    return (color[0], color[1], color[2], clamp(int(alpha * 255)))


def lerp_color(a: RGBColor, b: RGBColor, t: float) -> RGBColor:
    """Linearly interpolate between two RGB colors.

    Args:
        a: Start color.
        b: End color.
        t: Interpolation factor in [0.0, 1.0]. 0 → a, 1 → b.

    Returns:
        Interpolated RGB tuple.
    """
    t = max(0.0, min(1.0, t))
    return (
        clamp(int(a[0] + (b[0] - a[0]) * t)),
        clamp(int(a[1] + (b[1] - a[1]) * t)),
        clamp(int(a[2] + (b[2] - a[2]) * t)),
    )


def gradient_at(stops: Sequence[Tuple[float, RGBColor]], t: float) -> RGBColor:
    """Sample a multi-stop gradient.

    Args:
        stops: (position, color) pairs sorted by position in [0.0, 1.0].
        t:     Sample position in [0.0, 1.0].

    Returns:
        The color at `t`, interpolated between the surrounding stops.
    """
    if t <= stops[0][0]:
        return stops[0][1]
    for (p0, c0), (p1, c1) in zip(stops, stops[1:]):
        if t <= p1:
            span = p1 - p0
            return lerp_color(c0, c1, (t - p0) / span if span else 1.0)
    return stops[-1][1]
