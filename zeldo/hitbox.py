"""Mouse hit tests against on-screen sprite bounds."""

from __future__ import annotations

from zeldo.model import FloatRect


def hits_button(
    bounds: FloatRect, mouse: tuple[float, float], dx: float = 0, dy: float = 0
) -> bool:
    """True if the mouse lies in the bounds shifted by (dx, dy), edges included."""
    x, y = mouse
    left = bounds.left + dx
    top = bounds.top + dy
    return left <= x <= left + bounds.width and top <= y <= top + bounds.height


def is_hovered(bounds: FloatRect, mouse: tuple[float, float]) -> bool:
    """True if the mouse lies in the bounds, edges included."""
    return hits_button(bounds, mouse, 0, 0)