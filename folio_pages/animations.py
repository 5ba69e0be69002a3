"""Entrance animation presets shared by every portfolio section.

Each section element fades in while sliding up the first time it scrolls
into view. The preset is described here once and rendered into the page as
``data-reveal-*`` attributes; ``static/folio.js`` reads those attributes and
drives the actual transition. Siblings pass an increasing delay to produce a
cascading entrance.

Examples
--------
>>> preset = fade_up(0.2)
>>> preset.transition.delay, preset.transition.duration
(0.2, 0.6)
>>> stagger(3, 0.07).transition.delay
0.21
"""

from __future__ import annotations

import dataclasses as dc
import math

REVEAL_OFFSET = 30.0
REVEAL_DURATION = 0.6
REVEAL_EASING = "ease-out"


@dc.dataclass(frozen=True, slots=True)
class RevealFrame:
    """Opacity and vertical offset for one end of the reveal animation."""

    opacity: float
    offset_y: float


@dc.dataclass(frozen=True, slots=True)
class RevealTransition:
    """Timing of the reveal animation."""

    duration: float
    easing: str
    delay: float


@dc.dataclass(frozen=True, slots=True)
class RevealPreset:
    """Complete entrance animation description for one element.

    Attributes
    ----------
    hidden : RevealFrame
        State applied before the element has entered the viewport.
    visible : RevealFrame
        State the element animates towards.
    once : bool
        When true the animation fires the first time the element becomes
        visible and is never reversed on scroll-away.
    transition : RevealTransition
        Duration, easing, and start delay.
    """

    hidden: RevealFrame
    visible: RevealFrame
    once: bool
    transition: RevealTransition

    def as_attrs(self) -> dict[str, str]:
        """Return the HTML data attributes consumed by the client script."""
        return {
            "data-reveal": "fade-up",
            "data-reveal-offset": _format_number(self.hidden.offset_y),
            "data-reveal-duration": _format_number(self.transition.duration),
            "data-reveal-delay": _format_number(self.transition.delay),
            "data-reveal-ease": self.transition.easing,
            "data-reveal-once": "true" if self.once else "false",
        }


def fade_up(delay: float = 0.0) -> RevealPreset:
    """Return the fade-and-slide-up preset starting after ``delay`` seconds.

    Parameters
    ----------
    delay : float, optional
        Seconds to wait before the animation begins. Must be finite and non-negative.

    Returns
    -------
    RevealPreset
        Hidden at opacity 0 and 30 units below its resting position, visible
        at opacity 1 and no offset, one-shot, 0.6 s ``ease-out``.

    Raises
    ------
    ValueError
        If ``delay`` is negative or not finite.
    """
    if not math.isfinite(delay) or delay < 0:
        msg = f"Reveal delay must be finite and non-negative, got {delay!r}."
        raise ValueError(msg)
    return RevealPreset(
        hidden=RevealFrame(opacity=0.0, offset_y=REVEAL_OFFSET),
        visible=RevealFrame(opacity=1.0, offset_y=0.0),
        once=True,
        transition=RevealTransition(
            duration=REVEAL_DURATION,
            easing=REVEAL_EASING,
            delay=float(delay),
        ),
    )


def stagger(index: int, step: float, *, base: float = 0.0) -> RevealPreset:
    """Return the preset for the ``index``-th sibling of a cascading group."""
    if index < 0:
        msg = f"Stagger index must be non-negative, got {index!r}."
        raise ValueError(msg)
    return fade_up(round(base + index * step, 4))


def _format_number(value: float) -> str:
    """Render ``value`` without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return repr(round(value, 4))


__all__ = [
    "REVEAL_DURATION",
    "REVEAL_EASING",
    "REVEAL_OFFSET",
    "RevealFrame",
    "RevealPreset",
    "RevealTransition",
    "fade_up",
    "stagger",
]
