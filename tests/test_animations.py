"""Unit tests for the fade-up reveal preset.

The preset is the single source of entrance animation timing for every
section; these tests pin its frames, timing, and the data attributes the
client script reads.
"""

from __future__ import annotations

import math

import pytest

from folio_pages.animations import (
    REVEAL_DURATION,
    REVEAL_OFFSET,
    fade_up,
    stagger,
)


@pytest.mark.parametrize("delay", [0.0, 0.2, 0.4, 1.5])
def test_fade_up_keeps_delay_and_fixed_duration(delay: float) -> None:
    preset = fade_up(delay)
    assert preset.transition.delay == delay
    assert preset.transition.duration == REVEAL_DURATION == 0.6
    assert preset.transition.easing == "ease-out"


def test_fade_up_frames_and_trigger() -> None:
    preset = fade_up()
    assert (preset.hidden.opacity, preset.hidden.offset_y) == (0.0, REVEAL_OFFSET)
    assert (preset.visible.opacity, preset.visible.offset_y) == (1.0, 0.0)
    assert preset.once is True


def test_fade_up_is_deterministic() -> None:
    assert fade_up(0.3) == fade_up(0.3)


@pytest.mark.parametrize("delay", [-0.1, math.nan, math.inf, -math.inf])
def test_fade_up_rejects_negative_or_non_finite_delay(delay: float) -> None:
    with pytest.raises(ValueError, match="finite and non-negative"):
        fade_up(delay)


def test_stagger_cascades_siblings() -> None:
    delays = [stagger(index, 0.07).transition.delay for index in range(4)]
    assert delays == [0.0, 0.07, 0.14, 0.21]


def test_stagger_applies_base_offset() -> None:
    assert stagger(1, 0.1, base=0.1).transition.delay == 0.2


def test_stagger_rejects_negative_index() -> None:
    with pytest.raises(ValueError, match="index"):
        stagger(-1, 0.1)


def test_as_attrs_renders_client_hooks() -> None:
    assert fade_up(0.15).as_attrs() == {
        "data-reveal": "fade-up",
        "data-reveal-offset": "30",
        "data-reveal-duration": "0.6",
        "data-reveal-delay": "0.15",
        "data-reveal-ease": "ease-out",
        "data-reveal-once": "true",
    }
