"""Habitable zone bounds derived from stellar luminosity."""
from __future__ import annotations

import math

from .config import GENERATOR_CFG, GeneratorCfg
from .exceptions import InvalidArgumentError
from .model import HabitableZone


def calculate_habitable_zone(luminosity: float, cfg: GeneratorCfg = GENERATOR_CFG) -> HabitableZone:
    """Return the zone ``(0.95 * sqrt(L), 1.37 * sqrt(L))`` in AU."""

    if luminosity < 0 or math.isnan(luminosity):
        raise InvalidArgumentError(
            f"Luminosity must be non-negative, got {luminosity}",
            error_code="NEGATIVE_LUMINOSITY",
            context={"luminosity": luminosity},
        )
    root = math.sqrt(luminosity)
    return HabitableZone(
        inner_boundary=cfg.habitable_inner_coeff * root,
        outer_boundary=cfg.habitable_outer_coeff * root,
    )


def is_in_habitable_zone(orbit_radius: float, habitable_zone: HabitableZone) -> bool:
    """Inclusive membership test on both boundaries."""

    return habitable_zone.contains(orbit_radius)


__all__ = ["calculate_habitable_zone", "is_in_habitable_zone"]
