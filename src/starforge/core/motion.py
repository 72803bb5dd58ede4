"""Display-scale rotation and orbital speeds with period conversions."""
from __future__ import annotations

import math

from .model import HabitableZone
from .random_source import RandomSource

# Scene units per AU in the viewport the speeds were tuned for
AU_TO_SCENE_SCALE = 21840.0
BASE_ORBITAL_SPEED = 0.00001

ROTATION_SPEED_SCALE = 0.001         # rotation speed -> Earth hours
ORBITAL_SPEED_SCALE = 0.000000048    # orbital speed -> Earth days

MIN_ROTATION_SPEED = 0.00001
MAX_ROTATION_SPEED = 0.0005


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* between *lo* and *hi*."""

    return max(lo, min(hi, value))


def orbital_speed(orbit_radius_au: float) -> float:
    return BASE_ORBITAL_SPEED / (orbit_radius_au * AU_TO_SCENE_SCALE)


def get_rotation_speed(
    orbit_radius_au: float,
    habitable_zone: HabitableZone,
    system_outer_edge_au: float,
    rng: RandomSource,
) -> float:
    """Signed spin rate; planets near the zone centre turn more slowly.

    Draws twice from *rng*: a magnitude jitter and the spin direction.
    """

    distance_fraction = orbit_radius_au / system_outer_edge_au
    scaling = 1 + habitable_zone.width / 2
    jitter = rng.random() * scaling
    base_speed = 0.0001 + distance_fraction * jitter * 0.0001

    center = habitable_zone.midpoint
    distance_from_center = abs(orbit_radius_au - center) / center if center > 0 else 1.0
    modifier = max(0.5, 1 - distance_from_center)

    speed = clamp(base_speed * modifier, MIN_ROTATION_SPEED, MAX_ROTATION_SPEED)
    return speed if rng.random() < 0.5 else -speed


def rotation_period_hours(rotation_speed: float) -> float:
    return (2 * math.pi / abs(rotation_speed)) * ROTATION_SPEED_SCALE


def orbital_period_days(speed: float, orbit_radius_au: float) -> float:
    return (2 * math.pi * orbit_radius_au / speed) * ORBITAL_SPEED_SCALE


def local_days_per_orbit(rotation_speed: float, speed: float, orbit_radius_au: float) -> float:
    """Number of local days in one orbit."""

    rotation_days = rotation_period_hours(rotation_speed) / 24
    return orbital_period_days(speed, orbit_radius_au) / rotation_days


__all__ = [
    "AU_TO_SCENE_SCALE",
    "clamp",
    "get_rotation_speed",
    "local_days_per_orbit",
    "orbital_period_days",
    "orbital_speed",
    "rotation_period_hours",
]
