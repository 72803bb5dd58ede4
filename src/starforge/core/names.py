"""Planet and system naming."""
from __future__ import annotations

from typing import Optional, Union

from .model import TectonicActivity
from .random_source import RandomSource, make_rng, pick

BODY_TYPE_PLANET = "P"
FALLBACK_ATMOSPHERE_LETTERS: tuple[str, ...] = ("M", "O", "K", "L")
FALLBACK_ACTIVITIES: tuple[str, ...] = tuple(activity.value for activity in TectonicActivity)
FALLBACK_MAX_MOONS = 4
SYSTEM_NAME_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def generate_planet_name(
    system_number: Union[int, str],
    planet_index: int,
    atmosphere_type: Optional[str] = None,
    geological_activity: Union[TectonicActivity, str, None] = None,
    moon_count: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """
    Format ``P-{system}-{index}-{atmosphere}-{activity}-{moons}``.

    Arguments left as None are drawn from small fallback sets: an
    atmosphere letter from M/O/K/L, an activity level, and 0-4 moons.
    """
    if atmosphere_type is None or geological_activity is None or moon_count is None:
        rng = make_rng(rng=rng)
    if atmosphere_type is None:
        atmosphere_type = pick(rng, FALLBACK_ATMOSPHERE_LETTERS)
    if geological_activity is None:
        geological_activity = pick(rng, FALLBACK_ACTIVITIES)
    elif isinstance(geological_activity, TectonicActivity):
        geological_activity = geological_activity.value
    if moon_count is None:
        moon_count = rng.randint(0, FALLBACK_MAX_MOONS)
    return (
        f"{BODY_TYPE_PLANET}-{system_number}-{planet_index}-"
        f"{atmosphere_type}-{geological_activity}-{moon_count}"
    )


def generate_system_name(rng: Optional[RandomSource] = None) -> str:
    """Random catalogue-style name such as ``P4QZ-07B``."""
    rng = make_rng(rng=rng)
    head = "".join(pick(rng, SYSTEM_NAME_CHARS) for _ in range(3))
    tail = "".join(pick(rng, SYSTEM_NAME_CHARS) for _ in range(3))
    return f"{BODY_TYPE_PLANET}{head}-{tail}"


def planet_label(system_name: str, planet_number: int) -> str:
    return f"{system_name}/{planet_number}"


__all__ = [
    "FALLBACK_ACTIVITIES",
    "FALLBACK_ATMOSPHERE_LETTERS",
    "generate_planet_name",
    "generate_system_name",
    "planet_label",
]
