"""Random parent star generation from per-class tables."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import GENERATOR_CFG, GeneratorCfg
from .habitable import calculate_habitable_zone
from .model import SpectralType, Star
from .random_source import RandomSource, make_rng, pick, uniform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StarProfile:
    """Uniform draw ranges and the luminosity proxy for one spectral class."""
    age_range: tuple[float, float]   # billions of years
    size_range: tuple[float, float]  # solar radii
    mass_range: tuple[float, float]  # solar masses
    luminosity_factor: float         # luminosity = size * factor
    temperature: float               # Kelvin, for display and surface heating


# =======================
#   SPECTRAL CLASSES
# =======================
# Ages shrink toward zero for hot massive stars; size and mass grow M -> O.
STAR_PROFILES: dict[SpectralType, StarProfile] = {
    SpectralType.M: StarProfile((1, 5000), (0.1, 0.7), (0.08, 0.45), 0.08, 3250),
    SpectralType.K: StarProfile((1, 30), (0.7, 0.96), (0.45, 0.8), 0.6, 4250),
    SpectralType.G: StarProfile((1, 10), (0.96, 1.15), (0.8, 1.04), 1.0, 5750),
    SpectralType.F: StarProfile((1, 4), (1.15, 1.4), (1.04, 1.4), 1.5, 6750),
    SpectralType.A: StarProfile((0.1, 3), (1.4, 1.8), (1.4, 2.1), 5.0, 8750),
    SpectralType.B: StarProfile((0.01, 0.5), (1.8, 6.6), (2.1, 16), 25.0, 20000),
    SpectralType.O: StarProfile((0.001, 0.1), (6.6, 20), (16, 90), 50.0, 35000),
}

DEFAULT_STAR_TEMPERATURE = 5500.0
STAR_TYPE_ORDER: tuple[SpectralType, ...] = tuple(SpectralType)


def _profile(spectral_type: object) -> Optional[StarProfile]:
    if not isinstance(spectral_type, SpectralType):
        try:
            spectral_type = SpectralType(spectral_type)
        except ValueError:
            logger.warning("Unknown spectral type %r, using zero-valued defaults", spectral_type)
            return None
    return STAR_PROFILES[spectral_type]


def generate_star_age(spectral_type: SpectralType, rng: RandomSource) -> float:
    profile = _profile(spectral_type)
    if profile is None:
        return 0.0
    return uniform(rng, *profile.age_range)


def generate_star_size_and_mass(spectral_type: SpectralType, rng: RandomSource) -> tuple[float, float]:
    """Draw ``(size, mass)``; size is drawn first."""
    profile = _profile(spectral_type)
    if profile is None:
        return 0.0, 0.0
    size = uniform(rng, *profile.size_range)
    mass = uniform(rng, *profile.mass_range)
    return size, mass


def generate_star_luminosity(spectral_type: SpectralType, size: float) -> float:
    """Simplified proxy: size times a fixed per-class multiplier."""
    profile = _profile(spectral_type)
    if profile is None:
        return 0.0
    return size * profile.luminosity_factor


def star_temperature(spectral_type: SpectralType) -> float:
    profile = _profile(spectral_type)
    if profile is None:
        return DEFAULT_STAR_TEMPERATURE
    return profile.temperature


def generate_star(rng: Optional[RandomSource] = None, cfg: GeneratorCfg = GENERATOR_CFG) -> Star:
    """
    Generate a random parent star with its habitable zone attached.

    Args:
        rng: Random source (a fresh unseeded one if None)
        cfg: Generator configuration for the habitable zone coefficients

    Returns:
        A new immutable Star
    """
    rng = make_rng(rng=rng)
    spectral_type = pick(rng, STAR_TYPE_ORDER)
    age = generate_star_age(spectral_type, rng)
    size, mass = generate_star_size_and_mass(spectral_type, rng)
    luminosity = generate_star_luminosity(spectral_type, size)
    star = Star(
        spectral_type=spectral_type,
        age=age,
        size=size,
        mass=mass,
        luminosity=luminosity,
        habitable_zone=calculate_habitable_zone(luminosity, cfg),
    )
    logger.debug(
        "Generated %s star: age=%.3f size=%.3f mass=%.3f luminosity=%.3f",
        spectral_type.value, age, size, mass, luminosity,
    )
    return star


__all__ = [
    "DEFAULT_STAR_TEMPERATURE",
    "STAR_PROFILES",
    "STAR_TYPE_ORDER",
    "StarProfile",
    "generate_star",
    "generate_star_age",
    "generate_star_luminosity",
    "generate_star_size_and_mass",
    "star_temperature",
]
