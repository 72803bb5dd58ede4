"""Core star system generation, free of any rendering dependency."""

from .atmosphere import get_base_composition, get_planet_atmosphere
from .config import GENERATOR_CFG, RENDER_CFG, GeneratorCfg, RenderCfg
from .exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    ShareCodeError,
    StarForgeError,
)
from .habitable import calculate_habitable_zone, is_in_habitable_zone
from .model import (
    AtmosphereType,
    HabitableZone,
    Planet,
    PlanetType,
    SolarSystem,
    SpectralType,
    Star,
    Universe,
)
from .names import generate_planet_name
from .orbit import determine_planet_type, generate_orbit, generate_solar_system
from .random_source import RandomSource, SplitMix32, make_rng
from .star import generate_star
from .universe import build_universe

__all__ = [
    "AtmosphereType",
    "ConfigurationError",
    "GENERATOR_CFG",
    "GeneratorCfg",
    "HabitableZone",
    "InvalidArgumentError",
    "Planet",
    "PlanetType",
    "RENDER_CFG",
    "RandomSource",
    "RenderCfg",
    "ShareCodeError",
    "SolarSystem",
    "SpectralType",
    "SplitMix32",
    "Star",
    "StarForgeError",
    "Universe",
    "build_universe",
    "calculate_habitable_zone",
    "determine_planet_type",
    "generate_orbit",
    "generate_planet_name",
    "generate_solar_system",
    "generate_star",
    "get_base_composition",
    "get_planet_atmosphere",
    "is_in_habitable_zone",
    "make_rng",
]
