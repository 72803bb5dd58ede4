"""Solar system generation: orbit spacing, classification and habitable zone coverage."""
from __future__ import annotations

import logging
import math
from typing import Optional

from .atmosphere import get_planet_atmosphere
from .config import GENERATOR_CFG, GeneratorCfg
from .exceptions import InvalidArgumentError, require_member
from .model import HabitableZone, Planet, PlanetType, SolarSystem, Star
from .random_source import RandomSource, make_rng, pick, uniform
from .star import generate_star

logger = logging.getLogger(__name__)


# =======================
#   PLANET TABLES
# =======================
# Upper bounds are exclusive; anything beyond the last band is a dwarf planet.
PLANET_TYPE_BANDS: tuple[tuple[float, PlanetType], ...] = (
    (0.5, PlanetType.LAVA_PLANET),
    (1.5, PlanetType.TERRESTRIAL),
    (5.0, PlanetType.OCEAN_WORLD),
    (10.0, PlanetType.GAS_GIANT),
    (30.0, PlanetType.ICE_GIANT),
)

PLANET_SIZE_RANGES: dict[PlanetType, tuple[float, float]] = {
    PlanetType.LAVA_PLANET: (0.3, 1.0),
    PlanetType.TERRESTRIAL: (0.5, 1.5),
    PlanetType.OCEAN_WORLD: (0.8, 2.0),
    PlanetType.GAS_GIANT: (6.0, 15.0),
    PlanetType.ICE_GIANT: (5.0, 14.0),
    PlanetType.DWARF_PLANET: (0.1, 0.3),
}

# Inclusive on both ends
PLANET_MOON_RANGES: dict[PlanetType, tuple[int, int]] = {
    PlanetType.TERRESTRIAL: (0, 3),
    PlanetType.OCEAN_WORLD: (0, 2),
    PlanetType.GAS_GIANT: (1, 80),
    PlanetType.ICE_GIANT: (1, 50),
    PlanetType.LAVA_PLANET: (0, 2),
    PlanetType.DWARF_PLANET: (0, 5),
}


def orbit_radius(planet_index: int, total_planets: int, cfg: GeneratorCfg = GENERATOR_CFG) -> float:
    """
    Log-spaced orbit radius in AU for the planet at *planet_index*.

    The spacing divides the log range by the total planet count rather than
    ``count - 1``, so the outermost planet always stays short of
    ``cfg.max_orbit_au``.
    """
    if total_planets <= 0 or not 0 <= planet_index < total_planets:
        raise InvalidArgumentError(
            "Planet index must lie in [0, total_planets)",
            error_code="BAD_PLANET_INDEX",
            context={"planet_index": planet_index, "total_planets": total_planets},
        )
    log_min = math.log(cfg.min_orbit_au)
    spacing = (math.log(cfg.max_orbit_au) - log_min) / total_planets
    return math.exp(log_min + spacing * planet_index)


def determine_planet_type(orbit_radius: float) -> PlanetType:
    """Classify a planet by orbit radius alone."""
    if math.isnan(orbit_radius) or orbit_radius < 0:
        raise InvalidArgumentError(
            f"Orbit radius must be a non-negative number, got {orbit_radius}",
            error_code="BAD_ORBIT_RADIUS",
            context={"orbit_radius": orbit_radius},
        )
    for upper, planet_type in PLANET_TYPE_BANDS:
        if orbit_radius < upper:
            return planet_type
    return PlanetType.DWARF_PLANET


def get_planet_size(planet_type: PlanetType, rng: RandomSource) -> float:
    require_member(planet_type, PlanetType, "planet_type")
    return uniform(rng, *PLANET_SIZE_RANGES[planet_type])


def get_planet_moons(planet_type: PlanetType, rng: RandomSource) -> int:
    require_member(planet_type, PlanetType, "planet_type")
    return rng.randint(*PLANET_MOON_RANGES[planet_type])


def adjust_for_habitable_zone_planet(
    planets: list[Planet],
    habitable_zone: HabitableZone,
    rng: RandomSource,
    cfg: GeneratorCfg = GENERATOR_CFG,
) -> Optional[Planet]:
    """
    Move one random planet to the zone midpoint if none lies inside the zone.

    The moved planet becomes Terrestrial. Unless
    ``cfg.recompute_adjusted_planet`` is set, its size, atmosphere and moon
    count are the ones drawn for its original orbit.

    Returns:
        The adjusted planet, or None when the zone was already covered
    """
    if not planets or any(habitable_zone.contains(p.orbit_radius) for p in planets):
        return None

    planet = pick(rng, planets)
    previous_radius, previous_type = planet.orbit_radius, planet.planet_type
    planet.orbit_radius = habitable_zone.midpoint
    planet.planet_type = PlanetType.TERRESTRIAL
    if cfg.recompute_adjusted_planet:
        planet.size = get_planet_size(planet.planet_type, rng)
        planet.atmosphere = get_planet_atmosphere(
            planet.planet_type, planet.orbit_radius, habitable_zone, rng
        )
        planet.moons = get_planet_moons(planet.planet_type, rng)
    logger.info(
        "Moved %s at %.3f AU to habitable zone midpoint %.3f AU (recomputed=%s)",
        previous_type.value, previous_radius, planet.orbit_radius, cfg.recompute_adjusted_planet,
    )
    return planet


def generate_solar_system(
    star: Star,
    rng: Optional[RandomSource] = None,
    cfg: GeneratorCfg = GENERATOR_CFG,
) -> SolarSystem:
    """
    Generate the planets orbiting *star*.

    Args:
        star: Parent star; only its habitable zone is consulted
        rng: Random source (a fresh unseeded one if None)
        cfg: Orbit bounds, planet count range and adjustment policy

    Returns:
        A SolarSystem sorted by orbit radius with at least one planet
        inside the habitable zone
    """
    cfg.validate()
    rng = make_rng(rng=rng)
    zone = star.habitable_zone
    count = rng.randint(cfg.min_planets, cfg.max_planets)
    logger.debug("Generating %d planets around %s star", count, star.spectral_type.value)

    planets: list[Planet] = []
    zone_covered = False
    for index in range(count):
        radius = orbit_radius(index, count, cfg)
        planet_type = determine_planet_type(radius)
        size = get_planet_size(planet_type, rng)
        atmosphere = get_planet_atmosphere(planet_type, radius, zone, rng)
        moons = get_planet_moons(planet_type, rng)
        if zone.contains(radius):
            zone_covered = True
        planets.append(
            Planet(
                planet_type=planet_type,
                orbit_radius=radius,
                size=size,
                atmosphere=atmosphere,
                moons=moons,
            )
        )

    if not zone_covered:
        adjust_for_habitable_zone_planet(planets, zone, rng, cfg)

    planets.sort(key=lambda p: p.orbit_radius)
    return SolarSystem(planets=planets, habitable_zone=zone)


def generate_orbit(
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
    cfg: GeneratorCfg = GENERATOR_CFG,
) -> tuple[Star, SolarSystem]:
    """Generate a star and its planets from one random source."""
    rng = make_rng(seed, rng)
    star = generate_star(rng, cfg)
    return star, generate_solar_system(star, rng, cfg)


__all__ = [
    "PLANET_MOON_RANGES",
    "PLANET_SIZE_RANGES",
    "PLANET_TYPE_BANDS",
    "adjust_for_habitable_zone_planet",
    "determine_planet_type",
    "generate_orbit",
    "generate_solar_system",
    "get_planet_moons",
    "get_planet_size",
    "orbit_radius",
]
