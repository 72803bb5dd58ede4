"""One complete generation pass: star, planets and derived per-planet details."""
from __future__ import annotations

import logging
from typing import Optional

from .atmosphere import calculate_surface_temperature
from .config import GENERATOR_CFG, GeneratorCfg
from .geology import determine_planetary_composition, generate_geological_data
from .model import Planet, PlanetDetails, Star, Universe
from .motion import get_rotation_speed, orbital_speed
from .names import generate_planet_name, generate_system_name, planet_label
from .orbit import generate_orbit
from .random_source import RandomSource, make_rng, uniform
from .star import star_temperature

logger = logging.getLogger(__name__)


def derive_planet_details(
    planet: Planet,
    star: Star,
    outer_edge: float,
    rng: RandomSource,
    cfg: GeneratorCfg = GENERATOR_CFG,
) -> PlanetDetails:
    """Display data for one planet. Draws rotation, then axial tilt, then tidal lock."""
    return PlanetDetails(
        geology=generate_geological_data(planet.size, planet.orbit_radius, star.size, star.mass),
        composition=determine_planetary_composition(
            planet.size, planet.orbit_radius, star.size, star.luminosity
        ),
        surface_temperature=calculate_surface_temperature(
            star.luminosity,
            star_temperature(star.spectral_type),
            planet.orbit_radius,
            planet.size,
            planet.atmosphere,
        ),
        rotation_speed=get_rotation_speed(planet.orbit_radius, star.habitable_zone, outer_edge, rng),
        orbital_speed=orbital_speed(planet.orbit_radius),
        axial_tilt=uniform(rng, 0.0, cfg.max_axial_tilt_deg),
        tidally_locked=rng.random() < cfg.tidal_lock_probability,
    )


def build_universe(
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
    cfg: GeneratorCfg = GENERATOR_CFG,
) -> Universe:
    """
    Generate a named star system with display details for every planet.

    Args:
        seed: Seed for a SplitMix32 source, ignored when *rng* is given
        rng: Explicit random source
        cfg: Generator configuration

    Returns:
        A Universe whose ``details`` list is parallel to its planets
    """
    rng = make_rng(seed, rng)
    system_name = generate_system_name(rng)
    star, system = generate_orbit(rng=rng, cfg=cfg)
    outer_edge = system.outer_edge
    details = [derive_planet_details(planet, star, outer_edge, rng, cfg) for planet in system]

    universe = Universe(system_name=system_name, star=star, system=system, details=details)
    logger.info(
        "Built system %s: %s star, %d planets, %d in habitable zone",
        system_name, star.spectral_type.value, len(system), len(system.habitable_planets()),
    )
    return universe


def planet_name(universe: Universe, index: int) -> str:
    """Human-facing label, numbered from 1."""
    return planet_label(universe.system_name, index + 1)


def planet_designation(universe: Universe, index: int, system_number: int = 1) -> str:
    """Catalogue code built from the planet's atmosphere, tectonics and moons."""
    planet = universe.system[index]
    return generate_planet_name(
        system_number,
        index + 1,
        atmosphere_type=planet.atmosphere.value[0].upper(),
        geological_activity=universe.details[index].geology.tectonics,
        moon_count=planet.moons,
    )


__all__ = ["build_universe", "derive_planet_details", "planet_designation", "planet_name"]
