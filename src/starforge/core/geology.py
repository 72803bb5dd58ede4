"""Placeholder interior structure and crust composition for generated planets.

None of these values come from a geophysical model. Layer sizes are fixed
fractions of the planet radius and element abundances are relative weights
nudged by star size and the ice line.
"""
from __future__ import annotations

import math
from typing import Iterable

from ..data.elements import ELEMENT_DEFINITIONS, Element
from .exceptions import InvalidArgumentError
from .model import CoreLayer, GeologicalData, Layer, TectonicActivity

CORE_FRACTION = 0.55
MANTLE_FRACTION = 0.44
CRUST_FRACTION = 0.01

# Mantle heat proxy thresholds (Earth radii, scaled by tidal heating)
ACTIVE_THRESHOLD = 0.3
VERY_ACTIVE_THRESHOLD = 1.0

# Mass fractions of the most common crustal elements
CRUSTAL_ABUNDANCE: dict[str, float] = {
    "O": 0.461,
    "Si": 0.282,
    "Al": 0.082,
    "Fe": 0.056,
    "Ca": 0.041,
    "Na": 0.023,
    "Mg": 0.023,
    "K": 0.020,
    "Ti": 0.005,
    "H": 0.0014,
}


def estimate_core_size(planet_radius: float) -> float:
    return planet_radius * CORE_FRACTION


def estimate_mantle_size(planet_radius: float) -> float:
    return planet_radius * MANTLE_FRACTION


def estimate_crust_size(planet_radius: float) -> float:
    return planet_radius * CRUST_FRACTION


def assess_tectonic_activity(mantle_size: float, orbit_radius: float, star_mass: float) -> TectonicActivity:
    """Bucket mantle size boosted by a ``mass / r^3`` tidal term."""
    if orbit_radius <= 0:
        raise InvalidArgumentError(
            "Orbit radius must be positive",
            error_code="NON_POSITIVE_ORBIT",
            context={"orbit_radius": orbit_radius},
        )
    heat = mantle_size * (1.0 + star_mass / orbit_radius**3)
    if heat < ACTIVE_THRESHOLD:
        return TectonicActivity.NONE
    if heat < VERY_ACTIVE_THRESHOLD:
        return TectonicActivity.ACTIVE
    return TectonicActivity.VERY_ACTIVE


def generate_geological_data(
    planet_size: float,
    orbit_radius: float,
    star_size: float,
    star_mass: float,
) -> GeologicalData:
    mantle_size = estimate_mantle_size(planet_size)
    return GeologicalData(
        core=CoreLayer(size=estimate_core_size(planet_size)),
        mantle=Layer(size=mantle_size),
        crust=Layer(size=estimate_crust_size(planet_size)),
        tectonics=assess_tectonic_activity(mantle_size, orbit_radius, star_mass),
    )


# =======================
#   ELEMENT ABUNDANCE
# =======================
def base_probability(element: Element) -> float:
    if element.symbol in CRUSTAL_ABUNDANCE:
        return CRUSTAL_ABUNDANCE[element.symbol]
    probability = 1.0 / element.atomic_mass
    if 55 <= element.atomic_mass <= 58:
        # iron peak
        probability *= 2
    if element.atomic_mass > 200:
        probability *= 0.1
    return probability


def adjust_for_star_size(element: Element, star_size: float) -> float:
    """Bigger stars favour heavier elements; never below 0.1."""
    shift = (element.atomic_mass - 30) / 200
    factor = 1 + shift if star_size > 1 else 1 - shift
    return max(factor, 0.1)


def calculate_ice_line(star_luminosity: float) -> float:
    return math.sqrt(star_luminosity / 4)


def adjust_for_orbital_radius(element: Element, orbit_radius: float, star_luminosity: float) -> float:
    inside_ice_line = orbit_radius < calculate_ice_line(star_luminosity)
    if inside_ice_line:
        return 0.5 if element.is_volatile else 1.5
    return 1.5 if element.is_volatile else 0.5


def adjust_for_planet_size(element: Element, planet_size: float) -> float:
    return 1.0


def calculate_element_probability(
    element: Element,
    planet_size: float,
    orbit_radius: float,
    star_size: float,
    star_luminosity: float,
) -> float:
    return (
        base_probability(element)
        * adjust_for_star_size(element, star_size)
        * adjust_for_orbital_radius(element, orbit_radius, star_luminosity)
        * adjust_for_planet_size(element, planet_size)
    )


def determine_planetary_composition(
    planet_size: float,
    orbit_radius: float,
    star_size: float,
    star_luminosity: float,
    elements: Iterable[Element] = ELEMENT_DEFINITIONS,
) -> dict[str, float]:
    """Relative abundance weight per element symbol."""
    return {
        element.symbol: calculate_element_probability(
            element, planet_size, orbit_radius, star_size, star_luminosity
        )
        for element in elements
    }


__all__ = [
    "CRUSTAL_ABUNDANCE",
    "adjust_for_orbital_radius",
    "adjust_for_star_size",
    "assess_tectonic_activity",
    "base_probability",
    "calculate_element_probability",
    "calculate_ice_line",
    "determine_planetary_composition",
    "generate_geological_data",
]
