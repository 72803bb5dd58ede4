"""Atmosphere selection, gas composition presets and surface heating."""
from __future__ import annotations

import math
from typing import Optional, Union

from .exceptions import InvalidArgumentError, require_member
from .model import AtmosphereCategory, AtmosphereType, HabitableZone, PlanetType
from .random_source import RandomSource, make_rng, pick


Cat = AtmosphereCategory
Atm = AtmosphereType


# =======================
#   CATEGORIES
# =======================
ATMOSPHERE_CATEGORIES: dict[AtmosphereCategory, tuple[AtmosphereType, ...]] = {
    Cat.TRACE: (Atm.TRACE,),
    Cat.CARBON_DIOXIDE: (Atm.CARBON_DIOXIDE_TYPE_I, Atm.CARBON_DIOXIDE_TYPE_II),
    Cat.HYDROGEN_HELIUM: (
        Atm.HYDROGEN_HELIUM_TYPE_I,
        Atm.HYDROGEN_HELIUM_TYPE_II,
        Atm.HYDROGEN_HELIUM_TYPE_III,
    ),
    Cat.ICE: (Atm.ICE_TYPE_I, Atm.ICE_TYPE_II),
    Cat.NITROGEN: (Atm.NITROGEN_TYPE_I, Atm.NITROGEN_TYPE_II, Atm.NITROGEN_TYPE_III),
    Cat.CARBON: (Atm.CARBON_TYPE_I,),
    Cat.AMMONIA: (Atm.AMMONIA_TYPE_I,),
}


def _union(*categories: AtmosphereCategory) -> tuple[AtmosphereType, ...]:
    return tuple(sub for category in categories for sub in ATMOSPHERE_CATEGORIES[category])


# Candidate order matters: a seeded source picks by index.
TEMPERATE_TERRESTRIAL_CANDIDATES = _union(Cat.CARBON_DIOXIDE, Cat.NITROGEN)
PLANET_ATMOSPHERE_CANDIDATES: dict[PlanetType, tuple[AtmosphereType, ...]] = {
    PlanetType.TERRESTRIAL: _union(Cat.CARBON_DIOXIDE),
    PlanetType.OCEAN_WORLD: _union(Cat.CARBON, Cat.AMMONIA, Cat.NITROGEN),
    PlanetType.GAS_GIANT: _union(Cat.HYDROGEN_HELIUM) + (Atm.CARBON_TYPE_I,),
    PlanetType.ICE_GIANT: _union(Cat.ICE) + (Atm.AMMONIA_TYPE_I,),
    PlanetType.LAVA_PLANET: _union(Cat.CARBON_DIOXIDE),
    PlanetType.DWARF_PLANET: _union(Cat.TRACE, Cat.CARBON_DIOXIDE),
}


def atmosphere_candidates(
    planet_type: PlanetType,
    orbit_radius: float,
    habitable_zone: HabitableZone,
) -> tuple[AtmosphereType, ...]:
    """Sub-types a planet of this type and orbit may receive."""
    require_member(planet_type, PlanetType, "planet_type")
    if planet_type is PlanetType.TERRESTRIAL and habitable_zone.contains(orbit_radius):
        return TEMPERATE_TERRESTRIAL_CANDIDATES
    return PLANET_ATMOSPHERE_CANDIDATES[planet_type]


def get_planet_atmosphere(
    planet_type: PlanetType,
    orbit_radius: float,
    habitable_zone: HabitableZone,
    rng: Optional[RandomSource] = None,
) -> AtmosphereType:
    """Uniformly pick an atmosphere sub-type for the planet.

    Terrestrial planets inside the habitable zone may also draw nitrogen
    atmospheres; outside it they only get carbon dioxide ones.
    """
    candidates = atmosphere_candidates(planet_type, orbit_radius, habitable_zone)
    return pick(make_rng(rng=rng), candidates)


# =======================
#   BASE COMPOSITIONS
# =======================
# Percent by species. Static presets, sums are not normalised.
BASE_ATMOSPHERE_COMPOSITION: dict[AtmosphereType, dict[str, float]] = {
    Atm.TRACE: {"He": 42, "Na": 42, "O2": 16},
    Atm.CARBON_DIOXIDE_TYPE_I: {"CO2": 95.32, "N2": 2.7, "Ar": 1.6, "O2": 0.13, "CO": 0.08},
    Atm.CARBON_DIOXIDE_TYPE_II: {"CO2": 96.5, "N2": 3.5, "Ar": 0.005, "SO2": 0.015},
    Atm.HYDROGEN_HELIUM_TYPE_I: {"H2": 75, "He": 24, "CH4": 1},
    Atm.HYDROGEN_HELIUM_TYPE_II: {"H2": 93, "He": 6, "CH4": 0.3, "NH3": 0.3, "H2O": 0.1},
    Atm.HYDROGEN_HELIUM_TYPE_III: {"H2": 70, "CH4": 15, "H2O": 10, "NH3": 5},
    Atm.ICE_TYPE_I: {"H2": 83, "He": 15, "CH4": 2, "C2H2": 0.0004},
    Atm.ICE_TYPE_II: {"H2": 80, "He": 19, "CH4": 1.5},
    Atm.NITROGEN_TYPE_I: {"N2": 94, "CH4": 5, "H2": 1},
    Atm.NITROGEN_TYPE_II: {"N2": 99, "CH4": 0.5, "CO": 0.5},
    Atm.NITROGEN_TYPE_III: {"N2": 78, "O2": 21, "Ar": 1},
    Atm.CARBON_TYPE_I: {"H2O": 50, "CO": 20, "CH4": 10, "HCN": 10, "NH3": 10},
    Atm.AMMONIA_TYPE_I: {"NH3": 60, "H2": 20, "He": 10, "CH4": 10},
}


def _coerce(atmosphere: Union[AtmosphereType, str, None]) -> Optional[AtmosphereType]:
    if isinstance(atmosphere, AtmosphereType):
        return atmosphere
    try:
        return AtmosphereType(atmosphere)
    except ValueError:
        return None


def get_base_composition(atmosphere: Union[AtmosphereType, str, None]) -> dict[str, float]:
    """Copy of the preset for *atmosphere*, or ``{}`` when it is not a known sub-type."""
    key = _coerce(atmosphere)
    if key is None:
        return {}
    return dict(BASE_ATMOSPHERE_COMPOSITION[key])


def format_composition(atmosphere: Union[AtmosphereType, str, None]) -> str:
    """``"N2: 78%, O2: 21%, Ar: 1%"`` style summary; empty for unknown sub-types."""
    composition = get_base_composition(atmosphere)
    return ", ".join(f"{species}: {percent:g}%" for species, percent in composition.items())


# =======================
#   SURFACE TEMPERATURE
# =======================
STEFAN_BOLTZMANN_CONSTANT = 5.67e-8
SOLAR_LUMINOSITY_W = 3.828e26
AU_M = 1.496e11
SOLAR_TEMPERATURE_K = 5778.0

ALBEDO: dict[AtmosphereType, float] = {
    Atm.TRACE: 0.11,
    Atm.CARBON_DIOXIDE_TYPE_I: 0.25,
    Atm.CARBON_DIOXIDE_TYPE_II: 0.29,
    Atm.HYDROGEN_HELIUM_TYPE_I: 0.20,
    Atm.HYDROGEN_HELIUM_TYPE_II: 0.20,
    Atm.HYDROGEN_HELIUM_TYPE_III: 0.25,
    Atm.ICE_TYPE_I: 0.50,
    Atm.ICE_TYPE_II: 0.50,
    Atm.NITROGEN_TYPE_I: 0.30,
    Atm.NITROGEN_TYPE_II: 0.30,
    Atm.NITROGEN_TYPE_III: 0.20,
    Atm.CARBON_TYPE_I: 0.30,
    Atm.AMMONIA_TYPE_I: 0.30,
}
DEFAULT_ALBEDO = 0.3

GREENHOUSE_FACTOR: dict[AtmosphereType, float] = {
    Atm.TRACE: 1.0,
    Atm.CARBON_DIOXIDE_TYPE_I: 1.25,
    Atm.CARBON_DIOXIDE_TYPE_II: 1.30,
    Atm.HYDROGEN_HELIUM_TYPE_I: 1.10,
    Atm.HYDROGEN_HELIUM_TYPE_II: 1.10,
    Atm.HYDROGEN_HELIUM_TYPE_III: 1.40,
    Atm.ICE_TYPE_I: 1.20,
    Atm.ICE_TYPE_II: 1.17,
    Atm.NITROGEN_TYPE_I: 1.10,
    Atm.NITROGEN_TYPE_II: 1.10,
    Atm.NITROGEN_TYPE_III: 1.20,
    Atm.CARBON_TYPE_I: 1.50,
    Atm.AMMONIA_TYPE_I: 1.40,
}
DEFAULT_GREENHOUSE_FACTOR = 1.1


def planet_albedo(atmosphere: Union[AtmosphereType, str, None]) -> float:
    return ALBEDO.get(_coerce(atmosphere), DEFAULT_ALBEDO)


def greenhouse_factor(atmosphere: Union[AtmosphereType, str, None]) -> float:
    return GREENHOUSE_FACTOR.get(_coerce(atmosphere), DEFAULT_GREENHOUSE_FACTOR)


def size_effect(planet_radius: float) -> float:
    """Heat retention multiplier; radius exactly 1 falls through to the large bucket."""
    if planet_radius < 1:
        return 0.95
    if 1 < planet_radius < 2:
        return 1.05
    return 1.1


def calculate_surface_temperature(
    star_luminosity: float,
    star_temperature: float,
    orbit_radius_au: float,
    planet_radius: float,
    atmosphere: Union[AtmosphereType, str, None],
) -> float:
    """
    Estimate the surface temperature in degrees Celsius.

    Equilibrium temperature from the Stefan-Boltzmann law, scaled by the
    atmosphere's greenhouse factor and a crude planet-size effect.

    Raises:
        InvalidArgumentError: If the orbit radius is not positive
    """
    if orbit_radius_au <= 0:
        raise InvalidArgumentError(
            "Orbit radius must be positive",
            error_code="NON_POSITIVE_ORBIT",
            context={"orbit_radius_au": orbit_radius_au},
        )
    luminosity_w = star_luminosity * SOLAR_LUMINOSITY_W
    temperature_factor = (star_temperature / SOLAR_TEMPERATURE_K) ** 4
    distance_m = orbit_radius_au * AU_M
    effective = (
        luminosity_w * temperature_factor * (1 - planet_albedo(atmosphere))
        / (16 * math.pi * distance_m**2 * STEFAN_BOLTZMANN_CONSTANT)
    ) ** 0.25
    surface = effective * greenhouse_factor(atmosphere) * size_effect(planet_radius)
    return surface - 273.15


__all__ = [
    "ALBEDO",
    "ATMOSPHERE_CATEGORIES",
    "BASE_ATMOSPHERE_COMPOSITION",
    "GREENHOUSE_FACTOR",
    "PLANET_ATMOSPHERE_CANDIDATES",
    "TEMPERATE_TERRESTRIAL_CANDIDATES",
    "atmosphere_candidates",
    "calculate_surface_temperature",
    "format_composition",
    "get_base_composition",
    "get_planet_atmosphere",
    "greenhouse_factor",
    "planet_albedo",
    "size_effect",
]
