"""Data models for generated stars, planets and systems."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class SpectralType(Enum):
    """Coarse stellar classes, coolest to hottest."""
    M = "M"  # Red dwarf
    K = "K"  # Orange dwarf
    G = "G"  # Yellow dwarf
    F = "F"  # Yellow-white
    A = "A"  # White
    B = "B"  # Blue-white
    O = "O"  # Blue, shortest lived


class PlanetType(Enum):
    """Planet categories, ordered by the orbit band they occupy."""
    LAVA_PLANET = "Lava Planet"
    TERRESTRIAL = "Terrestrial"
    OCEAN_WORLD = "Ocean World"
    GAS_GIANT = "Gas Giant"
    ICE_GIANT = "Ice Giant"
    DWARF_PLANET = "Dwarf Planet"


class AtmosphereCategory(Enum):
    TRACE = "trace"
    CARBON_DIOXIDE = "carbon_dioxide"
    HYDROGEN_HELIUM = "hydrogen_helium"
    ICE = "ice"
    NITROGEN = "nitrogen"
    CARBON = "carbon"
    AMMONIA = "ammonia"


class AtmosphereType(Enum):
    """Gas-composition presets, one per atmosphere sub-type."""
    TRACE = "trace"                                      # Mercury, Pluto
    CARBON_DIOXIDE_TYPE_I = "carbon_dioxide_type_I"      # Mars
    CARBON_DIOXIDE_TYPE_II = "carbon_dioxide_type_II"    # Venus
    HYDROGEN_HELIUM_TYPE_I = "hydrogen_helium_type_I"    # Jupiter
    HYDROGEN_HELIUM_TYPE_II = "hydrogen_helium_type_II"  # Saturn
    HYDROGEN_HELIUM_TYPE_III = "hydrogen_helium_type_III"  # Brown dwarf
    ICE_TYPE_I = "ice_type_I"                            # Uranus
    ICE_TYPE_II = "ice_type_II"                          # Neptune
    NITROGEN_TYPE_I = "nitrogen_type_I"                  # Titan
    NITROGEN_TYPE_II = "nitrogen_type_II"                # Triton
    NITROGEN_TYPE_III = "nitrogen_type_III"              # Earth
    CARBON_TYPE_I = "carbon_type_I"                      # Hot Jupiter
    AMMONIA_TYPE_I = "ammonia_type_I"

    @property
    def display_name(self) -> str:
        """Title-cased label, e.g. ``Carbon Dioxide Type I``."""
        return " ".join(word[:1].upper() + word[1:] for word in self.value.split("_"))


class TectonicActivity(Enum):
    NONE = "None"
    ACTIVE = "Active"
    VERY_ACTIVE = "Very Active"


@dataclass(frozen=True)
class HabitableZone:
    """Band of orbit radii (AU) where the temperate atmosphere branch applies."""

    inner_boundary: float
    outer_boundary: float

    def contains(self, orbit_radius: float) -> bool:
        return self.inner_boundary <= orbit_radius <= self.outer_boundary

    @property
    def midpoint(self) -> float:
        return (self.inner_boundary + self.outer_boundary) / 2

    @property
    def width(self) -> float:
        return self.outer_boundary - self.inner_boundary


@dataclass(frozen=True)
class Star:
    """
    Parent star of a generated system.

    Attributes:
        spectral_type: Stellar class driving every other range
        age: Age in billions of years
        size: Radius in solar radii
        mass: Mass in solar masses
        luminosity: Luminosity in solar luminosities
        habitable_zone: Derived from luminosity
    """
    spectral_type: SpectralType
    age: float
    size: float
    mass: float
    luminosity: float
    habitable_zone: HabitableZone


@dataclass
class Planet:
    """A generated planet. ``size`` is a relative radius whose unit depends on type."""

    planet_type: PlanetType
    orbit_radius: float
    size: float
    atmosphere: AtmosphereType
    moons: int


@dataclass
class SolarSystem:
    """Planets of one system, ascending by orbit radius."""

    planets: list[Planet]
    habitable_zone: HabitableZone

    def __len__(self) -> int:
        return len(self.planets)

    def __iter__(self) -> Iterator[Planet]:
        return iter(self.planets)

    def __getitem__(self, index: int) -> Planet:
        return self.planets[index]

    @property
    def outer_edge(self) -> float:
        """Orbit radius of the outermost planet."""
        return self.planets[-1].orbit_radius

    def habitable_planets(self) -> list[Planet]:
        return [p for p in self.planets if self.habitable_zone.contains(p.orbit_radius)]


@dataclass(frozen=True)
class CoreLayer:
    size: float
    state: str = "Molten"


@dataclass(frozen=True)
class Layer:
    size: float


@dataclass(frozen=True)
class GeologicalData:
    """Placeholder interior structure; sizes in Earth radii."""

    core: CoreLayer
    mantle: Layer
    crust: Layer
    tectonics: TectonicActivity


@dataclass
class PlanetDetails:
    """Display-oriented data derived for one planet after generation."""

    geology: GeologicalData
    composition: dict[str, float]
    surface_temperature: float
    rotation_speed: float
    orbital_speed: float
    axial_tilt: float
    tidally_locked: bool


@dataclass
class Universe:
    """Result of one generation pass."""

    system_name: str
    star: Star
    system: SolarSystem
    details: list[PlanetDetails] = field(default_factory=list)

    def in_habitable_zone(self, index: int) -> bool:
        return self.star.habitable_zone.contains(self.system[index].orbit_radius)

    def is_hospitable(self, index: int) -> bool:
        """In the zone, Earth-like air and a surface between -80 and 80 C."""
        planet = self.system[index]
        temperature = self.details[index].surface_temperature
        return (
            self.in_habitable_zone(index)
            and planet.atmosphere is AtmosphereType.NITROGEN_TYPE_III
            and -80.0 <= temperature <= 80.0
        )


__all__ = [
    "AtmosphereCategory",
    "AtmosphereType",
    "CoreLayer",
    "GeologicalData",
    "HabitableZone",
    "Layer",
    "Planet",
    "PlanetDetails",
    "PlanetType",
    "SolarSystem",
    "SpectralType",
    "Star",
    "TectonicActivity",
    "Universe",
]
