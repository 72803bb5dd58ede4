"""Text content for the star, system and planet panels."""
from __future__ import annotations

from ..core.atmosphere import format_composition
from ..core.config import RENDER_CFG, RenderCfg
from ..core.model import Universe
from ..core.motion import local_days_per_orbit, orbital_period_days, rotation_period_hours
from ..core.universe import planet_designation, planet_name
from ..data.elements import element_name

Line = tuple[str, tuple[int, int, int]]  # (text, RGB)

TOP_ELEMENTS = 6


def star_lines(universe: Universe, cfg: RenderCfg = RENDER_CFG) -> list[Line]:
    star = universe.star
    zone = star.habitable_zone
    text = cfg.panel_text_color
    return [
        (f"System {universe.system_name}", cfg.panel_heading_color),
        (f"Type: {star.spectral_type.value}", text),
        (f"Age: {star.age:.2f} billion years", text),
        (f"Size: {star.size:.2f} Solar radii", text),
        (f"Mass: {star.mass:.2f} Solar masses", text),
        (f"Luminosity: {star.luminosity:.2f} Solar luminosity", text),
        (f"Habitable Zone: {zone.inner_boundary:.2f} - {zone.outer_boundary:.2f} AU", text),
    ]


def system_lines(universe: Universe, cfg: RenderCfg = RENDER_CFG) -> list[Line]:
    lines: list[Line] = [("Planets", cfg.panel_heading_color)]
    for index, planet in enumerate(universe.system):
        color = cfg.habitable_text_color if universe.in_habitable_zone(index) else cfg.panel_text_color
        lines.append(
            (
                f"{index + 1}. {planet.planet_type.value:<12} {planet.orbit_radius:6.2f} AU"
                f"  moons {planet.moons}",
                color,
            )
        )
    return lines


def planet_lines(universe: Universe, index: int, cfg: RenderCfg = RENDER_CFG) -> list[Line]:
    """Detail panel for one planet; raises IndexError for a bad index."""
    planet = universe.system[index]
    details = universe.details[index]
    text = cfg.panel_text_color
    day_hours = rotation_period_hours(details.rotation_speed)
    year_days = orbital_period_days(details.orbital_speed, planet.orbit_radius)
    local_days = local_days_per_orbit(details.rotation_speed, details.orbital_speed, planet.orbit_radius)
    geology = details.geology

    lines: list[Line] = [
        (f"{planet_name(universe, index)}  [{planet_designation(universe, index)}]", cfg.panel_heading_color),
        (f"Type: {planet.planet_type.value}", text),
        (f"Orbit Radius: {planet.orbit_radius:.2f} AU", text),
        (f"Size: {planet.size:.2f}", text),
        (f"Moons: {planet.moons}", text),
        (f"Axial Tilt: {details.axial_tilt:.2f} deg", text),
        (f"Atmosphere: {planet.atmosphere.display_name}", text),
        (f"  {format_composition(planet.atmosphere)}", text),
        (f"Surface Temperature: {details.surface_temperature:.2f} C", text),
        (f"Day: {day_hours:.2f} hours", text),
        (f"Year: {local_days:.2f} days ({year_days:.2f} Earth days)", text),
        (f"Tidally Locked: {'Yes' if details.tidally_locked else 'No'}", text),
        (f"In Habitable Zone: {'Yes' if universe.in_habitable_zone(index) else 'No'}", text),
        (f"Hospitable: {'Yes' if universe.is_hospitable(index) else 'No'}", text),
        (
            f"Core {geology.core.size:.2f} ({geology.core.state}), mantle {geology.mantle.size:.2f},"
            f" crust {geology.crust.size:.3f}",
            text,
        ),
        (f"Tectonics: {geology.tectonics.value}", text),
    ]
    ranked = sorted(details.composition.items(), key=lambda item: item[1], reverse=True)
    for symbol, weight in ranked[:TOP_ELEMENTS]:
        lines.append((f"  {element_name(symbol)}: {weight:.2e}", text))
    return lines


__all__ = ["Line", "planet_lines", "star_lines", "system_lines"]
