"""Configuration dataclasses for star system generation and display."""
from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class GeneratorCfg:
    min_orbit_au: float = 0.2
    max_orbit_au: float = 50.0
    min_planets: int = 3
    max_planets: int = 10
    habitable_inner_coeff: float = 0.95
    habitable_outer_coeff: float = 1.37
    # When False the planet moved into the habitable zone keeps the size,
    # atmosphere and moons drawn for its original orbit.
    recompute_adjusted_planet: bool = False
    tidal_lock_probability: float = 0.1
    max_axial_tilt_deg: float = 45.0

    def validate(self) -> None:
        if not 0.0 < self.min_orbit_au < self.max_orbit_au:
            raise ConfigurationError(
                "Orbit bounds must satisfy 0 < min_orbit_au < max_orbit_au",
                error_code="BAD_ORBIT_BOUNDS",
                context={"min_orbit_au": self.min_orbit_au, "max_orbit_au": self.max_orbit_au},
            )
        if not 1 <= self.min_planets <= self.max_planets:
            raise ConfigurationError(
                "Planet count range must satisfy 1 <= min_planets <= max_planets",
                error_code="BAD_PLANET_RANGE",
                context={"min_planets": self.min_planets, "max_planets": self.max_planets},
            )
        if not 0.0 < self.habitable_inner_coeff < self.habitable_outer_coeff:
            raise ConfigurationError(
                "Habitable zone coefficients must satisfy 0 < inner < outer",
                error_code="BAD_HABITABLE_COEFFS",
                context={
                    "habitable_inner_coeff": self.habitable_inner_coeff,
                    "habitable_outer_coeff": self.habitable_outer_coeff,
                },
            )
        if not 0.0 <= self.tidal_lock_probability <= 1.0:
            raise ConfigurationError(
                "Tidal lock probability must lie in [0, 1]",
                error_code="BAD_PROBABILITY",
                context={"tidal_lock_probability": self.tidal_lock_probability},
            )


@dataclass(frozen=True)
class RenderCfg:
    width: int = 1200
    height: int = 800
    fps: int = 60
    background_color: tuple[int, int, int] = (10, 10, 15)
    panel_background_color: tuple[int, int, int, int] = (12, 18, 30, int(255 * 0.55))
    panel_text_color: tuple[int, int, int] = (234, 241, 255)
    panel_heading_color: tuple[int, int, int] = (255, 214, 130)
    habitable_text_color: tuple[int, int, int] = (46, 209, 195)
    button_color: tuple[int, int, int, int] = (8, 32, 64, int(255 * 0.78))
    button_hover_color: tuple[int, int, int, int] = (18, 52, 94, int(255 * 0.88))
    button_text_color: tuple[int, int, int] = (234, 241, 255)
    button_border_color: tuple[int, int, int, int] = (88, 140, 255, int(255 * 0.55))
    button_radius: int = 18
    sphere_radius: int = 200
    texture_width: int = 256
    texture_height: int = 128
    noise_scale: float = 2.0
    rotation_speed: float = 0.02
    light_direction: tuple[float, float, float] = (0.5, 0.5, 1.0)
    ambient_light: float = 0.1
    font_names: tuple[str, ...] = ("dejavusans", "arial", "helvetica")
    font_size: int = 18


GENERATOR_CFG = GeneratorCfg()
RENDER_CFG = RenderCfg()


__all__ = ["GENERATOR_CFG", "RENDER_CFG", "GeneratorCfg", "RenderCfg"]
