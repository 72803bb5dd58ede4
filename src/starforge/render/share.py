"""Compact, copyable codes describing a generated system."""
from __future__ import annotations

import base64
import binascii
import json
import logging
from dataclasses import replace
from typing import Any, Optional

from ..core.atmosphere import get_planet_atmosphere
from ..core.config import GENERATOR_CFG, GeneratorCfg
from ..core.exceptions import ShareCodeError
from ..core.habitable import calculate_habitable_zone
from ..core.model import AtmosphereType, Planet, PlanetType, SolarSystem, SpectralType, Star, Universe
from ..core.names import generate_system_name
from ..core.random_source import RandomSource, make_rng
from ..core.universe import derive_planet_details

logger = logging.getLogger(__name__)

SHARE_CODE_VERSION = 1

_STAR_KEYS = ("type", "size", "mass", "luminosity")
_PLANET_KEYS = ("type", "orbit_radius", "size", "axial_tilt", "moons", "tidally_locked")


def share_payload(universe: Universe) -> dict[str, Any]:
    star = universe.star
    return {
        "version": SHARE_CODE_VERSION,
        "name": universe.system_name,
        "star": {
            "type": star.spectral_type.value,
            "age": star.age,
            "size": star.size,
            "mass": star.mass,
            "luminosity": star.luminosity,
        },
        "planets": [
            {
                "type": planet.planet_type.value,
                "orbit_radius": planet.orbit_radius,
                "size": planet.size,
                "atmosphere": planet.atmosphere.value,
                "axial_tilt": details.axial_tilt,
                "moons": planet.moons,
                "tidally_locked": details.tidally_locked,
            }
            for planet, details in zip(universe.system, universe.details)
        ],
    }


def encode_share_code(universe: Universe) -> str:
    raw = json.dumps(share_payload(universe), separators=(",", ":"))
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode_share_code(code: str) -> dict[str, Any]:
    """
    Decode a share code back into its payload dict.

    Raises:
        ShareCodeError: If the code is not base64 JSON or lacks required fields
    """
    try:
        raw = base64.b64decode(code.strip(), validate=True)
        payload = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError, AttributeError) as exc:
        raise ShareCodeError(
            "Share code is not valid base64 JSON",
            error_code="MALFORMED_SHARE_CODE",
            context={"reason": str(exc)},
        ) from exc

    if not isinstance(payload, dict):
        raise ShareCodeError("Share code payload must be an object", error_code="MALFORMED_SHARE_CODE")
    star = payload.get("star")
    planets = payload.get("planets")
    if not isinstance(star, dict) or any(key not in star for key in _STAR_KEYS):
        raise ShareCodeError("Share code is missing star fields", error_code="MISSING_FIELDS")
    if not isinstance(planets, list) or not all(
        isinstance(p, dict) and all(key in p for key in _PLANET_KEYS) for p in planets
    ):
        raise ShareCodeError("Share code is missing planet fields", error_code="MISSING_FIELDS")
    if not planets:
        raise ShareCodeError("Share code has no planets", error_code="MISSING_FIELDS")
    return payload


def _star_from_payload(data: dict[str, Any]) -> Star:
    luminosity = float(data["luminosity"])
    return Star(
        spectral_type=SpectralType(data["type"]),
        age=float(data.get("age", 0.0)),
        size=float(data["size"]),
        mass=float(data["mass"]),
        luminosity=luminosity,
        habitable_zone=calculate_habitable_zone(luminosity),
    )


def universe_from_share_code(
    code: str,
    rng: Optional[RandomSource] = None,
    cfg: GeneratorCfg = GENERATOR_CFG,
) -> Universe:
    """
    Rebuild a Universe from a share code.

    Star and planet fields come from the code; the habitable zone and
    planet details are recomputed. Axial tilt and tidal lock keep their
    shared values. Codes without an atmosphere draw one for each planet, and
    codes without a name get a new system name.

    Raises:
        ShareCodeError: If the code is malformed or holds unknown values
    """
    payload = decode_share_code(code)
    rng = make_rng(rng=rng)
    try:
        star = _star_from_payload(payload["star"])
        planets: list[Planet] = []
        shared: list[tuple[float, bool]] = []
        for data in payload["planets"]:
            planet_type = PlanetType(data["type"])
            radius = float(data["orbit_radius"])
            if not radius > 0:
                raise ValueError(f"orbit radius must be positive, got {radius}")
            if "atmosphere" in data:
                atmosphere = AtmosphereType(data["atmosphere"])
            else:
                atmosphere = get_planet_atmosphere(planet_type, radius, star.habitable_zone, rng)
            planets.append(
                Planet(
                    planet_type=planet_type,
                    orbit_radius=radius,
                    size=float(data["size"]),
                    atmosphere=atmosphere,
                    moons=int(data["moons"]),
                )
            )
            shared.append((float(data["axial_tilt"]), bool(data["tidally_locked"])))
    except (ValueError, TypeError) as exc:
        raise ShareCodeError(
            "Share code holds an invalid value",
            error_code="BAD_VALUE",
            context={"reason": str(exc)},
        ) from exc

    order = sorted(range(len(planets)), key=lambda i: planets[i].orbit_radius)
    planets = [planets[i] for i in order]
    shared = [shared[i] for i in order]
    system = SolarSystem(planets=planets, habitable_zone=star.habitable_zone)
    details = [
        replace(
            derive_planet_details(planet, star, system.outer_edge, rng, cfg),
            axial_tilt=tilt,
            tidally_locked=locked,
        )
        for planet, (tilt, locked) in zip(planets, shared)
    ]
    name = payload.get("name")
    if not isinstance(name, str) or not name:
        name = generate_system_name(rng)
    logger.info("Imported system %s with %d planets", name, len(planets))
    return Universe(system_name=name, star=star, system=system, details=details)


__all__ = [
    "decode_share_code",
    "encode_share_code",
    "share_payload",
    "universe_from_share_code",
]
