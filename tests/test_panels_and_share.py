import base64
import json

import pytest

from starforge import build_universe
from starforge.core.config import RENDER_CFG
from starforge.core.exceptions import ShareCodeError
from starforge.render.panels import planet_lines, star_lines, system_lines
from starforge.core.model import AtmosphereType, PlanetType
from starforge.render.share import decode_share_code, encode_share_code, universe_from_share_code


@pytest.fixture
def universe():
    return build_universe(seed=21)


class TestPanels:
    def test_star_lines(self, universe):
        lines = star_lines(universe)
        texts = [text for text, _ in lines]
        assert texts[0] == f"System {universe.system_name}"
        assert f"Type: {universe.star.spectral_type.value}" in texts
        zone = universe.star.habitable_zone
        assert texts[-1] == f"Habitable Zone: {zone.inner_boundary:.2f} - {zone.outer_boundary:.2f} AU"

    def test_system_lines_highlight_zone(self, universe):
        lines = system_lines(universe)
        assert len(lines) == len(universe.system) + 1
        for index, (_, color) in enumerate(lines[1:]):
            expected = (
                RENDER_CFG.habitable_text_color
                if universe.in_habitable_zone(index)
                else RENDER_CFG.panel_text_color
            )
            assert color == expected

    def test_planet_lines(self, universe):
        texts = [text for text, _ in planet_lines(universe, 0)]
        planet = universe.system[0]
        assert texts[0].startswith(f"{universe.system_name}/1")
        assert f"Atmosphere: {planet.atmosphere.display_name}" in texts
        assert any(text.startswith("Surface Temperature:") for text in texts)

    def test_planet_lines_bad_index(self, universe):
        with pytest.raises(IndexError):
            planet_lines(universe, len(universe.system))


class TestShareCode:
    def test_round_trip_keeps_vital_fields(self, universe):
        payload = decode_share_code(encode_share_code(universe))
        assert payload["name"] == universe.system_name
        assert payload["star"]["type"] == universe.star.spectral_type.value
        assert payload["star"]["luminosity"] == universe.star.luminosity
        assert len(payload["planets"]) == len(universe.system)
        first = payload["planets"][0]
        assert first["orbit_radius"] == universe.system[0].orbit_radius
        assert first["moons"] == universe.system[0].moons
        assert first["tidally_locked"] == universe.details[0].tidally_locked

    @pytest.mark.parametrize("code", ["not base64!", "", base64.b64encode(b"\xff\xfe").decode()])
    def test_malformed(self, code):
        with pytest.raises(ShareCodeError):
            decode_share_code(code)

    def test_missing_fields(self):
        code = base64.b64encode(json.dumps({"star": {"type": "G"}, "planets": []}).encode()).decode()
        with pytest.raises(ShareCodeError) as exc_info:
            decode_share_code(code)
        assert exc_info.value.error_code == "MISSING_FIELDS"

    def test_non_object_payload(self):
        code = base64.b64encode(b"[1, 2]").decode()
        with pytest.raises(ShareCodeError):
            decode_share_code(code)


def _code_for(payload):
    return base64.b64encode(json.dumps(payload).encode()).decode()


def _planet(orbit_radius, planet_type="Terrestrial", **extra):
    data = {
        "type": planet_type,
        "orbit_radius": orbit_radius,
        "size": 1.0,
        "axial_tilt": 12.5,
        "moons": 1,
        "tidally_locked": False,
    }
    data.update(extra)
    return data


_STAR = {"type": "G", "size": 1.0, "mass": 1.0, "luminosity": 1.0}


class TestShareImport:
    def test_import_restores_star_and_planets(self, universe):
        imported = universe_from_share_code(encode_share_code(universe))
        assert imported.system_name == universe.system_name
        assert imported.star == universe.star
        assert list(imported.system) == list(universe.system)
        assert imported.system.habitable_zone == universe.star.habitable_zone
        for got, expected in zip(imported.details, universe.details):
            assert got.axial_tilt == expected.axial_tilt
            assert got.tidally_locked == expected.tidally_locked
            assert got.geology == expected.geology
            assert got.composition == expected.composition
            assert got.surface_temperature == pytest.approx(expected.surface_temperature)
            assert got.orbital_speed == pytest.approx(expected.orbital_speed)

    def test_imported_code_encodes_back_to_itself(self, universe):
        code = encode_share_code(universe)
        assert encode_share_code(universe_from_share_code(code)) == code

    def test_code_without_atmosphere_draws_one(self):
        imported = universe_from_share_code(_code_for({"star": _STAR, "planets": [_planet(1.0)]}))
        assert isinstance(imported.system[0].atmosphere, AtmosphereType)
        assert imported.star.age == 0.0
        assert imported.system_name

    def test_planets_are_sorted_by_orbit(self):
        payload = {
            "name": "Test",
            "star": _STAR,
            "planets": [
                _planet(5.2, "Gas Giant", axial_tilt=3.0, atmosphere="hydrogen_helium_type_I"),
                _planet(1.0, atmosphere="nitrogen_type_III", tidally_locked=True),
            ],
        }
        imported = universe_from_share_code(_code_for(payload))
        assert [p.orbit_radius for p in imported.system] == [1.0, 5.2]
        assert imported.system[1].planet_type is PlanetType.GAS_GIANT
        assert imported.details[0].tidally_locked is True
        assert imported.details[1].axial_tilt == 3.0

    @pytest.mark.parametrize(
        "planet",
        [
            _planet(1.0, planet_type="Rogue Planet"),
            _planet(0.0),
            _planet(1.0, atmosphere="plasma"),
            _planet(1.0, moons="many"),
        ],
    )
    def test_bad_values(self, planet):
        with pytest.raises(ShareCodeError) as exc_info:
            universe_from_share_code(_code_for({"star": _STAR, "planets": [planet]}))
        assert exc_info.value.error_code == "BAD_VALUE"

    def test_unknown_star_type(self):
        star = dict(_STAR, type="Z")
        with pytest.raises(ShareCodeError) as exc_info:
            universe_from_share_code(_code_for({"star": star, "planets": [_planet(1.0)]}))
        assert exc_info.value.error_code == "BAD_VALUE"

    def test_empty_planet_list(self):
        with pytest.raises(ShareCodeError) as exc_info:
            universe_from_share_code(_code_for({"star": _STAR, "planets": []}))
        assert exc_info.value.error_code == "MISSING_FIELDS"
