import random

import pytest

from starforge.core.atmosphere import TEMPERATE_TERRESTRIAL_CANDIDATES
from starforge.core.config import GeneratorCfg
from starforge.core.exceptions import ConfigurationError, InvalidArgumentError
from starforge.core.model import AtmosphereType, PlanetType
from starforge.core.orbit import (
    PLANET_MOON_RANGES,
    PLANET_SIZE_RANGES,
    adjust_for_habitable_zone_planet,
    determine_planet_type,
    generate_orbit,
    generate_solar_system,
    get_planet_moons,
    get_planet_size,
    orbit_radius,
)


def expected_radius(k: int, count: int) -> float:
    return 0.2 * (50.0 / 0.2) ** (k / count)


class TestOrbitRadius:
    def test_first_orbit_is_minimum(self):
        assert orbit_radius(0, 7) == pytest.approx(0.2)

    def test_outermost_stays_below_maximum(self):
        for count in range(3, 11):
            assert orbit_radius(count - 1, count) < 50.0

    @pytest.mark.parametrize("index, total", [(-1, 5), (5, 5), (0, 0)])
    def test_bad_index(self, index, total):
        with pytest.raises(InvalidArgumentError):
            orbit_radius(index, total)


class TestDeterminePlanetType:
    @pytest.mark.parametrize(
        "radius, expected",
        [
            (0.0, PlanetType.LAVA_PLANET),
            (0.4999, PlanetType.LAVA_PLANET),
            (0.5, PlanetType.TERRESTRIAL),
            (1.4999, PlanetType.TERRESTRIAL),
            (1.5, PlanetType.OCEAN_WORLD),
            (4.9999, PlanetType.OCEAN_WORLD),
            (5.0, PlanetType.GAS_GIANT),
            (9.9999, PlanetType.GAS_GIANT),
            (10.0, PlanetType.ICE_GIANT),
            (29.9999, PlanetType.ICE_GIANT),
            (30.0, PlanetType.DWARF_PLANET),
            (1e6, PlanetType.DWARF_PLANET),
        ],
    )
    def test_bands(self, radius, expected):
        assert determine_planet_type(radius) is expected

    @pytest.mark.parametrize("radius", [-0.1, float("nan")])
    def test_invalid_radius(self, radius):
        with pytest.raises(InvalidArgumentError):
            determine_planet_type(radius)


class TestPlanetAttributes:
    @pytest.mark.parametrize("planet_type", list(PlanetType))
    def test_size_and_moons_within_ranges(self, planet_type):
        rng = random.Random(1)
        lo, hi = PLANET_SIZE_RANGES[planet_type]
        moon_lo, moon_hi = PLANET_MOON_RANGES[planet_type]
        for _ in range(100):
            assert lo <= get_planet_size(planet_type, rng) <= hi
            assert moon_lo <= get_planet_moons(planet_type, rng) <= moon_hi

    def test_unknown_type_rejected(self):
        with pytest.raises(InvalidArgumentError):
            get_planet_size("Ocean World", random.Random(0))
        with pytest.raises(InvalidArgumentError):
            get_planet_moons(None, random.Random(0))


class TestGenerateSolarSystem:
    @pytest.mark.parametrize("seed", range(200))
    def test_system_invariants(self, seed):
        star, system = generate_orbit(seed=seed)
        radii = [p.orbit_radius for p in system]
        assert 3 <= len(system) <= 10
        assert radii == sorted(radii)
        assert any(star.habitable_zone.contains(r) for r in radii)
        assert system.habitable_zone == star.habitable_zone

    @pytest.mark.parametrize("seed", range(50))
    def test_with_standard_library_source(self, seed):
        star, system = generate_orbit(rng=random.Random(seed))
        assert 3 <= len(system) <= 10
        assert system.habitable_planets()

    def test_same_seed_is_reproducible(self):
        first = generate_orbit(seed=1234)
        second = generate_orbit(seed=1234)
        assert first == second

    def test_forced_count_gives_log_spaced_radii(self, scripted_rng, star_factory):
        # L = 0.25 puts the zone at 0.475-0.685 AU, covering the second orbit
        star = star_factory(0.25)
        rng = scripted_rng(ints=[5])
        system = generate_solar_system(star, rng)
        assert rng.int_calls[0] == (3, 10)
        assert len(system) == 5
        for k, planet in enumerate(system):
            assert planet.orbit_radius == pytest.approx(expected_radius(k, 5))
        assert [p.planet_type for p in system] == [
            PlanetType.LAVA_PLANET,
            PlanetType.TERRESTRIAL,
            PlanetType.OCEAN_WORLD,
            PlanetType.GAS_GIANT,
            PlanetType.ICE_GIANT,
        ]

    def test_in_zone_terrestrial_can_draw_nitrogen(self, scripted_rng, star_factory):
        star = star_factory(0.25)
        # count, lava atmosphere, lava moons, terrestrial atmosphere
        nitrogen_index = TEMPERATE_TERRESTRIAL_CANDIDATES.index(AtmosphereType.NITROGEN_TYPE_III)
        rng = scripted_rng(ints=[5, 0, 0, nitrogen_index])
        system = generate_solar_system(star, rng)
        assert system[1].atmosphere is AtmosphereType.NITROGEN_TYPE_III

    def test_invalid_config_rejected(self, sun_like_star):
        with pytest.raises(ConfigurationError):
            generate_solar_system(sun_like_star, random.Random(0), GeneratorCfg(min_planets=5, max_planets=2))


class TestHabitableZoneAdjustment:
    def test_moved_planet_keeps_stale_values(self, scripted_rng, sun_like_star):
        # Zone 0.95-1.37 AU holds none of the five log-spaced orbits
        rng = scripted_rng(ints=[5])
        system = generate_solar_system(sun_like_star, rng)
        moved = [p for p in system if sun_like_star.habitable_zone.contains(p.orbit_radius)]
        assert len(moved) == 1
        planet = moved[0]
        assert planet.orbit_radius == pytest.approx(sun_like_star.habitable_zone.midpoint)
        assert planet.planet_type is PlanetType.TERRESTRIAL
        # Size, atmosphere and moons were drawn for the lava orbit at 0.2 AU
        assert planet.size == pytest.approx(PLANET_SIZE_RANGES[PlanetType.LAVA_PLANET][0])
        assert planet.atmosphere is AtmosphereType.CARBON_DIOXIDE_TYPE_I
        assert planet.moons == 0
        radii = [p.orbit_radius for p in system]
        assert radii == sorted(radii)

    def test_recompute_option_redraws_values(self, scripted_rng, sun_like_star):
        cfg = GeneratorCfg(recompute_adjusted_planet=True)
        rng = scripted_rng(ints=[5])
        system = generate_solar_system(sun_like_star, rng, cfg)
        planet = next(p for p in system if sun_like_star.habitable_zone.contains(p.orbit_radius))
        assert planet.planet_type is PlanetType.TERRESTRIAL
        assert planet.size == pytest.approx(PLANET_SIZE_RANGES[PlanetType.TERRESTRIAL][0])

    def test_no_adjustment_when_zone_covered(self, star_factory):
        star = star_factory(0.25)
        planets = generate_solar_system(star, random.Random(0)).planets
        before = [(p.orbit_radius, p.planet_type) for p in planets]
        assert adjust_for_habitable_zone_planet(planets, star.habitable_zone, random.Random(0)) is None
        assert [(p.orbit_radius, p.planet_type) for p in planets] == before

    def test_empty_list(self, sun_like_star):
        assert adjust_for_habitable_zone_planet([], sun_like_star.habitable_zone, random.Random(0)) is None
