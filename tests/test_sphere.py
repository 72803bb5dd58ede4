import numpy as np
import pytest

from starforge.core.config import RenderCfg
from starforge.core.model import PlanetType, SpectralType
from starforge.render.sphere import SphereRenderer, TextureCache, generate_texture, palette_for

SMALL = RenderCfg(texture_width=16, texture_height=8, sphere_radius=10)


class TestTexture:
    def test_shape_and_palette(self):
        texture = generate_texture(PlanetType.OCEAN_WORLD, seed=1, cfg=SMALL)
        assert texture.shape == (16, 8, 3)
        assert texture.dtype == np.uint8
        allowed = {tuple(c) for c in palette_for(PlanetType.OCEAN_WORLD)}
        assert {tuple(px) for px in texture.reshape(-1, 3)} <= allowed

    def test_deterministic(self):
        a = generate_texture(SpectralType.G, seed=5, cfg=SMALL)
        b = generate_texture(SpectralType.G, seed=5, cfg=SMALL)
        assert np.array_equal(a, b)

    def test_cache(self):
        cache = TextureCache(SMALL)
        first = cache.get(PlanetType.GAS_GIANT, 3)
        assert cache.get(PlanetType.GAS_GIANT, 3) is first
        assert len(cache) == 1
        cache.clear()
        assert len(cache) == 0


class TestSphereRenderer:
    def test_render_shape_and_background(self):
        renderer = SphereRenderer(SMALL.sphere_radius, SMALL)
        texture = generate_texture(PlanetType.TERRESTRIAL, seed=2, cfg=SMALL)
        image = renderer.render(texture, rotation=0.25)
        assert image.shape == (20, 20, 3)
        assert tuple(image[0, 0]) == SMALL.background_color

    def test_rejects_bad_radius(self):
        with pytest.raises(ValueError):
            SphereRenderer(0, SMALL)
