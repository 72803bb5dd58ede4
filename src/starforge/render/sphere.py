"""Rotating, lit sphere rendered from a wrapped noise texture."""
from __future__ import annotations

from typing import Optional, Union

import numpy as np
import pygame
from opensimplex import OpenSimplex

from ..core.config import RENDER_CFG, RenderCfg
from ..core.model import PlanetType, SpectralType

RGB = tuple[int, int, int]

# =======================
#   COLOR PALETTES
# =======================
# (low, mid, high) noise bands per body
PLANET_PALETTES: dict[PlanetType, tuple[RGB, RGB, RGB]] = {
    PlanetType.LAVA_PLANET: ((30, 30, 30), (255, 69, 0), (255, 215, 0)),
    PlanetType.TERRESTRIAL: ((30, 60, 150), (34, 139, 34), (255, 255, 255)),
    PlanetType.OCEAN_WORLD: ((16, 52, 130), (30, 144, 255), (176, 224, 230)),
    PlanetType.GAS_GIANT: ((139, 90, 43), (255, 160, 122), (234, 214, 183)),
    PlanetType.ICE_GIANT: ((70, 130, 180), (173, 216, 230), (224, 255, 255)),
    PlanetType.DWARF_PLANET: ((40, 40, 40), (64, 64, 64), (169, 169, 169)),
}

STAR_PALETTES: dict[SpectralType, tuple[RGB, RGB, RGB]] = {
    SpectralType.M: ((180, 40, 20), (255, 90, 50), (255, 160, 110)),
    SpectralType.K: ((210, 110, 30), (255, 165, 70), (255, 210, 150)),
    SpectralType.G: ((230, 170, 40), (255, 225, 110), (255, 250, 210)),
    SpectralType.F: ((235, 220, 170), (250, 245, 220), (255, 255, 245)),
    SpectralType.A: ((200, 215, 255), (230, 238, 255), (255, 255, 255)),
    SpectralType.B: ((140, 170, 255), (180, 205, 255), (225, 235, 255)),
    SpectralType.O: ((100, 130, 255), (150, 180, 255), (200, 220, 255)),
}

LOW_THRESHOLD = -0.2
HIGH_THRESHOLD = 0.4


def palette_for(body: Union[PlanetType, SpectralType]) -> tuple[RGB, RGB, RGB]:
    if isinstance(body, SpectralType):
        return STAR_PALETTES[body]
    return PLANET_PALETTES[body]


def generate_texture(
    body: Union[PlanetType, SpectralType],
    seed: int,
    cfg: RenderCfg = RENDER_CFG,
) -> np.ndarray:
    """
    Build an equirectangular texture of shape ``(width, height, 3)``.

    The x axis is sampled around a cylinder so the texture wraps seamlessly
    when the sphere turns.
    """
    gen = OpenSimplex(seed=seed)
    low, mid, high = palette_for(body)
    width, height = cfg.texture_width, cfg.texture_height
    texture = np.empty((width, height, 3), dtype=np.uint8)
    angles = np.arange(width) / width * 2 * np.pi
    for x in range(width):
        nx = float(np.cos(angles[x]))
        ny = float(np.sin(angles[x]))
        for y in range(height):
            value = gen.noise3(nx, ny, y / height * cfg.noise_scale)
            if value < LOW_THRESHOLD:
                texture[x, y] = low
            elif value > HIGH_THRESHOLD:
                texture[x, y] = high
            else:
                texture[x, y] = mid
    return texture


class SphereRenderer:
    """Projects a texture onto a lit sphere; geometry is computed once."""

    def __init__(self, radius: int, cfg: RenderCfg = RENDER_CFG) -> None:
        if radius <= 0:
            raise ValueError("Sphere radius must be positive")
        self.radius = radius
        self._cfg = cfg
        light = np.array(cfg.light_direction, dtype=float)
        light = light / np.linalg.norm(light)

        y, x = np.ogrid[-radius:radius, -radius:radius]
        self.mask = x**2 + y**2 < radius**2
        z = np.sqrt(np.maximum(radius**2 - x**2 - y**2, 0))
        norm_x = np.broadcast_to(x / radius, self.mask.shape)
        norm_y = np.broadcast_to(y / radius, self.mask.shape)
        norm_z = z / radius
        normals = np.dstack((norm_x, norm_y, norm_z))
        self.intensity = np.maximum(normals @ light, cfg.ambient_light)
        self._raw_u = np.arctan2(norm_z, norm_x) / (2 * np.pi)
        self._v = np.arcsin(np.clip(norm_y, -1.0, 1.0)) / np.pi + 0.5

    def render(self, texture: np.ndarray, rotation: float) -> np.ndarray:
        """Return a ``(2r, 2r, 3)`` uint8 image indexed ``[x, y]`` for surfarray."""
        tex_w, tex_h = texture.shape[:2]
        u = (self._raw_u + rotation) % 1.0
        tex_x = (u * (tex_w - 1)).astype(int)
        tex_y = (self._v * (tex_h - 1)).astype(int)
        shaded = texture[tex_x, tex_y] * self.intensity[:, :, np.newaxis]
        shaded[~self.mask] = self._cfg.background_color
        # rows are screen y; surfarray wants x first
        return np.transpose(shaded, (1, 0, 2)).astype(np.uint8)

    def render_surface(self, texture: np.ndarray, rotation: float) -> pygame.Surface:
        surface = pygame.surfarray.make_surface(self.render(texture, rotation))
        surface.set_colorkey(self._cfg.background_color)
        return surface


class TextureCache:
    """Textures by (body, seed); a new universe clears it."""

    def __init__(self, cfg: RenderCfg = RENDER_CFG) -> None:
        self._cfg = cfg
        self._textures: dict[tuple[Union[PlanetType, SpectralType], int], np.ndarray] = {}

    def get(self, body: Union[PlanetType, SpectralType], seed: int) -> np.ndarray:
        key = (body, seed)
        cached: Optional[np.ndarray] = self._textures.get(key)
        if cached is None:
            cached = generate_texture(body, seed, self._cfg)
            self._textures[key] = cached
        return cached

    def clear(self) -> None:
        self._textures.clear()

    def __len__(self) -> int:
        return len(self._textures)


__all__ = [
    "PLANET_PALETTES",
    "STAR_PALETTES",
    "SphereRenderer",
    "TextureCache",
    "generate_texture",
    "palette_for",
]
