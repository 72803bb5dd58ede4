"""Interactive pygame viewer: the star or one planet as a rotating sphere with info panels."""
from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

import pygame

from ..core.config import GENERATOR_CFG, RENDER_CFG, GeneratorCfg, RenderCfg
from ..core.exceptions import ShareCodeError
from ..core.model import Universe
from ..core.universe import build_universe
from .panels import planet_lines, star_lines, system_lines
from .share import encode_share_code, universe_from_share_code
from .sphere import SphereRenderer, TextureCache
from .ui import Button, ButtonVisualStyle, build_text_panel, load_font

logger = logging.getLogger(__name__)

BUTTON_WIDTH = 130
BUTTON_HEIGHT = 40
BUTTON_GAP = 14
PANEL_MARGIN = 20
STARFIELD_COUNT = 220


def generate_starfield(count: int, size: tuple[int, int], seed: int = 0) -> list[tuple[int, int, tuple[int, int, int]]]:
    rng = random.Random(seed)
    width, height = size
    stars = []
    for _ in range(count):
        base = rng.randint(140, 230)
        color = (max(0, base - rng.randint(10, 25)), max(0, base - rng.randint(5, 15)), base)
        stars.append((rng.randrange(width), rng.randrange(height), color))
    return stars


class Viewer:
    """
    Window state for browsing generated systems.

    Index ``-1`` shows the star; ``0..n-1`` select planets.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        *,
        render_cfg: RenderCfg = RENDER_CFG,
        generator_cfg: GeneratorCfg = GENERATOR_CFG,
    ) -> None:
        self.render_cfg = render_cfg
        self.generator_cfg = generator_cfg
        self._next_seed = seed
        self.universe: Optional[Universe] = None
        self.index = -1
        self.rotation = 0.0

        pygame.init()
        pygame.display.set_caption("starforge")
        self.screen = pygame.display.set_mode((render_cfg.width, render_cfg.height))
        self.clock = pygame.time.Clock()
        self.font = load_font(render_cfg.font_names, render_cfg.font_size)
        self.small_font = load_font(render_cfg.font_names, render_cfg.font_size - 4)
        self.sphere = SphereRenderer(render_cfg.sphere_radius, render_cfg)
        self.textures = TextureCache(render_cfg)
        self.starfield = generate_starfield(STARFIELD_COUNT, (render_cfg.width, render_cfg.height))
        self.buttons = self._build_buttons()
        self._texture_seed = 0

    def _build_buttons(self) -> list[Button]:
        style = ButtonVisualStyle.from_config(self.render_cfg)
        actions = (
            ("Generate", self.generate),
            ("Previous", self.previous),
            ("Next", self.next),
            ("Export", self.export),
            ("Import", self.import_code),
        )
        y = self.render_cfg.height - BUTTON_HEIGHT - PANEL_MARGIN
        buttons = []
        for i, (label, callback) in enumerate(actions):
            x = PANEL_MARGIN + i * (BUTTON_WIDTH + BUTTON_GAP)
            buttons.append(Button((x, y, BUTTON_WIDTH, BUTTON_HEIGHT), label, callback, style=style))
        return buttons

    # =======================
    #   ACTIONS
    # =======================
    def generate(self) -> None:
        seed = self._next_seed
        if self._next_seed is not None:
            self._next_seed += 1
        self._show(build_universe(seed=seed, cfg=self.generator_cfg))

    def _show(self, universe: Universe) -> None:
        self.universe = universe
        self.index = -1
        self.rotation = 0.0
        self.textures.clear()
        self._texture_seed = random.Random(universe.system_name).randrange(2**31)

    def previous(self) -> None:
        if self.universe is None:
            return
        count = len(self.universe.system)
        self.index = self.index - 1 if self.index >= 0 else count - 1

    def next(self) -> None:
        if self.universe is None:
            return
        count = len(self.universe.system)
        self.index = self.index + 1 if self.index < count - 1 else -1

    def export(self) -> Optional[str]:
        if self.universe is None:
            return None
        code = encode_share_code(self.universe)
        logger.info("Share code for %s: %s", self.universe.system_name, code)
        try:
            pygame.scrap.put_text(code)
        except pygame.error as exc:
            logger.warning("Could not copy share code to the clipboard: %s", exc)
        return code

    def import_code(self, code: Optional[str] = None) -> bool:
        """Replace the shown system with one decoded from *code*, or from the clipboard."""
        if code is None:
            try:
                code = pygame.scrap.get_text()
            except pygame.error as exc:
                logger.warning("Could not read the clipboard: %s", exc)
                return False
        try:
            universe = universe_from_share_code(code, cfg=self.generator_cfg)
        except ShareCodeError as exc:
            logger.warning("Import failed, keeping the current system: %s", exc)
            return False
        self._show(universe)
        return True

    # =======================
    #   DRAWING
    # =======================
    def _current_texture(self):
        universe = self.universe
        if self.index < 0:
            body = universe.star.spectral_type
        else:
            body = universe.system[self.index].planet_type
        return self.textures.get(body, self._texture_seed + self.index + 1)

    def draw(self) -> None:
        cfg = self.render_cfg
        self.screen.fill(cfg.background_color)
        for x, y, color in self.starfield:
            self.screen.set_at((x, y), color)

        if self.universe is not None:
            center = (cfg.width // 3, cfg.height // 2 - BUTTON_HEIGHT)
            sphere_surface = self.sphere.render_surface(self._current_texture(), self.rotation)
            self.screen.blit(sphere_surface, sphere_surface.get_rect(center=center))

            if self.index < 0:
                sections = [star_lines(self.universe, cfg), system_lines(self.universe, cfg)]
            else:
                sections = [planet_lines(self.universe, self.index, cfg)]
            panel = build_text_panel(self.small_font, sections, background_color=cfg.panel_background_color)
            self.screen.blit(panel, (cfg.width - panel.get_width() - PANEL_MARGIN, PANEL_MARGIN))

        mouse_pos = pygame.mouse.get_pos()
        for button in self.buttons:
            button.draw(self.screen, self.font, mouse_pos)
        pygame.display.flip()

    # =======================
    #   MAIN LOOP
    # =======================
    def handle_event(self, event: pygame.event.Event) -> bool:
        """Return False when the viewer should close."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                self.generate()
            elif event.key == pygame.K_LEFT:
                self.previous()
            elif event.key == pygame.K_RIGHT:
                self.next()
            elif event.key == pygame.K_e:
                self.export()
            elif event.key == pygame.K_i:
                self.import_code()
        for button in self.buttons:
            if button.handle_event(event):
                break
        return True

    def run(self, share_code: Optional[str] = None) -> None:
        if share_code is None or not self.import_code(share_code):
            self.generate()
        running = True
        while running:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
                    break
            self.rotation = (self.rotation + self.render_cfg.rotation_speed * 0.1) % 1.0
            self.draw()
            self.clock.tick(self.render_cfg.fps)
        pygame.quit()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse procedurally generated star systems.")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the first system; later ones count up")
    parser.add_argument(
        "--import", dest="share_code", default=None, metavar="CODE", help="Start from a share code"
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING...)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    Viewer(seed=args.seed).run(args.share_code)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
