from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

import pygame

from ..core.config import RENDER_CFG, RenderCfg
from .panels import Line


Color = tuple[int, int, int] | tuple[int, int, int, int]

_TEXT_SURFACE_CACHE_MAX_SIZE = 256
_TEXT_SURFACE_CACHE: OrderedDict[tuple[int, str, Color], pygame.Surface] = OrderedDict()


def get_text_surface(font: pygame.font.Font, text: str, color: Color) -> pygame.Surface:
    """Return a cached rendered surface; callers must not mutate it."""

    key = (id(font), text, color)
    cached = _TEXT_SURFACE_CACHE.get(key)
    if cached is not None:
        _TEXT_SURFACE_CACHE.move_to_end(key)
        return cached
    rendered = font.render(text, True, color)
    _TEXT_SURFACE_CACHE[key] = rendered
    if len(_TEXT_SURFACE_CACHE) > _TEXT_SURFACE_CACHE_MAX_SIZE:
        _TEXT_SURFACE_CACHE.popitem(last=False)
    return rendered


def load_font(preferred_names: Iterable[str], size: int, *, bold: bool = False) -> pygame.font.Font:
    names = list(preferred_names)
    for name in names:
        match = pygame.font.match_font(name, bold=bold)
        if match:
            return pygame.font.Font(match, size)
    return pygame.font.SysFont(names[0] if names else None, size, bold=bold)


@dataclass(frozen=True)
class ButtonVisualStyle:
    base_color: Color
    hover_color: Color
    text_color: tuple[int, int, int]
    radius: int
    border_color: Color | None = None
    border_width: int = 0

    @classmethod
    def from_config(cls, cfg: RenderCfg = RENDER_CFG) -> "ButtonVisualStyle":
        return cls(
            base_color=cfg.button_color,
            hover_color=cfg.button_hover_color,
            text_color=cfg.button_text_color,
            radius=cfg.button_radius,
            border_color=cfg.button_border_color,
            border_width=1,
        )


class Button:
    """Rounded button with hover feedback that fires a callback on left click."""

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        callback: Callable[[], None],
        *,
        style: ButtonVisualStyle,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self._callback = callback
        self._style = style

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        mouse_pos: tuple[int, int] | None = None,
    ) -> None:
        if mouse_pos is None:
            mouse_pos = pygame.mouse.get_pos()
        style = self._style
        color = style.hover_color if self.rect.collidepoint(mouse_pos) else style.base_color
        # SRCALPHA layer keeps the style alpha
        layer = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bounds = layer.get_rect()
        pygame.draw.rect(layer, color, bounds, border_radius=style.radius)
        if style.border_color is not None and style.border_width > 0:
            pygame.draw.rect(layer, style.border_color, bounds, style.border_width, border_radius=style.radius)
        surface.blit(layer, self.rect.topleft)
        text_surf = get_text_surface(font, self.text, style.text_color)
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Run the callback for a left click inside the button; report whether it fired."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self._callback()
                return True
        return False


def build_text_panel(
    font: pygame.font.Font,
    sections: Sequence[Sequence[Line]],
    *,
    background_color: Color,
    padding: tuple[int, int] = (14, 14),
    section_gap: int | None = None,
) -> pygame.Surface:
    """
    Render line groups onto one rounded, translucent panel.

    Args:
        font: Font for every line
        sections: Groups of ``(text, color)`` lines; empty groups are skipped
        background_color: RGBA panel fill
        padding: Horizontal and vertical inner padding in pixels
        section_gap: Pixels between groups, half a line by default

    Returns:
        A SRCALPHA surface sized to fit the text
    """
    groups = [list(section) for section in sections if section]
    if not groups:
        raise ValueError("at least one non-empty section is required")
    padding_x, padding_y = padding
    line_height = font.get_linesize()
    gap = line_height // 2 if section_gap is None else section_gap

    placed: list[tuple[pygame.Surface, int]] = []
    y = padding_y
    for group_index, group in enumerate(groups):
        if group_index:
            y += gap
        for text, color in group:
            placed.append((get_text_surface(font, text, color), y))
            y += line_height

    width = max(text_surf.get_width() for text_surf, _ in placed) + padding_x * 2
    panel_surface = pygame.Surface((width, y + padding_y), pygame.SRCALPHA)
    pygame.draw.rect(panel_surface, background_color, panel_surface.get_rect(), border_radius=12)
    for text_surf, line_y in placed:
        panel_surface.blit(text_surf, (padding_x, line_y))
    return panel_surface


__all__ = [
    "Button",
    "ButtonVisualStyle",
    "Color",
    "Line",
    "build_text_panel",
    "get_text_surface",
    "load_font",
]
