import logging
from dataclasses import dataclass, field

from color import RGBA
from common import Point, Rect
from logos import logo_a, logo_b
from path import CommandSequence
from renderer import Renderer

logger = logging.getLogger(__name__)


@dataclass
class WallpaperConfig:
    size: tuple[int, int] = (3456, 2234)
    background: RGBA = field(default_factory=lambda: RGBA.from_rgb(35, 108, 255))
    foreground: RGBA = field(default_factory=lambda: RGBA.from_u32(0xFFFFFF))
    logo_a_scale: float = 1.2
    logo_b_scale: float = 0.8
    gap_ratio: float = 0.25  # gap between the logos, relative to the scaled width of logo B
    debug: bool = False


@dataclass
class Layout:
    group: Rect
    logo_a_anchor: Point
    logo_b_anchor: Point


def compute_layout(config: WallpaperConfig, logo_a_bounds: Rect, logo_b_bounds: Rect) -> Layout:
    """Place logo B on the left and logo A on the right, the pair centred on the canvas.

    Args:
        config (WallpaperConfig): canvas size, scales and gap
        logo_a_bounds (Rect): unscaled bounds of logo A
        logo_b_bounds (Rect): unscaled bounds of logo B

    Returns:
        Layout: the bounding rectangle of the pair and the canvas point each logo is centred on
    """
    cx, cy = config.size[0] / 2, config.size[1] / 2
    a_rect = logo_a_bounds.scale(config.logo_a_scale, config.logo_a_scale)
    b_rect = logo_b_bounds.scale(config.logo_b_scale, config.logo_b_scale)
    gap = b_rect.width * config.gap_ratio

    total_height = max(a_rect.height, b_rect.height)
    total_width = a_rect.width + b_rect.width + gap
    left = cx - total_width / 2

    group = Rect((left, cy - total_height / 2), (left + total_width, cy + total_height / 2))
    return Layout(
        group=group,
        logo_a_anchor=(left + b_rect.width + gap + a_rect.width / 2, cy),
        logo_b_anchor=(left + b_rect.width / 2, cy),
    )


def draw_logo(renderer: Renderer, logo: CommandSequence, anchor: Point, scale: float, color: RGBA) -> None:
    renderer.save()
    renderer.translate(*anchor)
    renderer.scale(scale)
    logo.emit(renderer)
    renderer.fill(color)
    renderer.restore()


def draw_debug_outline(renderer: Renderer, layout: Layout, color: RGBA) -> None:
    renderer.rectangle(*layout.group.top_left, layout.group.width, layout.group.height)
    renderer.stroke(color)


def draw_debug_crosshair(renderer: Renderer, color: RGBA) -> None:
    """Draw horizontal and vertical lines through the canvas centre."""
    width, height = renderer.size
    renderer.move_to(0, height / 2)
    renderer.line_to(width, height / 2)
    renderer.move_to(width / 2, 0)
    renderer.line_to(width / 2, height)
    renderer.stroke(color)


def render_wallpaper(config: WallpaperConfig) -> Renderer:
    """Render the wallpaper described by `config` and return the renderer holding the image."""
    renderer = Renderer(config.size)
    renderer.paint(config.background)

    a = logo_a().normalize()
    b = logo_b().normalize()
    layout = compute_layout(config, a.bounds(), b.bounds())
    logger.debug("Logo group occupies %s", layout.group)
    if config.debug:
        draw_debug_outline(renderer, layout, config.foreground)

    draw_logo(renderer, b, layout.logo_b_anchor, config.logo_b_scale, config.foreground)
    draw_logo(renderer, a, layout.logo_a_anchor, config.logo_a_scale, config.foreground)
    if config.debug:
        draw_debug_crosshair(renderer, config.foreground)
    return renderer
