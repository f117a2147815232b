import logging

from PIL import Image, ImageChops, ImageDraw

from color import RGBA
from common import Point
from path import cubic_bezier

logger = logging.getLogger(__name__)


class Subpath:
    def __init__(self, start: Point, origin: Point):
        self.points: list[Point] = [start]
        self.origin = origin  # start point in user space
        self.closed = False


class Renderer:
    """Cairo-like drawing context that rasterizes paths onto a PIL image.

    Path operations take user-space coordinates, which go through the current
    translate/scale transform. Fills use the even-odd rule, so nested subpaths cut holes.
    """

    def __init__(
        self,
        size: tuple[int, int],
        background: RGBA | None = None,
        curve_resolution: int = 32,
        supersample: int = 2,
    ):
        if size[0] <= 0 or size[1] <= 0:
            raise ValueError(f"Invalid canvas size: {size[0]}x{size[1]}")
        if curve_resolution < 2:
            raise ValueError(f"Curve resolution must be at least 2, got {curve_resolution}")
        self.size = size
        self.curve_resolution = curve_resolution
        self.supersample = max(1, supersample)
        fill = background.as_pil() if background is not None else (0, 0, 0, 0)
        self.image = Image.new("RGBA", size, fill)
        self.transform = (1.0, 1.0, 0.0, 0.0)  # sx, sy, tx, ty
        self._saved: list[tuple[float, float, float, float]] = []
        self.new_path()

    def save(self) -> None:
        self._saved.append(self.transform)

    def restore(self) -> None:
        if not self._saved:
            raise ValueError("restore() without matching save()")
        self.transform = self._saved.pop()

    def translate(self, dx: float, dy: float) -> None:
        sx, sy, tx, ty = self.transform
        self.transform = (sx, sy, tx + dx * sx, ty + dy * sy)

    def scale(self, sx: float, sy: float | None = None) -> None:
        sy = sx if sy is None else sy
        old_sx, old_sy, tx, ty = self.transform
        self.transform = (old_sx * sx, old_sy * sy, tx, ty)

    def project_point(self, point: Point) -> Point:
        """Project a point from user space to canvas pixels.

        Args:
            point (Point): point to be projected

        Returns:
            Point: projected point
        """
        sx, sy, tx, ty = self.transform
        return (point[0] * sx + tx, point[1] * sy + ty)

    def new_path(self) -> None:
        self.subpaths: list[Subpath] = []
        self.current_point: Point | None = None

    def _current_subpath(self) -> Subpath:
        if not self.subpaths or self.subpaths[-1].closed:
            self.subpaths.append(Subpath(self.project_point(self.current_point), self.current_point))
        return self.subpaths[-1]

    def move_to(self, x: float, y: float) -> None:
        self.current_point = (x, y)
        self.subpaths.append(Subpath(self.project_point(self.current_point), self.current_point))

    def line_to(self, x: float, y: float) -> None:
        if self.current_point is None:
            self.move_to(x, y)
            return
        self._current_subpath().points.append(self.project_point((x, y)))
        self.current_point = (x, y)

    def curve_to(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> None:
        if self.current_point is None:
            self.move_to(x1, y1)
        points = cubic_bezier(self.current_point, (x1, y1), (x2, y2), (x3, y3), self.curve_resolution)
        self._current_subpath().points.extend(map(self.project_point, points[1:]))
        self.current_point = (x3, y3)

    def close_path(self) -> None:
        if not self.subpaths:
            return
        subpath = self.subpaths[-1]
        subpath.closed = True
        self.current_point = subpath.origin

    def rectangle(self, x: float, y: float, width: float, height: float) -> None:
        self.move_to(x, y)
        self.line_to(x + width, y)
        self.line_to(x + width, y + height)
        self.line_to(x, y + height)
        self.close_path()

    def _coverage_mask(self) -> Image.Image:
        """Build an antialiased coverage mask of the current path using the even-odd rule."""
        factor = self.supersample
        big_size = (self.size[0] * factor, self.size[1] * factor)
        mask = Image.new("1", big_size, 0)
        for subpath in self.subpaths:
            if len(subpath.points) < 3:
                continue
            layer = Image.new("1", big_size, 0)
            ImageDraw.Draw(layer).polygon([(x * factor, y * factor) for x, y in subpath.points], fill=1)
            mask = ImageChops.logical_xor(mask, layer)
        mask = mask.convert("L")
        if factor > 1:
            mask = mask.resize(self.size, Image.Resampling.LANCZOS)
        return mask

    def _composite(self, color: RGBA, mask: Image.Image) -> None:
        overlay = Image.new("RGBA", self.size, color.as_pil())
        overlay.putalpha(mask.point(lambda value: value * color.a // 255))
        self.image = Image.alpha_composite(self.image, overlay)

    def fill(self, color: RGBA) -> None:
        """Fill the current path with a color and clear it."""
        logger.debug("Filling %d subpaths with %s", len(self.subpaths), color)
        self._composite(color, self._coverage_mask())
        self.new_path()

    def stroke(self, color: RGBA, width: int = 1) -> None:
        """Draw the outline of the current path with a color and clear it."""
        mask = Image.new("L", self.size, 0)
        draw = ImageDraw.Draw(mask)
        for subpath in self.subpaths:
            points = subpath.points + [subpath.points[0]] if subpath.closed else subpath.points
            if len(points) >= 2:
                draw.line(points, fill=255, width=width)
        self._composite(color, mask)
        self.new_path()

    def paint(self, color: RGBA) -> None:
        """Fill the whole canvas with a color."""
        self._composite(color, Image.new("L", self.size, 255))

    def save_png(self, output_path: str) -> None:
        self.image.save(output_path, "PNG")
