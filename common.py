from typing import Iterable, Union

Point = tuple[float, float]


class Rect:
    """Axis-aligned rectangle given by its top-left and bottom-right corners."""

    def __init__(self, top_left: Point, bottom_right: Point):
        self.top_left = top_left
        self.bottom_right = bottom_right

    @staticmethod
    def from_points(points: Iterable[Point]) -> Union["Rect", None]:
        """Return the tightest rectangle enclosing all given points.

        Args:
            points (Iterable[Point]): points to enclose

        Returns:
            Rect | None: the bounding rectangle, or None if there are no points
        """
        points = list(points)
        if not points:
            return None
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        return Rect((min(xs), min(ys)), (max(xs), max(ys)))

    @property
    def width(self) -> float:
        return self.bottom_right[0] - self.top_left[0]

    @property
    def height(self) -> float:
        return self.bottom_right[1] - self.top_left[1]

    @property
    def center(self) -> Point:
        return (self.top_left[0] + self.width / 2, self.top_left[1] + self.height / 2)

    def scale(self, sx: float, sy: float) -> "Rect":
        return Rect(
            (self.top_left[0] * sx, self.top_left[1] * sy),
            (self.bottom_right[0] * sx, self.bottom_right[1] * sy),
        )

    def translate(self, dx: float, dy: float) -> "Rect":
        return Rect(
            (self.top_left[0] + dx, self.top_left[1] + dy),
            (self.bottom_right[0] + dx, self.bottom_right[1] + dy),
        )

    def contains(self, point: Point) -> bool:
        return (
            self.top_left[0] <= point[0] <= self.bottom_right[0]
            and self.top_left[1] <= point[1] <= self.bottom_right[1]
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return self.top_left == other.top_left and self.bottom_right == other.bottom_right

    def __repr__(self) -> str:
        return f"Rect({self.top_left}, {self.bottom_right})"
