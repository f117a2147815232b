import re
from typing import Union


class RGBA:
    """Class to help use/work with RGBA colors easier."""

    def __init__(self, r: int, g: int, b: int, a: int = 255):
        """Initialize a RGBA object from r, g, b, a values.

        Args:
            r (int): RGB value for red, from 0 to 255
            g (int): RGB value for green, from 0 to 255
            b (int): RGB value for blue, from 0 to 255
            a (int, optional): alpha/opacity, from 0 to 255. Defaults to 255 (opaque).

        Raises:
            ValueError: if the values are not in [0, 256)
        """
        if not all(0 <= x <= 255 for x in [r, g, b, a]):
            raise ValueError(f"Invalid RGBA color {r} {g} {b} {a}")
        self.values = (int(r), int(g), int(b), int(a))

    @property
    def r(self) -> int:
        return self.values[0]

    @property
    def g(self) -> int:
        return self.values[1]

    @property
    def b(self) -> int:
        return self.values[2]

    @property
    def a(self) -> int:
        return self.values[3]

    @staticmethod
    def from_rgb(r: int, g: int, b: int) -> "RGBA":
        return RGBA(r, g, b)

    @staticmethod
    def from_u32(value: int) -> "RGBA":
        """Return an opaque RGBA object from a packed 0xRRGGBB integer."""
        return RGBA((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @staticmethod
    def from_hex(hex: str) -> Union["RGBA", None]:
        """Return a RGBA object from a hex string (e.g. "#FFFFFF" or "#FFFFFFFF").

        Returns:
            RGBA | None: a RGBA object if the hex code is valid, or None otherwise
        """
        hex = hex.strip()
        if not hex or hex[0] != "#":
            return None

        if re.match(r"#[0-9a-fA-F]{3}$", hex):
            _, r, g, b = hex[:4]
            hex = f"#{r}{r}{g}{g}{b}{b}"

        if re.match(r"#[0-9a-fA-F]{4}$", hex):
            _, r, g, b, a = hex[:5]
            hex = f"#{r}{r}{g}{g}{b}{b}{a}{a}"

        if re.match(r"#[0-9a-fA-F]{6}$", hex):
            r, g, b = (hex[1:3], hex[3:5], hex[5:7])
            return RGBA(int(r, 16), int(g, 16), int(b, 16))

        if re.match(r"#[0-9a-fA-F]{8}$", hex):
            r, g, b, a = tuple(hex[i : (i + 2)] for i in range(1, 9, 2))
            return RGBA(int(r, 16), int(g, 16), int(b, 16), int(a, 16))

        return None

    @staticmethod
    def from_rgba(rgba: str) -> Union["RGBA", None]:
        """Return a RGBA object from a rgba string (e.g. "rgb(0,255,0)" or "rgba(0,255,0,0.25)").

        Returns:
            RGBA | None: a RGBA object if the string is valid, or None otherwise
        """
        rgba = rgba.strip().lower().replace(" ", "")
        match = re.match(
            r"^rgb(?P<is_a>a)?\((?P<r>\d{1,3}),(?P<g>\d{1,3}),(?P<b>\d{1,3})(,(?P<a>\d*\.?\d+))?\)$", rgba
        )
        if not match:
            return None
        match_groups = match.groupdict()
        if (match_groups["is_a"] is not None) != (match_groups["a"] is not None):
            raise ValueError(f"Invalid rgba value: {rgba}")

        alpha = float(match_groups["a"]) if match_groups["a"] is not None else 1.0
        if not 0 <= alpha <= 1:
            raise ValueError(f"Invalid rgba alpha: {rgba}")
        return RGBA(
            int(match_groups["r"]),
            int(match_groups["g"]),
            int(match_groups["b"]),
            round(alpha * 255),
        )

    @staticmethod
    def from_any(value: str | None) -> Union["RGBA", None]:
        """Return a RGBA object from any of the aforementioned string formats,
        or None if no format matched.

        Returns:
            RGBA | None: a RGBA object if the string is valid, or None otherwise
        """
        if not value:
            return None
        color = RGBA.from_hex(value)
        color = RGBA.from_rgba(value) if color is None else color
        return color

    def as_pil(self) -> tuple[int, int, int, int]:
        """Return the color as a tuple suitable for PIL drawing functions."""
        return self.values

    def __eq__(self, other) -> bool:
        if not isinstance(other, RGBA):
            return NotImplemented
        return self.values == other.values

    def __str__(self) -> str:
        return str(self.values)

    def __repr__(self) -> str:
        return f"RGBA{self.values}"
