# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0
"""Colors that can be used to fill diagram primitives."""

from __future__ import annotations

__all__ = ["COLORS", "ColorSpec", "RGB"]

import typing as t


class RGB(t.NamedTuple):
    """A color.

    Each color component (red, green, blue) is an integer in the range
    of 0..255 (inclusive). The alpha channel is a float between 0.0 and
    1.0 (inclusive). If it is 1, then the ``str()`` form does not
    include transparency information.
    """

    r: int = 0
    g: int = 0
    b: int = 0
    a: float = 1.0

    def __str__(self) -> str:
        return "#" + self.tohex()

    def tohex(self) -> str:
        if not all(0 <= n <= 255 for n in self[:3]):
            raise ValueError(f"Color components out of range: {self!r}")
        if not 0.0 <= self.a <= 1.0:
            raise ValueError(f"Alpha out of range: {self.a!r}")
        if self.a >= 1.0:
            return f"{self.r:02X}{self.g:02X}{self.b:02X}"
        return (
            f"{self.r:02X}{self.g:02X}{self.b:02X}{round(self.a * 255):02X}"
        )

    @property
    def opaque(self) -> RGB:
        """This color without transparency."""
        return self._replace(a=1.0)

    @classmethod
    def coerce(cls, value: ColorSpec) -> RGB:
        """Convert a color name, CSS color or plain tuple into an RGB.

        Raises
        ------
        ValueError
            If ``value`` is not a valid color specification.
        """
        if isinstance(value, RGB):
            color = value
        elif isinstance(value, str):
            if value.strip().lower() in COLORS:
                return cls.fromname(value)
            color = cls.fromcss(value)
        elif isinstance(value, tuple) and len(value) in (3, 4):
            color = cls(*value)
        else:
            raise ValueError(f"Not a color: {value!r}")

        if not all(
            isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
            for c in color[:3]
        ):
            raise ValueError(
                f"Color components must be integers in 0..255: {value!r}"
            )
        if not (
            isinstance(color.a, (int, float)) and 0.0 <= color.a <= 1.0
        ):
            raise ValueError(f"Alpha must be in 0.0..1.0: {value!r}")
        return color

    @classmethod
    def fromname(cls, name: str) -> RGB:
        """Look up a named color, like ``"red"``."""
        try:
            return COLORS[name.strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown color name: {name!r}") from None

    @classmethod
    def fromcss(cls, cssstring: str | RGB) -> RGB:
        """Create an RGB from a CSS color definition.

        Examples of recognized color definitions and their equivalent
        constructor calls::

            "rgb(10, 20, 30)" -> RGB(10, 20, 30)
            "rgba(50, 60, 70, 0.5)" -> RGB(50, 60, 70, 0.5)
            "#FF00FF" -> RGB(255, 0, 255)
            "#ff00ff" -> RGB(255, 0, 255)
            "#f0f" -> RGB(255, 0, 255)
            "#FF00FF80" -> RGB(255, 0, 255, 128/255)
            "#f0fa" -> RGB(255, 0, 255, 2/3)
        """
        if isinstance(cssstring, RGB):
            return cssstring

        cssstring = cssstring.strip().lower()
        if cssstring.startswith(("rgb(", "rgba(")) and cssstring.endswith(")"):
            return cls.fromcsv(cssstring[cssstring.find("(") + 1 : -1])
        if cssstring.startswith("#"):
            return cls.fromhex(cssstring[1:])
        raise ValueError(f"Bad CSS color: {cssstring!r}")

    @classmethod
    def fromcsv(cls, csvstring: str) -> RGB:
        """Create an RGB from a ``"r, g, b[, a]"`` string."""
        split = csvstring.split(",")
        if len(split) == 4:
            alpha = float(split.pop())
        else:
            alpha = 1.0
        if len(split) == 3:
            r, g, b = (int(c) for c in split)
            return cls(r, g, b, alpha)
        raise ValueError(f"Expected 3 or 4 values: {csvstring}")

    @classmethod
    def fromhex(cls, hexstring: str) -> RGB:
        """Create an RGB from a hexadecimal string.

        The string can have 3, 4, 6 or 8 hexadecimal characters. In the
        cases of 3 and 6 characters, the alpha channel is set to 1.0
        (fully opaque) and the remaining characters are interpreted as
        the red, green and blue components.
        """
        if hexstring.startswith("#"):
            hs = hexstring[1:]
        else:
            hs = hexstring
        alpha = 1.0
        slen = len(hs)

        if slen == 4:
            hs, alpha = hs[:3], int(hs[3:], base=16) / 15
            slen = 3
        if slen == 3:
            r, g, b = (int(x * 2, base=16) for x in hs)
            return cls(r, g, b, alpha)

        if slen == 8:
            hs, alpha = hs[:6], int(hs[6:], base=16) / 255
            slen = 6
        if slen == 6:
            r, g, b = (int(hs[i : i + 2], base=16) for i in range(0, 6, 2))
            return cls(r, g, b, alpha)

        raise ValueError(
            "Invalid length of hex string, expected 3, 4, 6 or 8 characters"
        )


ColorSpec = t.Union[
    RGB,
    str,
    t.Tuple[int, int, int],
    t.Tuple[int, int, int, float],
]

COLORS: dict[str, RGB] = {
    "black": RGB(0, 0, 0),
    "blue": RGB(0, 0, 255),
    "clear": RGB(0, 0, 0, 0.0),
    "cyan": RGB(0, 255, 255),
    "gray": RGB(128, 128, 128),
    "green": RGB(0, 255, 0),
    "magenta": RGB(255, 0, 255),
    "orange": RGB(255, 128, 0),
    "purple": RGB(128, 0, 128),
    "red": RGB(255, 0, 0),
    "white": RGB(255, 255, 255),
    "yellow": RGB(255, 255, 0),
}
