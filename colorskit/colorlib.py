#
# Copyright (C) 2026 ColorsKit Developers — LGPL-3.0-or-later
#
# pylint: disable=invalid-name
"""
Immutable color value with RGBA and HSBA views.

Wraps ColorAide's Color behind the grapefruit-compatible API used
throughout colorskit. Channels are stored as clamped sRGB floats in the
0.0 - 1.0 range; parsing and color space conversion are done by
ColorAide, with hue expressed in degrees.
"""

from typing import NamedTuple

from coloraide import Color as _BaseColor

from colorskit.util import clamp, clamp_unit, normalize_degrees


class RGBA(NamedTuple):
    """Red, green, blue and alpha channels (0-1)."""
    red: float
    green: float
    blue: float
    alpha: float = 1.0


class HSBA(NamedTuple):
    """Hue (degrees), saturation, brightness and alpha (0-1)."""
    hue: float
    saturation: float
    brightness: float
    alpha: float = 1.0


def _channel(color: _BaseColor, name: str) -> float:
    # ColorAide reports undefined channels (achromatic hue) as NaN
    value = color[name]
    return value if value == value else 0.0


class Color(object):
    """
    A color value.

    Every constructor clamps its channels, so an instance is always
    well-formed. Instances compare and hash by their channel values.
    """

    __slots__ = ('_rgba',)

    def __init__(self, red: float=0.0, green: float=0.0, blue: float=0.0, alpha: float=1.0):
        object.__setattr__(self, '_rgba', RGBA(*clamp_unit(red, green, blue, alpha)))


    def __setattr__(self, name, value):
        raise AttributeError('Color is immutable')


    # Factory methods (grapefruit style)
    @classmethod
    def NewFromBase(cls, base: _BaseColor) -> 'Color':
        """
        Create color from a ColorAide color in any registered space.

        Out of gamut channels are clamped, not gamut mapped.
        """
        srgb = base.convert('srgb')
        return cls(_channel(srgb, 'red'), _channel(srgb, 'green'),
                   _channel(srgb, 'blue'), clamp(srgb['alpha'], 0.0, 1.0))

    @classmethod
    def NewFromRgb(cls, r: float, g: float, b: float, a: float = 1.0) -> 'Color':
        """Create color from RGB floats (0-1 range)."""
        return cls(r, g, b, a)

    @classmethod
    def NewFromHsb(cls, h: float, s: float, b: float, a: float = 1.0) -> 'Color':
        """
        Create color from HSB (h: degrees, s/b/a: 0-1).

        Hue values outside 0-360 wrap around.
        """
        s, b, a = clamp_unit(s, b, a)
        return cls.NewFromBase(_BaseColor('hsv', [normalize_degrees(h), s, b], a))

    @classmethod
    def NewFromHtml(cls, html: str) -> 'Color':
        """
        Create color from a CSS color string: hex (#rgb, #rgba, #rrggbb,
        #rrggbbaa), a named color, or any CSS color function ColorAide
        understands.

        :raises ValueError: if the string is not a color
        """
        return cls.NewFromBase(_BaseColor(html.strip()))

    @staticmethod
    def IntTupleToRgb(t: tuple) -> tuple:
        """Convert int tuple (0-255) to float tuple (0-1)."""
        return tuple(x / 255.0 for x in t)


    # Properties (grapefruit style)
    @property
    def base(self) -> _BaseColor:
        """A new ColorAide sRGB color with the same channels."""
        return _BaseColor('srgb', list(self.rgb), self._rgba.alpha)

    @property
    def rgba(self) -> RGBA:
        """Get RGBA as float tuple (0-1)."""
        return self._rgba

    @property
    def rgb(self) -> tuple:
        """Get RGB as float tuple (0-1)."""
        return tuple(self._rgba[:3])

    @property
    def alpha(self) -> float:
        return self._rgba.alpha

    @property
    def hsba(self) -> HSBA:
        """Get HSBA tuple (h: 0-360, s/b/a: 0-1)."""
        hsv = self.base.convert('hsv')
        return HSBA(normalize_degrees(_channel(hsv, 'hue')),
                    *clamp_unit(_channel(hsv, 'saturation'), _channel(hsv, 'value'),
                                self._rgba.alpha))

    @property
    def hue(self) -> float:
        """Hue angle in degrees."""
        return self.hsba.hue

    @property
    def intTuple(self) -> tuple:
        """Get RGBA as int tuple (0-255)."""
        return tuple(int(round(x * 255)) for x in self._rgba)

    @property
    def html(self) -> str:
        """Get HTML hex color string, with alpha only if translucent."""
        return self.base.to_string(hex=True)


    def ColorWithAlpha(self, alpha: float) -> 'Color':
        """Return new color with modified alpha."""
        return Color(*self.rgb, alpha)


    def __iter__(self):
        """Allow unpacking as RGB tuple."""
        return iter(self.rgb)

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgba == other._rgba

    def __hash__(self):
        return hash(self._rgba)

    def __repr__(self):
        return 'Color(%r, %r, %r, %r)' % tuple(self._rgba)

    def __str__(self):
        return '(%s, %s, %s, %s)' % tuple(self._rgba)
