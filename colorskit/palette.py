#
# Copyright (C) 2026 ColorsKit Developers — LGPL-3.0-or-later
#
"""
Harmony-based palette generation.

A palette walks away from a base color in growing hue steps,
alternating between the two directions. Each of the eight steps
produces two colors, so a palette yields sixteen colors in total.

The step size follows the recurrence::

    shift(0) = 0
    shift(1) = initial_hue_change
    shift(n) = shift(n - 1) * (1 + 1 / n)

Nearly gray base colors (saturation below 0.1) have no useful hue,
so their palettes vary brightness instead, by shift(n) / 60.
"""

from collections import OrderedDict
from enum import Enum
from typing import List, NamedTuple

import numpy as np

from colorskit.color import ColorType, ColorUtils, to_color
from colorskit.colorlib import Color
from colorskit.log import Log
from colorskit.util import clamp


PALETTE_STEPS = 8
MONOCHROME_SATURATION = 0.1
BRIGHTNESS_PER_DEGREE = 1.0 / 60.0

_logger = Log.get('palette')


class HueDirection(Enum):
    """
    Sign applied to every hue shift
    """
    FURTHER = 1.0
    CLOSER = -1.0


class PaletteConfig(NamedTuple):
    """
    Parameters of a palette sequence

    allow_brightness_change is accepted and stored but does not
    affect generation; monochrome palettes always vary brightness.
    """
    initial_hue_change: float = 15.0
    direction: HueDirection = HueDirection.FURTHER
    allow_brightness_change: bool = True


def hue_shift(index: int, initial_hue_change: float) -> float:
    """
    Magnitude of the hue shift for a step index

    :param index: step index, 0 or greater
    :param initial_hue_change: shift of the first step, in degrees
    :return: the shift in degrees
    """
    if index < 0:
        raise ValueError('Step index must not be negative (%d)' % index)
    if index == 0:
        return 0.0

    shift = float(initial_hue_change)
    for n in range(2, index + 1):
        shift *= 1 + 1.0 / n
    return shift


def hue_change_for(index: int, initial_hue_change: float,
                   direction: HueDirection=HueDirection.FURTHER,
                   reversed_: bool=False) -> float:
    """
    Signed hue change in degrees for a step

    The direction is a HueDirection or its numeric sign (1.0 or -1.0).
    """
    sign = float(getattr(direction, 'value', direction))
    if reversed_:
        sign = -sign
    return hue_shift(index, initial_hue_change) * sign


def brightness_change_for(index: int, initial_hue_change: float,
                          direction: HueDirection=HueDirection.FURTHER,
                          reversed_: bool=False) -> float:
    """
    Signed brightness change for a step of a monochrome palette
    """
    return hue_change_for(index, initial_hue_change, direction, reversed_) * BRIGHTNESS_PER_DEGREE


class PaletteKind(Enum):
    """
    The supported palette harmonies

    Tuples, in the form of:
        (palette_name, description, initial_hue_change, direction)
    """
    ANALOGOUS = ('Analogous', 'Analogous', 15.0, HueDirection.FURTHER)
    SPLIT_COMPLEMENTARY = ('SplitComplementary', 'Split Complementary', 30.0, HueDirection.FURTHER)
    TETRADIC = ('Tetradic', 'Tetradic', 90.0, HueDirection.CLOSER)

    def __init__(self, palette_name, description, initial_hue_change, direction):
        self._palette_name = palette_name
        self._description = description
        self._initial_hue_change = initial_hue_change
        self._direction = direction

    @property
    def palette_name(self) -> str:
        return self._palette_name

    @property
    def description(self) -> str:
        return self._description

    def config(self, allow_brightness_change: bool=True,
               direction: HueDirection=None) -> PaletteConfig:
        """
        Build the configuration of this kind

        :param allow_brightness_change: stored on the config, inert
        :param direction: overrides the default direction of this kind
        :return: the configuration
        """
        if direction is None:
            direction = self._direction
        return PaletteConfig(self._initial_hue_change, direction, allow_brightness_change)

    def create(self, color: ColorType, allow_brightness_change: bool=True,
               direction: HueDirection=None):
        """
        Create a palette iterator of this kind for the base color
        """
        return _PALETTE_TYPES[self](color, allow_brightness_change=allow_brightness_change,
                                    direction=direction)

    @classmethod
    def get(cls, name: str):
        """
        Get a PaletteKind by enum name or palette name, case-insensitive

        :return: the kind, or None if unknown
        """
        if name is None:
            return None
        key = name.strip().upper().replace(' ', '_').replace('-', '_')
        if key in cls.__members__:
            return cls[key]
        for kind in cls:
            if kind.palette_name.upper() == key.replace('_', ''):
                return kind
        return None


class AnalogousPalette(object):
    """
    Iterator over an analogous palette of a base color

    Colors alternate between the configured direction and the
    opposite one, with the shift growing every second color.
    The iterator is forward-only; build a new one to start over.
    """
    kind = PaletteKind.ANALOGOUS
    palette_name = kind.palette_name

    def __init__(self, color: ColorType, allow_brightness_change: bool=True,
                 direction: HueDirection=None, initial_hue_change: float=None):
        config = PaletteKind.ANALOGOUS.config(allow_brightness_change, direction)
        if initial_hue_change is not None:
            config = config._replace(initial_hue_change=float(initial_hue_change))

        self._color = to_color(color)
        if self._color is None:
            raise ValueError('A base color is required')

        self._config = config
        self._monochrome = self._color.hsba.saturation < MONOCHROME_SATURATION
        self._index = 1
        self._reversed = False

        if self._monochrome:
            _logger.debug('Monochrome base %r, varying brightness', self._color)


    @classmethod
    def from_config(cls, color: ColorType, config: PaletteConfig) -> 'AnalogousPalette':
        """
        Create a palette from an explicit configuration
        """
        return cls(color, allow_brightness_change=config.allow_brightness_change,
                   direction=config.direction, initial_hue_change=config.initial_hue_change)


    @property
    def color(self) -> Color:
        """
        The base color
        """
        return self._color


    @property
    def config(self) -> PaletteConfig:
        return self._config


    @property
    def is_monochrome(self) -> bool:
        """
        True if the base color is too gray for hue shifts
        """
        return self._monochrome


    def _color_for_index(self, index: int) -> Color:
        initial, direction = self._config.initial_hue_change, self._config.direction

        if self._monochrome:
            delta = brightness_change_for(index, initial, direction, self._reversed)
            return ColorUtils.transform_hsba(self._color, lambda hsba: hsba._replace( \
                    brightness=clamp(hsba.brightness + delta, 0.0, 1.0)))

        delta = hue_change_for(index, initial, direction, self._reversed)
        return ColorUtils.transform_hsba(self._color, lambda hsba: hsba._replace( \
                hue=hsba.hue + delta))


    def __iter__(self):
        return self


    def __next__(self) -> Color:
        if self._index > PALETTE_STEPS:
            raise StopIteration

        color = self._color_for_index(self._index)

        self._reversed = not self._reversed
        if not self._reversed:
            self._index += 1
            if self._index > PALETTE_STEPS:
                _logger.debug('%s palette of %r exhausted', self.palette_name, self._color)

        return color


class SplitComplementaryPalette(object):
    """
    Iterator over a split complementary palette of a base color:
    an analogous sequence starting 30 degrees away.
    """
    kind = PaletteKind.SPLIT_COMPLEMENTARY
    palette_name = kind.palette_name

    def __init__(self, color: ColorType, allow_brightness_change: bool=True,
                 direction: HueDirection=None):
        self._iterator = AnalogousPalette.from_config(
            color, self.kind.config(allow_brightness_change, direction))

    def __iter__(self):
        return self

    def __next__(self) -> Color:
        return next(self._iterator)


class TetradicPalette(object):
    """
    Iterator over a tetradic palette of a base color: an analogous
    sequence starting 90 degrees away and moving back toward it.
    """
    kind = PaletteKind.TETRADIC
    palette_name = kind.palette_name

    def __init__(self, color: ColorType, allow_brightness_change: bool=True,
                 direction: HueDirection=None):
        self._iterator = AnalogousPalette.from_config(
            color, self.kind.config(allow_brightness_change, direction))

    def __iter__(self):
        return self

    def __next__(self) -> Color:
        return next(self._iterator)


_PALETTE_TYPES = {
    PaletteKind.ANALOGOUS: AnalogousPalette,
    PaletteKind.SPLIT_COMPLEMENTARY: SplitComplementaryPalette,
    PaletteKind.TETRADIC: TetradicPalette,
}


def palette_colors(kind: PaletteKind, color: ColorType, include_base: bool=True) -> List[Color]:
    """
    Generate the full palette of a kind as a list

    :param kind: the palette kind
    :param color: the base color
    :param include_base: prepend the base color
    :return: list of colors
    """
    base = to_color(color)
    colors = list(kind.create(base))
    if include_base:
        colors.insert(0, base)
    return colors


def all_palettes(color: ColorType, include_base: bool=True) -> OrderedDict:
    """
    Generate every palette kind for a base color

    :return: OrderedDict of description to list of colors
    """
    base = to_color(color)
    return OrderedDict((kind.description, palette_colors(kind, base, include_base)) \
            for kind in PaletteKind)


def palette_array(kind: PaletteKind, color: ColorType) -> np.ndarray:
    """
    Generate a palette as an array of RGBA floats

    :param kind: the palette kind
    :param color: the base color
    :return: array of shape (16, 4)
    """
    return np.array([x.rgba for x in kind.create(color)], dtype=np.float64)
