#
# Copyright (C) 2026 ColorsKit Developers — LGPL-3.0-or-later
#
# pylint: disable=invalid-name
"""
Color conversion, luminance and channel transforms.

Host code hands colors in whatever form it has (hex strings, int or
float tuples, objects exposing ``rgba``); they are converted to
:class:`Color` values right at the boundary by :func:`to_color`.
"""

import math
import re

from numbers import Real
from typing import Callable, Iterable, Union

from coloraide import Color as _BaseColor

from colorskit.colorlib import Color, HSBA, RGBA
from colorskit.log import Log
from colorskit.util import autocast_decorator, clamp_unit, normalize_degrees


# Type hint for decorated color arguments
ColorType = Union[Color, str, Iterable[int], Iterable[float], None]

RGBAMutation = Callable[[RGBA], Iterable[float]]
HSBAMutation = Callable[[HSBA], Iterable[float]]

LUMINANCE_WEIGHTS = (0.299, 0.587, 0.114)

LIGHT_THRESHOLD = 0.5
NEAR_BLACK_THRESHOLD = 0.01
HUE_CONTRAST_BAND = (0.2, 0.5)

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
NEAR_BLACK = Color(0.1, 0.1, 0.1)

_logger = Log.get('color')


class UnconvertibleColor(TypeError):
    """
    The input can't be expressed as an RGB color.

    There is no fallback color; callers decide how to degrade.
    """


class DegenerateLuminanceCorrection(ZeroDivisionError):
    """
    Luminance correction was requested for a color whose
    luminance is zero, so no scale factor exists.
    """


def _rgba_from_tuple(arg: tuple) -> Color:
    values = tuple(arg)
    if len(values) not in (3, 4):
        raise UnconvertibleColor('Unable to convert %s to color, expected 3 or 4 channels' % (arg,))

    if all(isinstance(n, int) and not isinstance(n, bool) for n in values):
        return Color(*Color.IntTupleToRgb(values))

    if all(isinstance(n, float) for n in values):
        if any(math.isnan(n) for n in values):
            raise UnconvertibleColor('Unable to convert %s to color, NaN channel' % (arg,))
        return Color(*values)

    raise UnconvertibleColor('Unable to convert %s (%s) to color' % (arg, type(values[0])))


def _rgba_from_host(arg) -> Color:
    for attr in ('rgba', 'rgb'):
        channels = getattr(arg, attr, None)
        if callable(channels):
            channels = channels()
        if channels is None or isinstance(channels, str):
            continue

        try:
            values = [float(x) for x in channels]
        except (TypeError, ValueError) as err:
            raise UnconvertibleColor('Unable to read %s from %r' % (attr, arg)) from err

        return _rgba_from_tuple(tuple(values))

    raise UnconvertibleColor('Unable to parse color from \'%s\' (%s)' % (arg, type(arg)))


COLOR_TUPLE_STR = re.compile(r'^\((.*, .*, .*, .*)\)$')

def to_color(*color_args) -> Color:
    """
    Convert various color representations to colorskit.Color

    Handles Color values, ColorAide colors, hexcodes and other CSS
    color strings (including names), the string form of a Color,
    RGB(A) tuples of ints (0-255) or floats (0-1), and host objects
    exposing float ``rgba`` or ``rgb`` channels.

    :raises UnconvertibleColor: if an argument is not a color
    :return: The color, a list of colors for several arguments
    """
    colors = []
    for arg in color_args:
        value = None
        if arg is not None:
            if isinstance(arg, Color):
                value = arg
            elif isinstance(arg, _BaseColor):
                value = Color.NewFromBase(arg)
            elif isinstance(arg, str):
                if arg != '':
                    # str() of a Color is a tuple of its channels
                    strtuple = COLOR_TUPLE_STR.match(arg.strip())
                    try:
                        if strtuple:
                            value = _rgba_from_tuple(tuple(float(x) \
                                    for x in strtuple.group(1).split(', ')))
                        else:
                            value = Color.NewFromHtml(arg)
                    except ValueError as err:
                        raise UnconvertibleColor('Unable to parse color from \'%s\'' % arg) from err
            elif isinstance(arg, (tuple, list)):
                value = _rgba_from_tuple(arg)
            elif isinstance(arg, Real):
                raise UnconvertibleColor('Unable to parse color from \'%s\' (%s)' % (arg, type(arg)))
            else:
                value = _rgba_from_host(arg)
        colors.append(value)

    if len(colors) == 0:
        return None
    if len(colors) == 1:
        return colors[0]

    return colors


def to_rgba(arg) -> RGBA:
    """
    Get the RGBA channels of any supported color representation

    :raises UnconvertibleColor: if the argument is not a color
    """
    color = to_color(arg)
    if color is None:
        raise UnconvertibleColor('No color given')
    return color.rgba


def to_hsba(arg) -> HSBA:
    """
    Get the HSBA channels of any supported color representation,
    hue in degrees.

    :raises UnconvertibleColor: if the argument is not a color
    """
    color = to_color(arg)
    if color is None:
        raise UnconvertibleColor('No color given')
    return color.hsba


"""
Decorator to parse various color representations

Invokes to_color on any arguments hinted with ColorType. This will
cause them to be resolved to colorskit.Color objects from the various
different representations that might be in use. A passed argument
that resolves to no color (None or an empty string) raises
UnconvertibleColor; optional arguments that are left out keep their
default.

Example:

@colorarg
def frobizzle(speed, color1: ColorType, color2: ColorType=None)
"""
colorarg = autocast_decorator(ColorType, to_color, missing=UnconvertibleColor)


def _channels(result, kind: str) -> tuple:
    try:
        values = tuple(float(x) for x in result)
    except (TypeError, ValueError) as err:
        raise ValueError('%s mutation must return four numbers, got %r' % (kind, result)) from err

    if len(values) != 4:
        raise ValueError('%s mutation must return four numbers, got %r' % (kind, result))

    return values


def _luminance_correction(original: float, new: float) -> float:
    if new == 0.0:
        raise DegenerateLuminanceCorrection( \
                'Cannot restore luminance %f from a black color' % original)
    return original / new



class ColorUtils(object):
    """
    Luminance math and channel transforms
    """

    @staticmethod
    def _luminance(rgb) -> float:
        return sum(w * c for w, c in zip(LUMINANCE_WEIGHTS, rgb[:3]))


    @staticmethod
    def _scale_rgb(rgba: RGBA, factor: float) -> Color:
        return Color(*clamp_unit(*(x * factor for x in rgba[:3])), rgba.alpha)


    @staticmethod
    @colorarg
    def luminance(color: ColorType) -> float:
        """
        Calculate the luminance of the given color as the weighted
        sum 0.299 R + 0.587 G + 0.114 B, without gamma correction.

        :param color: a color
        :return: the luminance between 0.0 and 1.0
        """
        return ColorUtils._luminance(color.rgb)


    @staticmethod
    @colorarg
    def lighter(color: ColorType) -> Color:
        """
        Get a lighter variant with twice the luminance (capped at 1.0),
        scaling RGB proportionally. Alpha is kept.

        Colors that are nearly black give an opaque dark gray, since
        scaling would not move them.

        :param color: a color
        :return: the lighter color
        """
        lum = ColorUtils.luminance(color)
        if lum < NEAR_BLACK_THRESHOLD:
            return NEAR_BLACK

        target = min(lum / 0.5, 1.0)
        return ColorUtils._scale_rgb(color.rgba, target / lum)


    @staticmethod
    @colorarg
    def darker(color: ColorType) -> Color:
        """
        Get a darker variant with half the luminance, scaling RGB
        proportionally. Alpha is kept. Nearly black colors give
        opaque black.

        :param color: a color
        :return: the darker color
        """
        lum = ColorUtils.luminance(color)
        if lum < NEAR_BLACK_THRESHOLD:
            return BLACK

        target = lum * 0.5
        return ColorUtils._scale_rgb(color.rgba, target / lum)


    @staticmethod
    @colorarg
    def is_light(color: ColorType) -> bool:
        """
        True if the luminance of the color is above 0.5
        """
        return ColorUtils.luminance(color) > LIGHT_THRESHOLD


    @staticmethod
    @colorarg
    def contrasting_with_luminance(color: ColorType) -> Color:
        """
        Black for light colors, white for dark ones.
        """
        if ColorUtils.is_light(color):
            return BLACK
        return WHITE


    @staticmethod
    @colorarg
    def contrasting_hue(color: ColorType) -> Color:
        """
        The complementary color: hue rotated by 180 degrees with
        saturation, brightness and alpha unchanged.
        """
        return ColorUtils.transform_hsba(color, lambda hsba: hsba._replace(hue=hsba.hue + 180.0))


    @staticmethod
    @colorarg
    def best_contrasting_color(color: ColorType) -> Color:
        """
        Pick a readable foreground color for the given background.

        Mid-luminance colors (0.2 <= L < 0.5) get the complementary hue,
        everything else gets black or white.

        :param color: the background color
        :return: the foreground color
        """
        low, high = HUE_CONTRAST_BAND
        if low <= ColorUtils.luminance(color) < high:
            return ColorUtils.contrasting_hue(color)
        return ColorUtils.contrasting_with_luminance(color)


    @staticmethod
    @colorarg
    def transform_rgba(color: ColorType, mutate: RGBAMutation,
                       preserve_luminance: bool=False) -> Color:
        """
        Apply a mutation to the RGBA channels of a color.

        The mutation receives an RGBA tuple and returns the new
        (red, green, blue, alpha); every channel is clamped afterwards.
        With preserve_luminance, RGB is rescaled so the result has the
        luminance of the input (as far as clamping allows). A result
        with zero luminance can't be rescaled and is returned as is.

        Example:

            ColorUtils.transform_rgba(color, lambda c: c._replace(green=1.0))

        :param color: the color to transform
        :param mutate: function from RGBA to a 4-tuple
        :param preserve_luminance: keep the original luminance
        :return: the new color
        """
        original = color.rgba
        rgba = RGBA(*clamp_unit(*_channels(mutate(original), 'RGBA')))

        if preserve_luminance:
            try:
                correction = _luminance_correction(ColorUtils._luminance(original),
                                                   ColorUtils._luminance(rgba))
            except DegenerateLuminanceCorrection as err:
                _logger.debug('Skipping luminance correction: %s', err)
            else:
                return ColorUtils._scale_rgb(rgba, correction)

        return Color(*rgba)


    @staticmethod
    @colorarg
    def transform_hsba(color: ColorType, mutate: HSBAMutation) -> Color:
        """
        Apply a mutation to the HSBA channels of a color.

        The mutation receives an HSBA tuple with the hue normalized to
        0-360 degrees and returns the new (hue, saturation, brightness,
        alpha). The hue wraps around, the result is converted back
        to RGB and every channel is clamped.

        :param color: the color to transform
        :param mutate: function from HSBA to a 4-tuple
        :return: the new color
        """
        hsba = color.hsba
        hsba = hsba._replace(hue=normalize_degrees(hsba.hue))

        hue, saturation, brightness, alpha = _channels(mutate(hsba), 'HSBA')
        saturation, brightness, alpha = clamp_unit(saturation, brightness, alpha)
        candidate = Color.NewFromHsb(normalize_degrees(hue), saturation, brightness, alpha)

        return Color(*clamp_unit(*candidate.rgba))
