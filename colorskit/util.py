#
# Copyright (C) 2026 ColorsKit Developers — LGPL-3.0-or-later
#
# pylint: disable=invalid-name
"""
Various helper functions that are used across the library.
"""
import inspect
import math
import typing

from wrapt import decorator


def autocast_decorator(type_hint, fix_arg_func, missing=None):
    """
    Build a decorator which converts every argument annotated
    with type_hint through fix_arg_func before the call.

    The hinted arguments are looked up once, when a function is
    decorated. Arguments the caller leaves out are not converted.

    :param type_hint: A PEP484 type hint
    :param fix_arg_func: Conversion function for a single argument
    :param missing: Exception class raised when a passed argument
                    converts to None. None passes the result through.

    :raises ValueError: if the decorated function has no argument
                        with the hint
    :return: decorator
    """
    hints = (type_hint, typing.Union[type_hint, None])

    def convert(name, value):
        result = fix_arg_func(value)
        if result is None and missing is not None:
            raise missing('No value given for argument \'%s\'' % name)
        return result

    def decorate(func):
        names = list(inspect.signature(func).parameters.keys())
        hinted_args = [name for name, hint in typing.get_type_hints(func).items() \
                if name in names and hint in hints]

        if len(hinted_args) == 0:
            raise ValueError("No arguments with %s hint found on %s" % \
                    (type_hint, func.__qualname__))

        @decorator
        def wrapper(wrapped, instance, args, kwargs):
            # bound methods are called without self/cls
            positions = names[1:] if instance is not None else names

            new_args = list(args)
            for hinted_arg in hinted_args:
                if hinted_arg in kwargs:
                    kwargs[hinted_arg] = convert(hinted_arg, kwargs[hinted_arg])

                elif hinted_arg in positions:
                    idx = positions.index(hinted_arg)
                    if idx < len(new_args):
                        new_args[idx] = convert(hinted_arg, new_args[idx])

            return wrapped(*new_args, **kwargs)

        return wrapper(func)

    return decorate


def clamp(value, min_, max_):
    """
    Constrain a value to the specified range

    NaN collapses to min_.

    :param value: Input value
    :param min_: Range minimum
    :param max_: Range maximum

    :return: The constrained value
    """
    if isinstance(value, float) and math.isnan(value):
        return min_
    return max(min_, min(value, max_))


def clamp_unit(*values) -> tuple:
    """
    Constrain every value to the 0.0 - 1.0 range

    :param values: Input values, varargs
    :return: Tuple of floats
    """
    return tuple(clamp(float(x), 0.0, 1.0) for x in values)


def normalize_degrees(angle: float) -> float:
    """
    Wrap an angle into the half-open range [0, 360)

    :param angle: Angle in degrees, any sign or magnitude
    :return: The equivalent angle in degrees
    """
    angle = float(angle)
    if not math.isfinite(angle):
        return 0.0

    angle %= 360.0
    # tiny negative inputs round up to exactly 360.0
    if angle >= 360.0:
        return 0.0
    return angle
