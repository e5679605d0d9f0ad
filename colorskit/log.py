#
# Copyright (C) 2026 ColorsKit Developers — LGPL-3.0-or-later
#
"""
Logger factory shared by the color engine modules.
"""
import logging

import colorlog
from wrapt import synchronized


LOG_NAMESPACE = 'colorskit'

PLAIN_FORMAT = ' %(name)s/%(levelname)-8s | %(message)s'
COLOR_FORMAT = ' %(log_color)s%(name)s/%(levelname)-8s%(reset)s |' \
               ' %(log_color)s%(message)s%(reset)s'


class Log(object):
    """
    Logging module

    Call get() to get a cached logger for a module tag. Every
    logger lives below the "colorskit" namespace so a host
    application can tune all of them through the parent logger;
    records propagate to the host's handlers as usual and the level
    is inherited unless set_level() was called.
    Colored output can optionally be enabled.
    """

    _LOGGERS = {}
    _use_color = False
    _level = None


    @staticmethod
    def qualify(tag: str) -> str:
        """
        Get the fully qualified logger name for a tag

        :param tag: short tag such as "palette"
        :return: the dotted logger name
        """
        if tag == LOG_NAMESPACE or tag.startswith(LOG_NAMESPACE + '.'):
            return tag
        return '%s.%s' % (LOG_NAMESPACE, tag)


    @synchronized
    @classmethod
    def get(cls, tag: str) -> logging.Logger:
        """
        Get the logger instance for the given tag

        :param tag: the log tag
        :return: the logger instance
        """
        name = cls.qualify(tag)
        if name not in cls._LOGGERS:
            if cls._use_color:
                handler = colorlog.StreamHandler()
                handler.setFormatter(colorlog.ColoredFormatter(COLOR_FORMAT))
            else:
                handler = logging.StreamHandler()
                handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

            logger = logging.getLogger(name)
            logger.addHandler(handler)
            if cls._level is not None:
                logger.setLevel(cls._level)

            cls._LOGGERS[name] = logger

        return cls._LOGGERS[name]


    @synchronized
    @classmethod
    def set_level(cls, level):
        """
        Change the level of every logger, including ones
        created later.

        :param level: a logging level or its name
        """
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                raise ValueError('Unknown log level: %s' % level)

        cls._level = level
        for logger in cls._LOGGERS.values():
            logger.setLevel(level)


    @classmethod
    def enable_color(cls, enable):
        """
        Enable colored output for loggers. Must be called before
        any loggers are initialized with get()
        """
        cls._use_color = enable
