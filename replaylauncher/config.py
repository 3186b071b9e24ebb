"""
Tools and wrappers for Everett config classes. Lets us define configuration
with less boilerplate, provides some common parsers with extra checks.
"""

import os
import logging
from enum import Enum
from everett.manager import Option


__all__ = ["nonnegative_int", "is_file", "optional_file",
           "LogLevel", "Config"]


def nonnegative_int(v):
    i = int(v)
    if i < 0:
        raise ValueError("Expected a nonnegative value")
    return i


def is_file(f):
    if not os.path.isfile(f):
        raise ValueError(f"No file found at {f}")
    return f


def optional_file(f):
    if f in ["", "None"]:
        return None
    return is_file(f)


class LogLevel(Enum):
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG

    @classmethod
    def from_config(cls, value):
        try:
            return cls[value.upper()].value
        except KeyError:
            try:
                return cls(int(value)).value
            except (ValueError, TypeError):
                raise ValueError(
                    f"Expected log level name or numeric value, got {value}")


class _ConfigMeta(type):
    def __init__(cls, name, bases, attrs, *args, **kwargs):
        super().__init__(name, bases, attrs, *args, **kwargs)

        # Everett looks for Option members of an inner Config class.
        options = {name: Option(**opt_attrs)
                   for name, opt_attrs in attrs.get("_options", {}).items()}
        cls.Config = type("Config", (), options)


class Config(metaclass=_ConfigMeta):
    """
    Wrapper for Everett's option binding that reduces boilerplate. Just define
    your options in an _options dict, and all values will be turned into
    members, raising errors if any are missing.

    In general subclasses should be PODs, so that they can be trivially mocked.
    Config object hierarchy roughly matches component hierarchy.
    """
    _options = {}

    def __init__(self, config):
        self.config = config.with_options(self)
        for key in self._options:
            setattr(self, key, self.config(key, raise_error=True))
