"""User settings.

Settings are read from ``replshell.ini`` in the user's configuration
directory (as reported by `appdirs`), e.g.
``~/.config/replshell/replshell.ini`` on Linux::

    [replshell]
    encoding = utf-8
    errors = replace
    echo = yes

``encoding`` and ``errors`` are used to decode and encode text files and
process streams. Setting ``echo = no`` makes commands run silently unless
told otherwise.

"""

import configparser
import logging
import os
import typing
from collections import namedtuple

import appdirs

if typing.TYPE_CHECKING:
    from typing import Optional, Text


log = logging.getLogger("replshell.config")

APP_NAME = "replshell"
CONFIG_FILENAME = "replshell.ini"
SECTION = "replshell"


class Settings(namedtuple("Settings", ["encoding", "errors", "echo"])):
    """Settings that apply to every operation."""

    __slots__ = ()

    @classmethod
    def default(cls):
        # type: () -> Settings
        return cls(encoding="utf-8", errors="replace", echo=True)

    @classmethod
    def load(cls, path=None):
        # type: (Optional[Text]) -> Settings
        """Load settings from an ini file.

        Arguments:
            path (str, optional): Path to the file, defaults to
                `config_path`. A missing file gives the default settings.

        """
        path = path or config_path()
        defaults = cls.default()
        parser = configparser.ConfigParser()
        if not parser.read(path, encoding="utf-8"):
            return defaults
        log.debug("loaded settings from %s", path)
        if not parser.has_section(SECTION):
            return defaults
        section = parser[SECTION]
        return cls(
            encoding=section.get("encoding", defaults.encoding),
            errors=section.get("errors", defaults.errors),
            echo=section.getboolean("echo", defaults.echo),
        )


def config_path():
    # type: () -> Text
    """Get the path of the user's settings file."""
    return os.path.join(appdirs.user_config_dir(APP_NAME), CONFIG_FILENAME)


_settings = None  # type: Optional[Settings]


def get_settings():
    # type: () -> Settings
    """Get the user's settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings(settings=None):
    # type: (Optional[Settings]) -> None
    """Replace the cached settings, or force a reload if ``settings`` is `None`."""
    global _settings
    _settings = settings
