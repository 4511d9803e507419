"""Enums used by replshell.
"""

from enum import Enum, unique


@unique
class OptionKind(Enum):
    """The tag carried by every `~replshell.options.Option`."""

    RECURSE = "recurse"
    DEPTH = "depth"
    DIRECTORY = "directory"
    FILE = "file"
    FORCE = "force"
    PATTERN = "pattern"
    EXCLUDE = "exclude"
    PATH = "path"
    SILENT = "silent"
    NO_CAPTURE = "no_capture"
    ARGS = "args"


@unique
class EntryType(Enum):
    """Which kind of directory entries a listing returns."""

    ALL = "all"
    FILES = "files"
    DIRECTORIES = "directories"
