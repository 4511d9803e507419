"""Shell-like commands for interactive Python sessions.

Import everything in to a REPL to get started::

    >>> from replshell import *
    >>> ls("**/*.py")
    >>> run("git status")

"""

from . import errors
from ._version import __version__
from .fileops import append, cat, cd, cp, md, mkdir, mv, pwd, read_text, rm, start
from .fileops import touch, write
from .options import (
    DIRECTORY,
    FILE,
    FORCE,
    NO_CAPTURE,
    RECURSE,
    SILENT,
    Args,
    Depth,
    Exclude,
    Path,
    Pattern,
)
from .process import CommandOutput, cmd, pipe, run
from .walk import ls

__all__ = [
    "__version__",
    "append",
    "Args",
    "cat",
    "cd",
    "cmd",
    "CommandOutput",
    "cp",
    "Depth",
    "DIRECTORY",
    "errors",
    "Exclude",
    "FILE",
    "FORCE",
    "ls",
    "md",
    "mkdir",
    "mv",
    "NO_CAPTURE",
    "Path",
    "Pattern",
    "pipe",
    "pwd",
    "read_text",
    "RECURSE",
    "rm",
    "run",
    "SILENT",
    "start",
    "touch",
    "write",
]
