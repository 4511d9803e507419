"""Modifier options accepted by the shell operations.

Every operation takes a free mix of positional values and options, e.g.::

    >>> from replshell import ls, RECURSE, Depth
    >>> ls("src", RECURSE, Depth(1))

The same modifiers may be given as keyword arguments
(``ls("src", recurse=True, depth=1)``). Either way, the options are scanned
in to an explicit record for the operation (`ListOptions`,
`CopyOptions`, `RemoveOptions` or `ExecOptions`).

Scanning rules:

* ``FILE`` together with ``DIRECTORY`` raises `~replshell.errors.InvalidOption`.
* `Depth` and `Path` hold a single value; the last one given wins.
* `Pattern`, `Exclude` and `Args` accumulate in the order given.
* Options an operation has no use for are ignored.

"""

import os
import typing
from collections import namedtuple

from .enums import EntryType, OptionKind
from .errors import InvalidOption

if typing.TYPE_CHECKING:
    from typing import Any, Dict, Iterable, List, Text, Tuple


__all__ = [
    "Args",
    "Depth",
    "DIRECTORY",
    "Exclude",
    "FILE",
    "FORCE",
    "Flag",
    "NO_CAPTURE",
    "Option",
    "Path",
    "Pattern",
    "RECURSE",
    "SILENT",
]


ListOptions = namedtuple(
    "ListOptions", ["path", "patterns", "excludes", "entries", "recurse", "depth"]
)
CopyOptions = namedtuple("CopyOptions", ["recurse", "force"])
RemoveOptions = namedtuple("RemoveOptions", ["recurse", "force"])
ExecOptions = namedtuple("ExecOptions", ["args", "silent", "capture"])


class Option(object):
    """Base class for a tagged modifier value."""

    __slots__ = ["kind", "value"]

    def __init__(self, kind, value=None):
        # type: (OptionKind, Any) -> None
        self.kind = kind
        self.value = value

    def __eq__(self, other):
        return (
            isinstance(other, Option)
            and self.kind == other.kind
            and self.value == other.value
        )

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self.value)


class Flag(Option):
    """An option without a value, e.g. ``RECURSE``."""

    __slots__ = []  # type: List[str]

    def __init__(self, kind):
        # type: (OptionKind) -> None
        super(Flag, self).__init__(kind)

    def __repr__(self):
        return self.kind.name


class Depth(Option):
    """Limit recursion to ``levels`` sub-directories below the root."""

    __slots__ = []  # type: List[str]

    def __init__(self, levels):
        # type: (int) -> None
        if isinstance(levels, bool) or not isinstance(levels, int):
            raise InvalidOption(levels, msg="depth must be an integer, not {option!r}")
        if levels < 0:
            raise InvalidOption(levels, msg="depth must be >= 0, not {option!r}")
        super(Depth, self).__init__(OptionKind.DEPTH, levels)


class Pattern(Option):
    """Include paths matching a glob pattern, e.g. ``Pattern("**/*.py")``."""

    __slots__ = []  # type: List[str]

    def __init__(self, glob):
        # type: (Text) -> None
        super(Pattern, self).__init__(OptionKind.PATTERN, glob)


class Exclude(Option):
    """Exclude paths matching a glob pattern."""

    __slots__ = []  # type: List[str]

    def __init__(self, glob):
        # type: (Text) -> None
        super(Exclude, self).__init__(OptionKind.EXCLUDE, glob)


class Path(Option):
    """Operate on ``path`` instead of the current directory."""

    __slots__ = []  # type: List[str]

    def __init__(self, path):
        super(Path, self).__init__(OptionKind.PATH, os.fspath(path))


class Args(Option):
    """Extra arguments for a command.

    Accepts the arguments as separate parameters, ``Args("build",
    "--help")``, or as a single iterable, ``Args(["build", "--help"])``.

    """

    __slots__ = []  # type: List[str]

    def __init__(self, *values):
        if len(values) == 1 and not isinstance(values[0], str):
            values = tuple(values[0])
        for value in values:
            if not isinstance(value, str):
                raise InvalidOption(
                    value, msg="command arguments must be strings, not {option!r}"
                )
        super(Args, self).__init__(OptionKind.ARGS, tuple(values))


RECURSE = Flag(OptionKind.RECURSE)
DIRECTORY = Flag(OptionKind.DIRECTORY)
FILE = Flag(OptionKind.FILE)
FORCE = Flag(OptionKind.FORCE)
SILENT = Flag(OptionKind.SILENT)
NO_CAPTURE = Flag(OptionKind.NO_CAPTURE)


def _flag(option):
    return lambda value: [option] if value else []


def _many(option_class):
    def convert(value):
        if isinstance(value, str):
            value = [value]
        return [option_class(item) for item in value]

    return convert


_KEYWORDS = {
    "recurse": _flag(RECURSE),
    "depth": lambda value: [] if value is None else [Depth(value)],
    "dirs": _flag(DIRECTORY),
    "files": _flag(FILE),
    "force": _flag(FORCE),
    "patterns": _many(Pattern),
    "excludes": _many(Exclude),
    "path": lambda value: [] if value is None else [Path(value)],
    "silent": _flag(SILENT),
    "capture": lambda value: [] if value else [NO_CAPTURE],
    "args": lambda value: [Args(value)],
}


def from_keywords(keywords, allowed):
    # type: (Dict[Text, Any], Iterable[Text]) -> List[Option]
    """Convert keyword arguments in to the equivalent options.

    Raises:
        TypeError: if a keyword is not in ``allowed``.

    """
    allowed = frozenset(allowed)
    options = []  # type: List[Option]
    for name, value in keywords.items():
        if name not in allowed:
            raise TypeError("unexpected keyword argument {!r}".format(name))
        options.extend(_KEYWORDS[name](value))
    return options


def partition(values):
    # type: (Iterable[Any]) -> Tuple[List[Text], List[Option]]
    """Separate positional strings (or path-like objects) from options."""
    strings = []  # type: List[Text]
    options = []  # type: List[Option]
    for value in values:
        if isinstance(value, Option):
            options.append(value)
        elif isinstance(value, (str, os.PathLike)):
            strings.append(os.fspath(value))
        else:
            raise InvalidOption(
                value, msg="expected a string or an option, not {option!r}"
            )
    return strings, options


class _Scan(object):
    """The result of a single pass over a collection of options."""

    def __init__(self, options):
        # type: (Iterable[Option]) -> None
        self.flags = set()
        self.depth = None
        self.path = None
        self.patterns = []  # type: List[Text]
        self.excludes = []  # type: List[Text]
        self.args = []  # type: List[Text]
        for option in options:
            if not isinstance(option, Option):
                raise InvalidOption(option, msg="expected an option, not {option!r}")
            kind = option.kind
            if isinstance(option, Flag):
                self.flags.add(kind)
            elif kind == OptionKind.DEPTH:
                self.depth = option.value
            elif kind == OptionKind.PATH:
                self.path = option.value
            elif kind == OptionKind.PATTERN:
                self.patterns.append(option.value)
            elif kind == OptionKind.EXCLUDE:
                self.excludes.append(option.value)
            elif kind == OptionKind.ARGS:
                self.args.extend(option.value)

    def __contains__(self, kind):
        return kind in self.flags


def list_options(options):
    # type: (Iterable[Option]) -> ListOptions
    """Scan options for a directory listing."""
    scan = _Scan(options)
    if OptionKind.FILE in scan and OptionKind.DIRECTORY in scan:
        raise InvalidOption(
            (FILE, DIRECTORY), msg="FILE and DIRECTORY can't be used together"
        )
    if OptionKind.FILE in scan:
        entries = EntryType.FILES
    elif OptionKind.DIRECTORY in scan:
        entries = EntryType.DIRECTORIES
    else:
        entries = EntryType.ALL
    return ListOptions(
        path=scan.path if scan.path is not None else ".",
        patterns=tuple(scan.patterns),
        excludes=tuple(scan.excludes),
        entries=entries,
        recurse=OptionKind.RECURSE in scan,
        depth=scan.depth,
    )


def copy_options(options):
    # type: (Iterable[Option]) -> CopyOptions
    """Scan options for a copy."""
    scan = _Scan(options)
    return CopyOptions(
        recurse=OptionKind.RECURSE in scan, force=OptionKind.FORCE in scan
    )


def remove_options(options):
    # type: (Iterable[Option]) -> RemoveOptions
    """Scan options for a remove."""
    scan = _Scan(options)
    return RemoveOptions(
        recurse=OptionKind.RECURSE in scan, force=OptionKind.FORCE in scan
    )


def exec_options(options):
    # type: (Iterable[Option]) -> ExecOptions
    """Scan options for running a command.

    ``NO_CAPTURE`` overrides ``SILENT``, as there is no captured output
    left to silence.

    """
    scan = _Scan(options)
    capture = OptionKind.NO_CAPTURE not in scan
    return ExecOptions(
        args=tuple(scan.args),
        silent=capture and OptionKind.SILENT in scan,
        capture=capture,
    )
