"""Machinery for listing directories.

*Walking* a directory means visiting it and, optionally, its
sub-directories. `Walker` produces one `Step` per visited directory, and
`list_dir` flattens the steps in to the list of paths that
`replshell.ls` returns.
"""

import os
import typing
from collections import namedtuple

from . import options as _options
from .enums import EntryType
from .error_tools import convert_os_errors
from .glob import Matcher

if typing.TYPE_CHECKING:
    from typing import Any, Iterator, List, Optional, Text, Tuple

    from .options import ListOptions


_LIST_KEYWORDS = ("recurse", "depth", "dirs", "files", "path", "patterns", "excludes")


Step = namedtuple("Step", "path, dirs, files")
"""type: a *step* in a directory walk.

``dirs`` and ``files`` are absolute paths, each sorted by name.
"""


def scan_dir(path):
    # type: (Text) -> Tuple[List[Text], List[Text]]
    """Get the sub-directories and files immediately inside a directory.

    Returns:
        tuple: ``(dirs, files)``, two lists of absolute paths.

    Raises:
        replshell.errors.PathNotFound: If ``path`` does not exist.
        replshell.errors.DirectoryExpected: If ``path`` is a file.

    """
    dirs = []
    files = []
    with convert_os_errors("scandir", path):
        with os.scandir(path) as scan:
            for entry in sorted(scan, key=lambda entry: entry.name):
                if entry.is_dir():
                    dirs.append(entry.path)
                else:
                    files.append(entry.path)
    return dirs, files


class Walker(object):
    """Walk a directory tree, top down.

    Each directory's step is produced before the steps of its
    sub-directories, and sub-directories are visited in name order.
    Symlinks to directories are followed; cycles are not detected.

    Arguments:
        max_depth (int, optional): Number of levels of sub-directories to
            descend in to, ``0`` to only visit the root, or `None` (the
            default) for no limit.

    """

    def __init__(self, max_depth=None):
        # type: (Optional[int]) -> None
        if max_depth is not None and max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        self.max_depth = max_depth

    def __repr__(self):
        if self.max_depth is None:
            return "Walker()"
        return "Walker(max_depth={!r})".format(self.max_depth)

    def walk(self, path="."):
        # type: (Text) -> Iterator[Step]
        """Walk the directory structure under ``path``.

        Yields:
            `Step`: one step per directory visited.

        """
        stack = [(os.path.abspath(path), self.max_depth)]
        while stack:
            dir_path, remaining = stack.pop()
            dirs, files = scan_dir(dir_path)
            yield Step(dir_path, dirs, files)
            if remaining is None or remaining > 0:
                next_remaining = None if remaining is None else remaining - 1
                stack.extend((sub_dir, next_remaining) for sub_dir in reversed(dirs))

    def files(self, path="."):
        # type: (Text) -> Iterator[Text]
        """Walk ``path``, yielding absolute paths to files."""
        for _path, _dirs, files in self.walk(path):
            for file_path in files:
                yield file_path

    def dirs(self, path="."):
        # type: (Text) -> Iterator[Text]
        """Walk ``path``, yielding absolute paths to directories."""
        for _path, dirs, _files in self.walk(path):
            for dir_path in dirs:
                yield dir_path


def list_dir(options):
    # type: (ListOptions) -> List[Text]
    """List a directory according to ``options``.

    If any include or exclude patterns are present, the listing is
    delegated to a `~replshell.glob.Matcher` and the recursion, depth and
    entry type settings have no effect. Otherwise the root's entries are
    listed (directories first), followed by the listing of each
    sub-directory when recursing.

    """
    if options.patterns or options.excludes:
        matcher = Matcher(options.patterns, options.excludes)
        return matcher.results_in_full_path(options.path)

    max_depth = options.depth if options.recurse else 0
    results = []  # type: List[Text]
    for _path, dirs, files in Walker(max_depth=max_depth).walk(options.path):
        if options.entries != EntryType.FILES:
            results.extend(dirs)
        if options.entries != EntryType.DIRECTORIES:
            results.extend(files)
    return results


def ls(*args, **kwargs):
    # type: (*Any, **Any) -> List[Text]
    """List the contents of a directory.

    ``ls()`` lists the current directory. A string argument is the path
    to list if it names a directory, otherwise it is a glob pattern, e.g.
    ``ls("src")`` or ``ls("**/*.py")``.

    Options:
        ``RECURSE`` (``recurse=True``): list sub-directories too.
        ``Depth(n)`` (``depth=n``): recurse at most ``n`` levels.
        ``DIRECTORY`` (``dirs=True``): only list directories.
        ``FILE`` (``files=True``): only list files.
        ``Path(path)`` (``path=path``): the directory to list.
        ``Pattern(glob)`` (``patterns=[...]``): list files matching a
        pattern. May be given more than once.
        ``Exclude(glob)`` (``excludes=[...]``): skip paths matching a
        pattern. May be given more than once.

    If there is a pattern or exclude pattern, ``RECURSE``, ``Depth``,
    ``DIRECTORY`` and ``FILE`` are ignored. Patterns can recurse by
    themselves, e.g. ``"**/*.txt"``. Patterns ignore case.

    Returns:
        list: Absolute paths.

    """
    strings, options = _options.partition(args)
    positional = [
        _options.Path(value) if os.path.isdir(value) else _options.Pattern(value)
        for value in strings
    ]
    options = positional + options + _options.from_keywords(kwargs, _LIST_KEYWORDS)
    return list_dir(_options.list_options(options))
