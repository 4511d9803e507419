"""Match paths under a directory against glob patterns.

Patterns are relative to the directory being searched and always use
``/`` as the separator. ``*`` and ``?`` match within a single path
component, ``[...]`` is a character class, and ``**`` matches any number
of components, e.g. ``"**/*.py"`` matches every Python file in a tree.

"""

import os
import re
import typing
from functools import lru_cache

from .error_tools import convert_os_errors

if typing.TYPE_CHECKING:
    from typing import Iterable, List, Optional, Pattern, Text, Tuple


#: Include pattern used when only exclude patterns are given.
MATCH_ALL = "**/*"


def _split_pattern_by_sep(pattern):
    # type: (Text) -> List[Text]
    """Split a glob pattern at its directory separators (/).

    A separator inside a character class, e.g. ``[/]``, is not split on.
    """
    indices = [-1]
    bracket_open = False
    for i, c in enumerate(pattern):
        if c == "/" and not bracket_open:
            indices.append(i)
        elif c == "[":
            bracket_open = True
        elif c == "]":
            bracket_open = False

    indices.append(len(pattern))
    return [pattern[i + 1 : j] for i, j in zip(indices[:-1], indices[1:])]


def _iteratepath(pattern):
    # type: (Text) -> List[Text]
    return [component for component in _split_pattern_by_sep(pattern) if component]


def _translate(pattern):
    # type: (Text) -> Text
    """Translate a glob pattern without '**' to a regular expression.

    There is no way to quote meta-characters.

    Arguments:
        pattern (str): A glob pattern.

    Returns:
        str: A regex equivalent to the given pattern.

    """
    i, n = 0, len(pattern)
    res = []
    while i < n:
        c = pattern[i]
        i = i + 1
        if c == "*":
            if i < n and pattern[i] == "*":
                raise ValueError("glob._translate does not support '**' patterns.")
            res.append("[^/]*")
        elif c == "?":
            res.append("[^/]")
        elif c == "[":
            j = i
            if j < n and pattern[j] == "!":
                j = j + 1
            if j < n and pattern[j] == "]":
                j = j + 1
            while j < n and pattern[j] != "]":
                j = j + 1
            if j >= n:
                res.append("\\[")
            else:
                stuff = pattern[i:j].replace("\\", "\\\\")
                i = j + 1
                if stuff[0] == "!":
                    stuff = "^/" + stuff[1:]
                elif stuff[0] == "^":
                    stuff = "\\" + stuff
                res.append("[%s]" % stuff)
        else:
            res.append(re.escape(c))
    return "".join(res)


def _translate_glob(pattern):
    # type: (Text) -> Tuple[Optional[int], Text]
    """Translate a glob pattern to a regular expression.

    Returns:
        Tuple[Optional[int], Text]: The greatest number of path components
            the pattern can match, or `None` if it contains ``**`` and so has
            no bound, followed by the regular expression.

    """
    recursive = False
    re_patterns = [""]
    components = _iteratepath(pattern)
    for component in components:
        if "**" in component:
            recursive = True
            split = component.split("**")
            split_re = [_translate(s) for s in split]
            re_patterns.append("/?" + ".*/?".join(split_re))
        else:
            re_patterns.append("/" + _translate(component))
    re_glob = "(?s)^" + "".join(re_patterns) + ("/$" if pattern.endswith("/") else "$")
    return (None if recursive else pattern.strip("/").count("/") + 1), re_glob


@lru_cache(maxsize=1000)
def _compile(pattern, case_sensitive):
    # type: (Text, bool) -> Tuple[Optional[int], Pattern]
    levels, re_str = _translate_glob(pattern)
    return levels, re.compile(re_str, 0 if case_sensitive else re.IGNORECASE)


def _match(pattern, path, case_sensitive):
    _levels, re_pattern = _compile(pattern, case_sensitive)
    if path and path[0] != "/":
        path = "/" + path
    return re_pattern.match(path) is not None


def match(pattern, path):
    # type: (Text, Text) -> bool
    """Compare a glob pattern with a path (case sensitive).

    Example:
        >>> from replshell.glob import match
        >>> match("**/*.py", "replshell/glob.py")
        True

    """
    return _match(pattern, path, True)


def imatch(pattern, path):
    # type: (Text, Text) -> bool
    """Compare a glob pattern with a path (case insensitive)."""
    return _match(pattern, path, False)


class Matcher(object):
    """Find the files (and optionally directories) matching a set of globs.

    Arguments:
        includes (list): Glob patterns a path must match at least one of.
            Defaults to `MATCH_ALL`. Patterns ending with ``/`` select
            directories, all others select files.
        excludes (list): Glob patterns to reject. A directory matching an
            exclude pattern is skipped along with everything beneath it.
        case_sensitive (bool): Match case sensitively. Defaults to
            `False`, so ``"*.TXT"`` finds ``a.txt`` on every platform.

    Example:
        >>> Matcher(["**/*.py"], ["build/"]).results_in_full_path("/src")
        ['/src/setup.py', '/src/replshell/glob.py', ...]

    """

    def __init__(self, includes=None, excludes=None, case_sensitive=False):
        # type: (Optional[Iterable[Text]], Optional[Iterable[Text]], bool) -> None
        self.includes = list(includes or [MATCH_ALL])
        self.excludes = list(excludes or [])
        self.case_sensitive = case_sensitive

    def __repr__(self):
        return "Matcher({!r}, {!r}, case_sensitive={!r})".format(
            self.includes, self.excludes, self.case_sensitive
        )

    def _any(self, patterns, path):
        return any(_match(pattern, path, self.case_sensitive) for pattern in patterns)

    def _max_depth(self):
        # type: () -> Optional[int]
        levels = [_compile(pattern, self.case_sensitive)[0] for pattern in self.includes]
        if None in levels:
            return None
        return max(levels)

    def is_excluded(self, rel_path, is_dir=False):
        # type: (Text, bool) -> bool
        """Check a path relative to the root against the exclude patterns."""
        if is_dir:
            return self._any(self.excludes, rel_path) or self._any(
                self.excludes, rel_path + "/"
            )
        return self._any(self.excludes, rel_path)

    def is_included(self, rel_path, is_dir=False):
        # type: (Text, bool) -> bool
        """Check a path relative to the root against the include patterns."""
        if is_dir:
            patterns = [p for p in self.includes if p.endswith("/")]
            return self._any(patterns, rel_path + "/")
        patterns = [p for p in self.includes if not p.endswith("/")]
        return self._any(patterns, rel_path)

    def results_in_full_path(self, root="."):
        # type: (Text) -> List[Text]
        """Get the absolute paths of every match beneath ``root``.

        Raises:
            replshell.errors.PathNotFound: If ``root`` does not exist.

        """
        root = os.path.abspath(root)
        max_depth = self._max_depth()
        results = []  # type: List[Text]
        stack = [(root, "", 1)]
        while stack:
            dir_path, rel_dir, depth = stack.pop()
            with convert_os_errors("scandir", dir_path):
                with os.scandir(dir_path) as scan:
                    entries = sorted(scan, key=lambda entry: entry.name)
                    is_dir = {entry.name: entry.is_dir() for entry in entries}
            subdirs = []
            for entry in entries:
                rel_path = rel_dir + "/" + entry.name if rel_dir else entry.name
                if is_dir[entry.name]:
                    if self.is_excluded(rel_path, is_dir=True):
                        continue
                    if self.is_included(rel_path, is_dir=True):
                        results.append(entry.path)
                    if max_depth is None or depth < max_depth:
                        subdirs.append((entry.path, rel_path, depth + 1))
                elif not self.is_excluded(rel_path) and self.is_included(rel_path):
                    results.append(entry.path)
            stack.extend(reversed(subdirs))
        return results
