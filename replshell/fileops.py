"""Shell-like file operations.

These are thin wrappers around `os` and `shutil`. Errors from the
operating system are translated in to `replshell.errors` exceptions.

"""

import io
import logging
import os
import shutil
import typing

import click

from . import options as _options
from .config import get_settings
from .error_tools import convert_os_errors
from .errors import AlreadyExists, InvalidOption, OperationFailed, PathNotFound
from .walk import Walker

if typing.TYPE_CHECKING:
    from typing import Any, Iterable, List, Text, Union

    from .options import CopyOptions, RemoveOptions

    _Content = Union[Text, Iterable[Text]]


log = logging.getLogger("replshell.fileops")


def _scan_flags(args, kwargs):
    # type: (Any, Any) -> List[_options.Option]
    strings, options = _options.partition(args)
    if strings:
        raise InvalidOption(strings[0], msg="unexpected argument {option!r}")
    return options + _options.from_keywords(kwargs, ("recurse", "force"))


def pwd():
    # type: () -> Text
    """Get the current working directory."""
    return os.getcwd()


def cd(path):
    # type: (Text) -> Text
    """Change the current working directory.

    The working directory is shared by the whole process.

    Returns:
        str: The new working directory.

    """
    with convert_os_errors("chdir", path):
        os.chdir(path)
    return os.getcwd()


def read_text(path):
    # type: (Text) -> Text
    """Get the contents of a text file, exactly as stored."""
    settings = get_settings()
    with convert_os_errors("read", path):
        with io.open(
            path, "rt", encoding=settings.encoding, errors=settings.errors, newline=""
        ) as text_file:
            return text_file.read()


def cat(path):
    # type: (Text) -> List[Text]
    """Get the lines of a text file, without line endings."""
    settings = get_settings()
    with convert_os_errors("read", path):
        with io.open(
            path, "rt", encoding=settings.encoding, errors=settings.errors
        ) as text_file:
            return [line[:-1] if line.endswith("\n") else line for line in text_file]


def _write(content, path, mode):
    # type: (_Content, Text, Text) -> None
    if isinstance(content, str):
        text = content
    else:
        text = "".join(line + "\n" for line in content)
    with convert_os_errors("write", path):
        with io.open(
            path, mode, encoding=get_settings().encoding, newline=""
        ) as text_file:
            text_file.write(text)


def write(content, path):
    # type: (_Content, Text) -> None
    """Write to a text file, replacing its contents.

    Arguments:
        content (str or list): A string, written as is, or an iterable
            of lines, each written followed by a newline.
        path (str): Path to the file.

    """
    _write(content, path, "wt")


def append(content, path):
    # type: (_Content, Text) -> None
    """Append to a text file, creating it if required.

    Arguments:
        content (str or list): A string, written as is, or an iterable
            of lines, each written followed by a newline.
        path (str): Path to the file.

    """
    _write(content, path, "at")


def touch(path):
    # type: (Text) -> None
    """Create an empty file, or update the modified time of an existing one."""
    with convert_os_errors("touch", path):
        with io.open(path, "ab"):
            pass
        os.utime(path, None)


def mkdir(path):
    # type: (Text) -> Text
    """Create a directory and any missing parents.

    Returns:
        str: The absolute path of the directory.

    """
    with convert_os_errors("makedirs", path):
        os.makedirs(path, exist_ok=True)
    return os.path.abspath(path)


md = mkdir


def _copy_file(src, dst, force):
    # type: (Text, Text, bool) -> None
    if not force and os.path.exists(dst):
        raise AlreadyExists(dst)
    with convert_os_errors("copy", src):
        shutil.copy(src, dst)


def copy(src, dst, copy_options):
    # type: (Text, Text, CopyOptions) -> None
    """Copy a file or directory.

    A file is copied to ``dst``, or in to ``dst`` if it is a directory.
    A directory's files are copied in to ``dst``, which is created if
    needed; its sub-directories are only copied when recursing.

    Raises:
        replshell.errors.PathNotFound: If ``src`` does not exist.
        replshell.errors.AlreadyExists: If a target file exists and
            ``force`` isn't set.

    """
    if os.path.isfile(src):
        if os.path.isdir(dst):
            dst = os.path.join(dst, os.path.basename(src))
        _copy_file(src, dst, copy_options.force)
    elif os.path.isdir(src):
        src = os.path.abspath(src)
        dst = os.path.abspath(dst)
        if copy_options.recurse and (dst + os.sep).startswith(src + os.sep):
            raise OperationFailed(dst, msg="can't copy '{path}' in to itself")
        walker = Walker(max_depth=None if copy_options.recurse else 0)
        for dir_path, _dirs, files in walker.walk(src):
            target_dir = os.path.normpath(
                os.path.join(dst, os.path.relpath(dir_path, src))
            )
            with convert_os_errors("makedirs", target_dir):
                os.makedirs(target_dir, exist_ok=True)
            for file_path in files:
                target = os.path.join(target_dir, os.path.basename(file_path))
                _copy_file(file_path, target, copy_options.force)
    else:
        raise PathNotFound(src)


def cp(src, dst, *args, **kwargs):
    # type: (Text, Text, *Any, **Any) -> None
    """Copy files or directories.

    Options:
        ``RECURSE`` (``recurse=True``): copy sub-directories too.
        ``FORCE`` (``force=True``): overwrite existing files.

    """
    copy(src, dst, _options.copy_options(_scan_flags(args, kwargs)))


def remove(path, remove_options):
    # type: (Text, RemoveOptions) -> None
    """Remove a file or directory.

    Raises:
        replshell.errors.PathNotFound: If ``path`` doesn't exist, unless
            ``force`` is set.
        replshell.errors.DirectoryNotEmpty: If ``path`` is a directory
            with contents and ``recurse`` isn't set.

    """
    if os.path.islink(path) or os.path.isfile(path):
        with convert_os_errors("remove", path):
            os.remove(path)
    elif os.path.isdir(path):
        if remove_options.recurse:
            log.debug("removing tree %s", path)
            with convert_os_errors("rmtree", path):
                shutil.rmtree(path)
        else:
            with convert_os_errors("rmdir", path):
                os.rmdir(path)
    elif not remove_options.force:
        raise PathNotFound(path)


def rm(path, *args, **kwargs):
    # type: (Text, *Any, **Any) -> None
    """Remove files or directories.

    Options:
        ``RECURSE`` (``recurse=True``): remove a directory and its contents.
        ``FORCE`` (``force=True``): ignore a path that doesn't exist.

    """
    remove(path, _options.remove_options(_scan_flags(args, kwargs)))


def mv(src, dst, *args, **kwargs):
    # type: (Text, Text, *Any, **Any) -> None
    """Move or rename a file or directory.

    If ``dst`` is an existing directory, ``src`` is moved in to it.

    Options:
        ``FORCE`` (``force=True``): overwrite an existing file.

    Raises:
        replshell.errors.PathNotFound: If ``src`` doesn't exist.
        replshell.errors.AlreadyExists: If the target exists and is a
            directory, or ``force`` isn't set.

    """
    force = _options.copy_options(_scan_flags(args, kwargs)).force
    if not os.path.lexists(src):
        raise PathNotFound(src)
    target = dst
    if os.path.isdir(dst):
        target = os.path.join(dst, os.path.basename(os.path.normpath(src)))
    if os.path.lexists(target):
        if not force or os.path.isdir(target):
            raise AlreadyExists(target)
        with convert_os_errors("remove", target):
            os.remove(target)
    with convert_os_errors("move", src):
        shutil.move(src, target)


def start(path):
    # type: (Text) -> int
    """Open a file or directory with its default application."""
    if not os.path.exists(path):
        raise PathNotFound(path)
    return click.launch(os.path.abspath(path))
