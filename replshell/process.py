"""Run external commands.

By default a command's output is both echoed to the console as it is
produced and captured in to the returned `CommandOutput`::

    >>> files = run("git ls-files")
    >>> run("sort", stdin=files, silent=True)

Lines given as ``stdin`` are written to the command on a separate thread
while its output is read, so a command that produces a lot of output
before consuming all of its input can't deadlock.

"""

import logging
import os
import shlex
import subprocess
import threading
import typing

import click

from . import options as _options
from .config import get_settings
from .errors import ProcessStartFailure

if typing.TYPE_CHECKING:
    from typing import Any, Callable, IO, Iterable, List, Optional, Sequence, Text, Union

    from .config import Settings
    from .options import ExecOptions

    _Input = Optional[Union[Text, Iterable[Text]]]


log = logging.getLogger("replshell.process")

_EXEC_KEYWORDS = ("args", "silent", "capture")


class CommandOutput(list):
    """The captured output lines of a command.

    Attributes:
        command (list): The argv the command was started with.
        returncode (int): The exit status of the command. A non-zero
            status is *not* treated as an error.

    """

    def __init__(self, lines=(), command=None, returncode=None):
        super(CommandOutput, self).__init__(lines)
        self.command = command
        self.returncode = returncode

    @property
    def ok(self):
        # type: () -> bool
        """`True` if the command exited with a status of zero."""
        return self.returncode == 0


def resolve_command(command, args=()):
    # type: (Text, Sequence[Text]) -> List[Text]
    """Get the argv for a command.

    If extra ``args`` are given, ``command`` is taken to be the program
    name as is. Otherwise a command containing a space is split in to the
    program (everything before the first space) and its arguments. The
    arguments are tokenized with `shlex`, unless their quotes don't
    balance (e.g. ``"echo it's here"``), in which case they are split
    on whitespace.

    Example:
        >>> resolve_command("git log --oneline")
        ['git', 'log', '--oneline']
        >>> resolve_command("git", ["commit", "-m", "a message"])
        ['git', 'commit', '-m', 'a message']

    """
    if args:
        return [command] + list(args)
    command = command.strip()
    if " " in command:
        program, _, arguments = command.partition(" ")
        try:
            return [program] + shlex.split(arguments, posix=os.name != "nt")
        except ValueError:
            log.debug("unbalanced quotes in %r, splitting on whitespace", arguments)
            return [program] + arguments.split()
    return [command]


def _input_lines(stdin):
    # type: (_Input) -> List[Text]
    if stdin is None:
        return []
    if isinstance(stdin, str):
        return [stdin]
    return list(stdin)


class _Reader(threading.Thread):
    """Drain a process's stdout in to a list, echoing each line."""

    def __init__(self, stream, output, echo):
        # type: (IO[Text], List[Text], bool) -> None
        super(_Reader, self).__init__(name="replshell-stdout", daemon=True)
        self.stream = stream
        self.output = output
        self.echo = echo

    def run(self):
        with self.stream:
            for line in self.stream:
                line = line.rstrip("\r\n")
                self.output.append(line)
                if self.echo:
                    click.echo(line)


class _Writer(threading.Thread):
    """Write lines to a process's stdin, then close it."""

    def __init__(self, stream, lines):
        # type: (IO[Text], List[Text]) -> None
        super(_Writer, self).__init__(name="replshell-stdin", daemon=True)
        self.stream = stream
        self.lines = lines
        self.error = None  # type: Optional[BaseException]

    def run(self):
        try:
            for line in self.lines:
                self.stream.write(line + "\n")
        except BrokenPipeError:
            log.debug("process closed stdin before reading all input")
        except Exception as error:
            self.error = error
        finally:
            try:
                self.stream.close()
            except BrokenPipeError:
                log.debug("process closed stdin before input was flushed")


def run_process(command, exec_options, stdin=None, settings=None):
    # type: (Text, ExecOptions, _Input, Optional[Settings]) -> CommandOutput
    """Start a command, feed it ``stdin`` and wait for it to exit.

    Arguments:
        command (str): The command, optionally with its arguments.
        exec_options (~replshell.options.ExecOptions): Extra arguments
            and output handling.
        stdin (str or list, optional): A line, or lines, to write to the
            command's standard input.
        settings (~replshell.config.Settings, optional): Settings to use
            instead of the user's settings.

    Returns:
        CommandOutput: The captured lines, empty if output isn't captured.

    Raises:
        replshell.errors.ProcessStartFailure: If the program could not be
            found or started.

    """
    settings = settings or get_settings()
    argv = resolve_command(command, exec_options.args)
    lines = _input_lines(stdin)
    redirect_input = bool(lines)
    redirect_output = exec_options.capture
    echo = settings.echo and not exec_options.silent

    try:
        process = subprocess.Popen(
            argv,
            stdin=subprocess.PIPE if redirect_input else None,
            stdout=subprocess.PIPE if redirect_output else None,
            encoding=settings.encoding,
            errors=settings.errors,
        )
    except OSError as error:
        raise ProcessStartFailure(argv[0], exc=error) from error
    log.debug("started %r (pid %d)", argv, process.pid)

    output = CommandOutput(command=argv)
    reader = writer = None
    if redirect_output:
        reader = _Reader(process.stdout, output, echo)
        reader.start()
    if redirect_input:
        writer = _Writer(process.stdin, lines)
        writer.start()

    output.returncode = process.wait()
    if writer is not None:
        writer.join()
    if reader is not None:
        reader.join()
    log.debug("%r exited with status %d", argv, output.returncode)

    if writer is not None and writer.error is not None:
        raise writer.error
    return output


def run(command, *args, **kwargs):
    # type: (Text, *Any, **Any) -> CommandOutput
    """Run a command, returning its output lines.

    The command's arguments may be part of the command text, e.g.
    ``run("git log -n 3")``, or given separately, as extra strings,
    ``run("git", "log", "-n", "3")``, or as an option,
    ``run("git", Args(["log", "-n", "3"]))``. Separately given arguments
    are passed to the program verbatim.

    Options:
        ``SILENT`` (``silent=True``): don't echo output to the console.
        ``NO_CAPTURE`` (``capture=False``): leave the output attached to
        the console and return an empty list. Overrides ``SILENT``.
        ``Args(values)`` (``args=values``): extra arguments.

    Arguments:
        stdin (str or list): keyword only, a line or lines to pipe in to
            the command.

    """
    stdin = kwargs.pop("stdin", None)
    extra, options = _options.partition(args)
    if extra:
        options.insert(0, _options.Args(extra))
    options.extend(_options.from_keywords(kwargs, _EXEC_KEYWORDS))
    return run_process(command, _options.exec_options(options), stdin=stdin)


#: ``cmd`` is an alias of `run`.
cmd = run


def pipe(command, *args, **kwargs):
    # type: (Text, *Any, **Any) -> Callable[[_Input], CommandOutput]
    """Get a function that runs a command with its input as stdin.

    Example:
        >>> to_upper = pipe("tr a-z A-Z", silent=True)
        >>> to_upper(cat("notes.txt"))

    """

    def _pipe(lines):
        # type: (_Input) -> CommandOutput
        return run(command, *args, stdin=lines, **kwargs)

    return _pipe
