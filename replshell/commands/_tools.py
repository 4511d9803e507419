import os
from contextlib import contextmanager

import click

from ..errors import ShellError


@contextmanager
def report_errors():
    """Report replshell errors as a click error message and exit status."""
    try:
        yield
    except ShellError as error:
        raise click.ClickException(str(error))


def display_path(path):
    """Show a path relative to the working directory when it is beneath it."""
    relative = os.path.relpath(path)
    return path if relative.startswith(os.pardir) else relative
