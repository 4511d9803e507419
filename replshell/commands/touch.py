import click

from .. import fileops
from ._tools import report_errors


@click.command()
@click.argument('paths', nargs=-1)
def touch(paths):
    '''create empty files or update their modified time.'''
    for path in paths:
        with report_errors():
            fileops.touch(path)
