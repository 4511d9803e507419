import click

from .. import fileops
from ._tools import report_errors


@click.command()
@click.argument('paths', nargs=-1)
def mkdir(paths):
    '''create folders, and their parents as needed.

    \b
    example:
        mkdir dir1 dir2
        mkdir dir1/sub/dir
    '''
    for path in paths:
        with report_errors():
            fileops.mkdir(path)
