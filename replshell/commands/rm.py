import click

from .. import fileops
from ._tools import report_errors


@click.command()
@click.argument('paths', nargs=-1)
@click.option('--recursive', '-r', is_flag=True, help='remove directories and their contents recursively')
@click.option('--force', '-f', is_flag=True, help='ignore nonexistent files')
def rm(paths, recursive, force):
    '''delete files and dirs.

    \b
    example:
        rm file1.txt pic.img
        rm -rf dir1/ dir2/
    '''
    for path in paths:
        with report_errors():
            fileops.rm(path, recurse=recursive, force=force)
