import click

from .. import fileops
from ._tools import report_errors


@click.command()
@click.argument('src')
@click.argument('dst')
@click.option('--recursive', '-r', is_flag=True, help='copy sub-directories too')
@click.option('--force', '-f', is_flag=True, help='overwrite existing files')
def cp(src, dst, recursive, force):
    '''copy a file or dir.

    \b
    example:
        cp a.txt b.txt
        cp -r dir1 dir2
    '''
    with report_errors():
        fileops.cp(src, dst, recurse=recursive, force=force)
