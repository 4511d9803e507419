import click

from .. import fileops
from ._tools import report_errors


@click.command()
@click.argument('src')
@click.argument('dst')
@click.option('--force', '-f', is_flag=True, help='overwrite an existing destination file')
def mv(src, dst, force):
    '''move or rename a file or dir.

    \b
    example:
        mv tox.ini tmp.ini
        mv tox.ini dir/
    '''
    with report_errors():
        fileops.mv(src, dst, force=force)
