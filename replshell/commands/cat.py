import click

from .. import fileops
from ._tools import report_errors


@click.command()
@click.argument('paths', nargs=-1)
def cat(paths):
    '''read files and print their lines.

    \b
    example:
        cat a.txt
        cat a.ini a.txt
    '''
    for path in paths:
        with report_errors():
            lines = fileops.cat(path)
        for line in lines:
            click.echo(line)
