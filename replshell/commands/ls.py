import click

from .. import walk
from ._tools import display_path, report_errors


@click.command()
@click.argument('paths', nargs=-1, required=False)
@click.option('--recurse', '-r', is_flag=True, help='list sub-directories too')
@click.option('--depth', '-d', type=click.IntRange(min=0), default=None,
              help='recurse at most this many levels')
@click.option('--dirs', '-D', is_flag=True, help='only list directories')
@click.option('--files', '-F', is_flag=True, help='only list files')
@click.option('--pattern', '-p', multiple=True, help='include files matching a glob')
@click.option('--exclude', '-x', multiple=True, help='skip paths matching a glob')
def ls(paths, recurse, depth, dirs, files, pattern, exclude):
    '''list files and dirs.

    \b
    example:
        ls
        ls -r -d 1 src
        ls "**/*.py" -x "build/"
    '''
    paths = paths or ['.']
    for path in paths:
        with report_errors():
            names = walk.ls(path, recurse=recurse, depth=depth, dirs=dirs, files=files,
                            patterns=pattern, excludes=exclude)
        if len(paths) > 1:
            click.echo('%s:' % path)
        for name in names:
            click.echo(display_path(name))
