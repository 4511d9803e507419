import logging

import click

from ..fileops import cd


@click.group(invoke_without_command=True)
@click.option('--cwd', '-C', default=None, type=click.Path(exists=True, file_okay=False),
              help='change to this directory first')
@click.option('--verbose', '-v', count=True, help='log debug messages')
@click.pass_context
def rsh(ctx, cwd, verbose):
    '''replshell command line tool

    \b
    example:
        rsh ls -r -d 1
        rsh ls "**/*.py" -x "build/"
        rsh -C /tmp/project rm -r build
        rsh run git status
    '''
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    if cwd:
        cd(cwd)
    if not ctx.invoked_subcommand:
        click.echo(ctx.get_help())
