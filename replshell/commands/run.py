import click

from .. import process
from ._tools import report_errors


@click.command(context_settings={'ignore_unknown_options': True,
                                 'allow_interspersed_args': False})
@click.argument('command')
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.option('--stdin', '-i', 'stdin', type=click.File('r'), default=None,
              help='file whose lines are piped in to the command')
@click.option('--no-capture', is_flag=True, help='leave output attached to the terminal')
@click.pass_context
def run(ctx, command, args, stdin, no_capture):
    '''run a command, exiting with its exit status.

    \b
    example:
        run git status
        run -i names.txt sort
    '''
    lines = None
    if stdin is not None:
        lines = [line.rstrip('\r\n') for line in stdin]
    with report_errors():
        output = process.run(command, *args, stdin=lines, capture=not no_capture)
    ctx.exit(output.returncode)
