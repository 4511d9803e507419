from .commands import rsh

rsh(prog_name="rsh")
