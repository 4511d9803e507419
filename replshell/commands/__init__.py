from .rsh   import rsh
from .help  import help
from .ls    import ls
from .cat   import cat
from .cp    import cp
from .mv    import mv
from .rm    import rm
from .mkdir import mkdir
from .touch import touch
from .run   import run

rsh.add_command(help )
rsh.add_command(ls   )
rsh.add_command(cat  )
rsh.add_command(cp   )
rsh.add_command(mv   )
rsh.add_command(rm   )
rsh.add_command(mkdir)
rsh.add_command(touch)
rsh.add_command(run  )

__all__ = ["rsh"]
