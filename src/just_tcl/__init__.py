"""just-tcl - a small Tcl-like command language interpreter.

Example:
    from just_tcl import Tcl

    tcl = Tcl()
    tcl.run("proc square {x} { * $x $x }; puts [square 5]").stdout  # "25\\n"
"""

from .interpreter import ErrorKind, Result, Signal
from .tcl import Tcl
from .types import Builtin, Command, ExecResult

__version__ = "0.1.0"

__all__ = [
    "Builtin",
    "Command",
    "ErrorKind",
    "ExecResult",
    "Result",
    "Signal",
    "Tcl",
    "__version__",
]
