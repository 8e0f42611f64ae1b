"""Built-in commands for just-tcl.

Built-ins have direct access to the InterpreterContext so they can read
and write variables, register procedures and evaluate nested scripts.
"""

from ...types import Builtin, BuiltinHandler
from ..control_flow import execute_if, execute_while
from ..registry import CommandRegistry
from .control import handle_break, handle_continue, handle_return
from .math import OPERATORS, make_math_handler
from .proc import Procedure, handle_proc
from .variables import handle_puts, handle_set

BUILTINS: dict[str, BuiltinHandler] = {
    **{name: make_math_handler(name) for name in OPERATORS},
    "set": handle_set,
    "puts": handle_puts,
    "if": execute_if,
    "while": execute_while,
    "proc": handle_proc,
    "return": handle_return,
    "break": handle_break,
    "continue": handle_continue,
}


def register_builtins(registry: CommandRegistry) -> CommandRegistry:
    """Register every built-in command in registry."""
    for name, handler in BUILTINS.items():
        registry.register(name, Builtin(name, handler))
    return registry


__all__ = [
    "BUILTINS",
    "Procedure",
    "register_builtins",
]
