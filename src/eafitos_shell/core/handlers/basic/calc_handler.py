# src/eafitos_shell/core/handlers/basic/calc_handler.py
import operator
from typing import Callable, Dict, List

from eafitos_shell.core.context.shell_context import ShellContext

COMMAND_ORDER = 4

calc_help_text = "  calc <n1> <op> <n2>    Simple arithmetic (+ - * x /)."

USAGE = """
Usage: calc <n1> <op> <n2>
Example: calc 5 + 3
""".strip()

OPERATORS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "x": operator.mul,
    "/": operator.truediv,
}


def handle_calc(args: List[str], _ctx: ShellContext) -> int:
    """
    Handles the 'calc' command.

    Applies one binary operator to two numbers and prints the result with
    two decimals.

    Args:
        args (List[str]): ['calc', n1, op, n2].
        _ctx (ShellContext): The shell context (unused in this handler).

    Returns:
        int: 0 on success, 1 on a usage or arithmetic error.
    """
    if len(args) != 4:
        print(USAGE)
        return 1

    _, left_raw, op, right_raw = args
    try:
        left, right = float(left_raw), float(right_raw)
    except ValueError:
        print(f"Error: '{left_raw}' and '{right_raw}' must both be numbers.")
        return 1

    func = OPERATORS.get(op)
    if func is None:
        print(f"Error: unsupported operator '{op}'. Use one of: {' '.join(OPERATORS)}")
        return 1

    try:
        result = func(left, right)
    except ZeroDivisionError:
        print("Error: division by zero.")
        return 1

    print(f"Result: {result:.2f}")
    return 0
