"""Expression evaluation. Evaluation only reads the environment: it never extends or writes to it. The one exception
is evaluate_reference, which may make a temporary slot that no environment binds.
"""

import logging

from reflang.lang.error import GenericException
from reflang.pure.syntax import Equals, Int, LessThan, Minus, Mult, Plus, Var
from reflang.pure.value import BoolValue, IntValue

logger = logging.getLogger(__name__)

ARITHMETIC = {
    Plus: lambda left, right: left + right,
    Minus: lambda left, right: left - right,
    Mult: lambda left, right: left * right,
}

COMPARISON = {
    LessThan: lambda left, right: left < right,
    Equals: lambda left, right: left == right,
}


def evaluate(expr, env):
    """Evaluates expr against env and returns a Value. Operands of binary nodes are evaluated left, then right, and
    must both be integers.
    """
    if isinstance(expr, Var):
        return env.lookup(expr.name).get()

    elif isinstance(expr, Int):
        return IntValue(expr.num)

    elif type(expr) in ARITHMETIC:
        left = evaluate(expr.left, env).as_int()
        right = evaluate(expr.right, env).as_int()
        return IntValue(ARITHMETIC[type(expr)](left, right))

    elif type(expr) in COMPARISON:
        left = evaluate(expr.left, env).as_int()
        right = evaluate(expr.right, env).as_int()
        return BoolValue(COMPARISON[type(expr)](left, right))

    raise GenericException("cannot evaluate '{}'", repr(expr), internal=True)


def evaluate_reference(expr, env):
    """Evaluates expr to a Cell. A variable gives the cell it is bound to, so writes through the result are seen by
    whoever else holds that cell. Anything else has no cell to alias: its value goes into a fresh, unbound cell, and
    writes to it are never observed by the caller.
    """
    if isinstance(expr, Var):
        return env.lookup(expr.name)

    cell = env.fresh(evaluate(expr, env))
    logger.debug("temporary %r for by-reference %r", cell.slot, expr)
    return cell
