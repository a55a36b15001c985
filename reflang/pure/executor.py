"""Statement execution and procedure calls.

execute returns the environment in effect after a statement; Seq is the only statement that passes that result on.
Every other scope-introducing construct (loop bodies, if branches, procedure bodies) runs against an environment and
then goes back to the handle it started with, which is how declarations inside them are discarded.

A procedure body runs in an environment built only from its formals: caller locals are invisible unless passed by
reference. The program's procedure table stays reachable, so procedures may call each other and themselves.
"""

import logging

from reflang.lang.error import ArityMismatch, GenericException, UnknownProcedure
from reflang.pure.environment import Environment
from reflang.pure.evaluator import evaluate, evaluate_reference
from reflang.pure.render import Renderer
from reflang.pure.syntax import Assign, ByRef, ByValue, Call, If, Print, Seq, VarDecl, While

logger = logging.getLogger(__name__)


def bind(formal, caller_env, actual, rest):
    """Binds one formal to one actual. actual is evaluated in caller_env; the new frame extends rest, which holds the
    formals bound so far in the same call.
    """
    if isinstance(formal, ByRef):
        return rest.extend_reference(formal.name, evaluate_reference(actual, caller_env))
    elif isinstance(formal, ByValue):
        return rest.extend_value(formal.name, evaluate(actual, caller_env))
    raise GenericException("cannot bind formal '{}'", repr(formal), internal=True)


class Executor:
    """Runs statements of one program. Print output goes to emit, one line per value, as soon as it is produced."""
    OUTPUT_PREFIX = "Output: "

    def __init__(self, program, emit=print, error_handler=None):
        self.program = program
        self.emit = emit
        self.error_handler = error_handler
        self.renderer = Renderer()

    def run(self, env=None):
        """Executes the program body, by default in an empty environment. Returns the final environment."""
        if env is None:
            env = Environment()
        return self.execute(self.program.body, env)

    def execute(self, stmt, env):
        # seq() nests to the right, so follow the second halves in a loop
        while isinstance(stmt, Seq):
            env = self.execute(stmt.first, env)
            stmt = stmt.second

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("exec %s  [%s]", self.renderer.lines(stmt)[0].strip(), ", ".join(env.names()))

        if isinstance(stmt, Assign):
            env.lookup(stmt.name).set(evaluate(stmt.expr, env))
            return env

        elif isinstance(stmt, VarDecl):
            return env.extend_value(stmt.name, evaluate(stmt.expr, env))

        elif isinstance(stmt, While):
            while evaluate(stmt.test, env).as_bool():
                self.execute(stmt.body, env)
            return env

        elif isinstance(stmt, If):
            if evaluate(stmt.test, env).as_bool():
                self.execute(stmt.then, env)
            else:
                self.execute(stmt.orelse, env)
            return env

        elif isinstance(stmt, Print):
            self.emit(Executor.OUTPUT_PREFIX + str(evaluate(stmt.expr, env).as_int()))
            return env

        elif isinstance(stmt, Call):
            self.call(env, stmt.name, stmt.actuals)
            return env

        raise GenericException("cannot execute '{}'", repr(stmt), internal=True)

    def call(self, env, name, actuals):
        """Calls procedure name with actuals evaluated in the caller's env. Only writes made through reference
        parameters are visible to the caller afterwards.
        """
        procedure = self.program.find(name)
        if procedure is None:
            raise UnknownProcedure(name)
        if len(actuals) != len(procedure.formals):
            raise ArityMismatch(name, len(procedure.formals), len(actuals))

        callee_env = env.new_frame()
        for formal, actual in zip(procedure.formals, actuals):
            callee_env = bind(formal, env, actual, callee_env)

        logger.debug("enter %s with [%s]", name, ", ".join(callee_env.names()))
        if self.error_handler is not None:
            self.error_handler.enter_call(name, self.renderer.call(Call(name, actuals)))

        self.execute(procedure.body, callee_env)

        if self.error_handler is not None:
            self.error_handler.exit_call()
        logger.debug("leave %s", name)


def execute(stmt, program, env, emit=print):
    return Executor(program, emit).execute(stmt, env)


def call(program, caller_env, name, actuals, emit=print):
    Executor(program, emit).call(caller_env, name, actuals)


def run(program, emit=print):
    """Runs program in an empty environment. Errors propagate to the caller."""
    return Executor(program, emit).run()
