"""Error handling for reflang. Every runtime error is a GenericException raised where it is detected and left to
propagate: nothing in `pure` catches it. ErrorHandler is the only place that turns an error into a diagnostic and a
non-zero exit. If another type of error makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import logging
import sys

from termcolor import colored

logger = logging.getLogger(__name__)


class GenericException(Exception):
    """Templates an error message so that it can be used to throw a reflang error. exprs are substituted into msg
    (bolded) in order.
    """

    def __init__(self, msg, exprs=None, internal=False):
        if exprs is None:
            exprs = []
        if isinstance(exprs, str):
            exprs = [exprs]

        self.exprs = [str(expr) for expr in exprs]
        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in self.exprs))
        self.internal = internal

        super().__init__(msg.format(*self.exprs))


class ReflangError(GenericException):
    """Superclass of the four runtime error kinds. All of them are fatal."""


class UnboundVariable(ReflangError):
    """Lookup (or assignment) of a name that has no binding in the environment chain."""

    def __init__(self, name):
        self.name = name
        super().__init__("variable '{}' is not bound", name)


class TypeMismatch(ReflangError):
    """A boolean used where an integer is required, or vice versa."""

    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__("{} value expected, got {}", (expected, got))


class UnknownProcedure(ReflangError):

    def __init__(self, name):
        self.name = name
        super().__init__("cannot find procedure '{}'", name)


class ArityMismatch(ReflangError):

    def __init__(self, name, expected, actual):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__("wrong number of arguments for '{}': expected {}, got {}", (name, expected, actual))


class ErrorHandler:
    """Context manager that converts reflang errors (and stray Python errors) into a single diagnostic line."""
    ERROR = "red"
    ABORT = "ABORT: "

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = []  # list of (procedure name, rendered call), outermost first

    def enter_call(self, name, line):
        """Registers a procedure activation in traceback. Should be called before the body is executed."""
        self.traceback.append((name, line))

    def exit_call(self):
        """Removes the innermost activation from traceback. Should be called after the body returns normally."""
        self.traceback.pop()

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException, and self.traceback holds the
        procedure calls that were active when it was raised. Prints exactly one line.
        """
        error_msg = colored(ErrorHandler.ABORT, ErrorHandler.ERROR, attrs=["bold"])
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])
        error_msg += error.msg

        if self.traceback:
            error_msg += " (in " + " > ".join(name for name, __ in self.traceback) + ")"
            for name, line in self.traceback:
                logger.debug("active call %s: %s", name, line)
        print(error_msg)

        self.traceback = []  # if error occurred, reset traceback (no need if error is fatal)
        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("maximum call depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
