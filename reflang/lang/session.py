"""Session control for reflang. A Session owns one program and runs it under an ErrorHandler. There is no source file
to read: programs arrive already built as syntax trees (see reflang.lang.demos).
"""

import logging

from reflang.pure.executor import Executor
from reflang.pure.render import render

logger = logging.getLogger(__name__)


class Session:
    """Governs a reflang run: rendering, execution and collected output of one program."""

    def __init__(self, error_handler, program, name="<program>"):
        self.error_handler = error_handler
        self.program = program
        self.name = name  # used for log messages

        self.results = []  # Output lines, in execution order

    def render(self):
        return render(self.program)

    def emit(self, line):
        """Prints line immediately, so output produced before an error is not lost, and records it in results."""
        self.results.append(line)
        print(line)

    def run(self):
        """Runs the program body in an empty environment. Will raise any errors that are encountered."""
        self.results = []
        logger.debug("running %s", self.name)
        Executor(self.program, self.emit, self.error_handler).run()
        logger.debug("%s finished with %d output lines", self.name, len(self.results))
        return self.results

    def demonstrate(self):
        """Prints the program, runs it, and reports completion."""
        print("Complete program is:")
        print(self.render(), end="")

        print("Running in an empty environment:")
        self.run()

        print("Done!")
