"""Pretty printer for reflang syntax trees.

Expressions are fully parenthesised and statements are rendered one per line in a C-like syntax:

```
void inc(ref x) {
  x = (x + 1);
}
    var y = 5;
    inc(y);
    while ((y < 10)) {
      print y;
      y = (y + 1);
    }
```

Each nested block is indented by Renderer.STEP spaces. The program body starts at Renderer.MARGIN.
"""

from reflang.lang.error import GenericException
from reflang.pure.syntax import Assign, BinaryOp, ByRef, Call, If, Int, Print, Seq, Var, VarDecl, While


class Renderer:
    STEP = 2
    MARGIN = 4

    def show(self, expr):
        """Single-line rendering of an expression."""
        if isinstance(expr, Var):
            return expr.name
        elif isinstance(expr, Int):
            return str(expr.num)
        elif isinstance(expr, BinaryOp):
            return f"({self.show(expr.left)} {expr.SYMBOL} {self.show(expr.right)})"
        raise GenericException("cannot render '{}'", repr(expr), internal=True)

    def call(self, stmt):
        actuals = ", ".join(self.show(actual) for actual in stmt.actuals)
        return f"{stmt.name}({actuals});"

    def formal(self, formal):
        return f"ref {formal.name}" if isinstance(formal, ByRef) else formal.name

    def lines(self, stmt, indent=0):
        """List of rendered lines for stmt, each already indented."""
        pad = " " * indent

        if isinstance(stmt, Seq):
            lines = []
            while isinstance(stmt, Seq):
                lines += self.lines(stmt.first, indent)
                stmt = stmt.second
            return lines + self.lines(stmt, indent)
        elif isinstance(stmt, VarDecl):
            return [f"{pad}var {stmt.name} = {self.show(stmt.expr)};"]
        elif isinstance(stmt, Assign):
            return [f"{pad}{stmt.name} = {self.show(stmt.expr)};"]
        elif isinstance(stmt, Print):
            return [f"{pad}print {self.show(stmt.expr)};"]
        elif isinstance(stmt, Call):
            return [pad + self.call(stmt)]
        elif isinstance(stmt, While):
            return ([f"{pad}while ({self.show(stmt.test)}) {{"]
                    + self.lines(stmt.body, indent + Renderer.STEP)
                    + [f"{pad}}}"])
        elif isinstance(stmt, If):
            return ([f"{pad}if ({self.show(stmt.test)}) {{"]
                    + self.lines(stmt.then, indent + Renderer.STEP)
                    + [f"{pad}}} else {{"]
                    + self.lines(stmt.orelse, indent + Renderer.STEP)
                    + [f"{pad}}}"])
        raise GenericException("cannot render '{}'", repr(stmt), internal=True)

    def procedure(self, procedure):
        formals = ", ".join(self.formal(formal) for formal in procedure.formals)
        return ([f"void {procedure.name}({formals}) {{"]
                + self.lines(procedure.body, Renderer.STEP)
                + ["}"])

    def program(self, program):
        lines = []
        for procedure in program.procedures:
            lines += self.procedure(procedure)
        lines += self.lines(program.body, Renderer.MARGIN)
        return "\n".join(lines) + "\n"


def show(expr):
    return Renderer().show(expr)


def render_stmt(stmt, indent=0):
    return "\n".join(Renderer().lines(stmt, indent))


def render(program):
    """Renders procedures, then the body at the program margin, followed by a blank line."""
    return Renderer().program(program) + "\n"
