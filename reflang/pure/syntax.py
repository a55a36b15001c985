"""Abstract syntax of reflang. There is no concrete syntax reader: programs are built directly from these nodes.

```
<expr>    ::= Var(name) | Int(num)
            | Plus(<expr>, <expr>) | Minus(<expr>, <expr>) | Mult(<expr>, <expr>)     ; integer results
            | LessThan(<expr>, <expr>) | Equals(<expr>, <expr>)                       ; boolean results

<stmt>    ::= Seq(<stmt>, <stmt>)               ; runs first, threads the resulting environment into second
            | Assign(name, <expr>)              ; mutates an existing binding
            | VarDecl(name, <expr>)             ; extends the environment with a new binding
            | While(<expr>, <stmt>)
            | If(<expr>, <stmt>, <stmt>)
            | Print(<expr>)
            | Call(name, <expr>*)

<formal>  ::= ByValue(name) | ByRef(name)
<proc>    ::= Procedure(name, <formal>*, <stmt>)
<program> ::= Program(<proc>*, <stmt>)
```

Every node is an immutable dataclass. The set of node classes is closed: the evaluator, executor and renderer each
dispatch over all of them and treat anything else as an internal error.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from reflang.lang.error import GenericException


class Expr:
    """Superclass of expression nodes."""


class Stmt:
    """Superclass of statement nodes."""


@dataclass(frozen=True)
class Var(Expr):
    name: str


@dataclass(frozen=True)
class Int(Expr):
    num: int

    def __post_init__(self):
        if isinstance(self.num, bool) or not isinstance(self.num, int):
            raise GenericException("integer literal expected, got {}", repr(self.num), internal=True)


@dataclass(frozen=True)
class BinaryOp(Expr):
    """Expression with two operands. SYMBOL is used when rendering."""
    left: Expr
    right: Expr
    SYMBOL = "?"


class Plus(BinaryOp):
    SYMBOL = "+"


class Minus(BinaryOp):
    SYMBOL = "-"


class Mult(BinaryOp):
    SYMBOL = "*"


class LessThan(BinaryOp):
    SYMBOL = "<"


class Equals(BinaryOp):
    SYMBOL = "=="


@dataclass(frozen=True)
class Seq(Stmt):
    first: Stmt
    second: Stmt


@dataclass(frozen=True)
class Assign(Stmt):
    name: str
    expr: Expr


@dataclass(frozen=True)
class VarDecl(Stmt):
    name: str
    expr: Expr


@dataclass(frozen=True)
class While(Stmt):
    test: Expr
    body: Stmt


@dataclass(frozen=True)
class If(Stmt):
    test: Expr
    then: Stmt
    orelse: Stmt


@dataclass(frozen=True)
class Print(Stmt):
    expr: Expr


@dataclass(frozen=True)
class Call(Stmt):
    name: str
    actuals: Tuple[Expr, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "actuals", tuple(self.actuals))


@dataclass(frozen=True)
class Formal:
    """Formal parameter. Subclasses decide how an actual argument is bound."""
    name: str


class ByValue(Formal):
    pass


class ByRef(Formal):
    pass


@dataclass(frozen=True)
class Procedure:
    name: str
    formals: Tuple[Formal, ...]
    body: Stmt

    def __post_init__(self):
        object.__setattr__(self, "formals", tuple(self.formals))


@dataclass(frozen=True)
class Program:
    procedures: Tuple[Procedure, ...]
    body: Stmt

    def __post_init__(self):
        object.__setattr__(self, "procedures", tuple(self.procedures))

    @classmethod
    def of(cls, body, *procedures):
        """Program with body and, optionally, some procedures."""
        return cls(procedures, body)

    def find(self, name) -> Optional[Procedure]:
        """First procedure called name, or None. No overloading: later procedures with the same name are unreachable."""
        for procedure in self.procedures:
            if procedure.name == name:
                return procedure
        return None


def seq(*stmts):
    """Folds stmts into right-nested Seq nodes: seq(a, b, c) == Seq(a, Seq(b, c))."""
    if not stmts:
        raise GenericException("seq needs at least one statement", internal=True)

    *init, result = stmts
    for stmt in reversed(init):
        result = Seq(stmt, result)
    return result
