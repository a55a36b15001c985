"""Ready-built reflang programs, runnable from the command line by name. Some of them end in an error on purpose, to
show the diagnostics.
"""

from reflang.pure.syntax import (Assign, ByRef, ByValue, Call, Equals, If, Int, LessThan, Minus, Mult, Plus, Print,
                                 Procedure, Program, Var, VarDecl, While, seq)

INC = Procedure("inc", [ByRef("x")], Assign("x", Plus(Var("x"), Int(1))))


def nest():
    """Declaration inside an if branch shadows i only within that branch. Prints 1, then 0."""
    return Program.of(seq(
        VarDecl("i", Int(0)),
        If(Equals(Var("i"), Int(0)),
           seq(VarDecl("i", Int(1)),
               Print(Var("i"))),
           Assign("i", Int(3))),
        Print(Var("i")),
    ))


def loop():
    """Prints 1, 2, 3."""
    return Program.of(seq(
        VarDecl("i", Int(0)),
        While(LessThan(Var("i"), Int(3)),
              seq(Assign("i", Plus(Var("i"), Int(1))),
                  Print(Var("i")))),
    ))


def inc():
    """By-reference parameter: y goes from 5 to 6."""
    return Program.of(seq(
        VarDecl("y", Int(5)),
        Call("inc", [Var("y")]),
        Print(Var("y")),
    ), INC)


def inert():
    """Passing a non-variable by reference binds a temporary: y stays 5."""
    return Program.of(seq(
        VarDecl("y", Int(5)),
        Call("inc", [Int(5)]),
        Call("inc", [Plus(Var("y"), Int(0))]),
        Print(Var("y")),
    ), INC)


def swap():
    """Two reference parameters. Prints 2, then 1."""
    swap_proc = Procedure("swap", [ByRef("a"), ByRef("b")], seq(
        VarDecl("t", Var("a")),
        Assign("a", Var("b")),
        Assign("b", Var("t")),
    ))
    return Program.of(seq(
        VarDecl("x", Int(1)),
        VarDecl("y", Int(2)),
        Call("swap", [Var("x"), Var("y")]),
        Print(Var("x")),
        Print(Var("y")),
    ), swap_proc)


def factorial():
    """n is passed by value and counted down inside the procedure; the caller's k is untouched. Prints 120, then 5."""
    fact = Procedure("fact", [ByValue("n"), ByRef("result")], seq(
        Assign("result", Int(1)),
        While(LessThan(Int(0), Var("n")),
              seq(Assign("result", Mult(Var("result"), Var("n"))),
                  Assign("n", Minus(Var("n"), Int(1))))),
    ))
    return Program.of(seq(
        VarDecl("r", Int(0)),
        VarDecl("k", Int(5)),
        Call("fact", [Var("k"), Var("r")]),
        Print(Var("r")),
        Print(Var("k")),
    ), fact)


def countdown():
    """A procedure calling itself through the program's procedure table. Prints 3, 2, 1, 0."""
    proc = Procedure("countdown", [ByValue("n")],
                     If(LessThan(Int(0), Var("n")),
                        seq(Print(Var("n")),
                            Call("countdown", [Minus(Var("n"), Int(1))])),
                        Print(Int(0))))
    return Program.of(Call("countdown", [Int(3)]), proc)


def isolation():
    """Procedure bodies cannot see caller locals: fails with an unbound variable inside peek."""
    peek = Procedure("peek", [], Print(Var("y")))
    return Program.of(seq(
        VarDecl("y", Int(1)),
        Call("peek", []),
    ), peek)


def arity():
    """Calls a two-parameter procedure with one argument."""
    pair = Procedure("pair", [ByValue("a"), ByValue("b")], Print(Plus(Var("a"), Var("b"))))
    return Program.of(Call("pair", [Int(1)]), pair)


def unbound():
    """Assignment never introduces a binding."""
    return Program.of(Assign("y", Int(1)))


def types():
    """Prints 1, then fails subtracting a boolean from an integer."""
    return Program.of(seq(
        Print(Int(1)),
        Print(Minus(Int(1), Equals(Int(1), Int(1)))),
    ))


def missing():
    """Call to a procedure that is not in the program."""
    return Program.of(Call("nowhere", [Int(1)]))


DEMOS = {
    "nest": nest,
    "loop": loop,
    "inc": inc,
    "inert": inert,
    "swap": swap,
    "factorial": factorial,
    "countdown": countdown,
    "isolation": isolation,
    "arity": arity,
    "unbound": unbound,
    "types": types,
    "missing": missing,
}
