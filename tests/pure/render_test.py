import unittest

from reflang.lang.error import GenericException
from reflang.pure.render import Renderer, render, render_stmt, show
from reflang.pure.syntax import (Assign, ByRef, ByValue, Call, Equals, Expr, If, Int, LessThan, Minus, Mult, Plus,
                                 Print, Procedure, Program, Var, VarDecl, While, seq)


class ShowTestCase(unittest.TestCase):

    def test_show(self):
        cases = [
            (Var("x"), "x"),
            (Int(-2), "-2"),
            (Plus(Var("x"), Int(1)), "(x + 1)"),
            (Minus(Int(3), Mult(Var("a"), Var("b"))), "(3 - (a * b))"),
            (LessThan(Var("i"), Int(3)), "(i < 3)"),
            (Equals(Plus(Int(1), Int(1)), Int(2)), "((1 + 1) == 2)"),
        ]
        for case, result in cases:
            self.assertEqual(result, show(case), case)

    def test_unknown_node(self):
        self.assertRaises(GenericException, show, Expr())


class RenderStmtTestCase(unittest.TestCase):

    def test_simple(self):
        cases = [
            (VarDecl("x", Int(5)), "var x = 5;"),
            (Assign("x", Plus(Var("x"), Int(1))), "x = (x + 1);"),
            (Print(Var("x")), "print x;"),
            (Call("inc", [Var("y")]), "inc(y);"),
            (Call("swap", [Var("a"), Int(2)]), "swap(a, 2);"),
            (Call("nothing", []), "nothing();"),
        ]
        for case, result in cases:
            self.assertEqual(result, render_stmt(case), case)

    def test_indent(self):
        self.assertEqual("   print 1;", render_stmt(Print(Int(1)), 3))

    def test_blocks(self):
        stmt = seq(
            VarDecl("i", Int(0)),
            While(LessThan(Var("i"), Int(3)),
                  seq(Assign("i", Plus(Var("i"), Int(1))),
                      If(Equals(Var("i"), Int(2)), Print(Var("i")), Print(Int(0))))),
        )
        expected = "\n".join([
            "var i = 0;",
            "while ((i < 3)) {",
            "  i = (i + 1);",
            "  if ((i == 2)) {",
            "    print i;",
            "  } else {",
            "    print 0;",
            "  }",
            "}",
        ])
        self.assertEqual(expected, render_stmt(stmt))

    def test_long_sequence(self):
        lines = render_stmt(seq(*[Print(Int(i)) for i in range(2500)])).splitlines()

        self.assertEqual(2500, len(lines))
        self.assertEqual("print 2499;", lines[-1])


class RenderProgramTestCase(unittest.TestCase):

    def test_body_only(self):
        program = Program.of(seq(VarDecl("x", Int(5)), Print(Var("x"))))
        self.assertEqual("    var x = 5;\n    print x;\n\n", render(program))

    def test_procedures(self):
        inc = Procedure("inc", [ByRef("x"), ByValue("n")], Assign("x", Plus(Var("x"), Var("n"))))
        program = Program.of(Call("inc", [Var("y"), Int(1)]), inc)

        expected = "\n".join([
            "void inc(ref x, n) {",
            "  x = (x + n);",
            "}",
            "    inc(y, 1);",
            "",
            "",
        ])
        self.assertEqual(expected, render(program))

    def test_step(self):
        self.assertEqual(2, Renderer.STEP)
        self.assertEqual(4, Renderer.MARGIN)

    def test_long_body(self):
        text = render(Program.of(seq(*[VarDecl("x", Int(i)) for i in range(2500)])))

        self.assertEqual(2501, len(text.splitlines()))
        self.assertTrue(text.endswith("    var x = 2499;\n\n"))


if __name__ == '__main__':
    unittest.main()
