from dataclasses import FrozenInstanceError
import unittest

from arith.untyped.term import FalseTerm, IfElse, IsZero, Pred, Succ, TrueTerm, Zero


class TermTestCase(unittest.TestCase):

    def test_is_numeric_value(self):
        should_fail = [
            TrueTerm(), FalseTerm(), Succ(TrueTerm()), Succ(Succ(FalseTerm())), Pred(Zero()), IsZero(Zero()),
            Succ(Pred(Zero())), IfElse(TrueTerm(), Zero(), Zero())
        ]
        for case in should_fail:
            self.assertFalse(case.is_numeric_value(), case)

        should_pass = [Zero(), Succ(Zero()), Succ(Succ(Succ(Zero())))]
        for case in should_pass:
            self.assertTrue(case.is_numeric_value(), case)
            self.assertTrue(case.is_value(), case)
            self.assertFalse(case.is_bool_value(), case)

    def test_is_bool_value(self):
        should_fail = [Zero(), Succ(Zero()), IsZero(Zero()), IfElse(TrueTerm(), TrueTerm(), FalseTerm())]
        for case in should_fail:
            self.assertFalse(case.is_bool_value(), case)

        should_pass = [TrueTerm(), FalseTerm()]
        for case in should_pass:
            self.assertTrue(case.is_bool_value(), case)
            self.assertTrue(case.is_value(), case)
            self.assertFalse(case.is_numeric_value(), case)

    def test_is_value(self):
        should_fail = [
            Succ(TrueTerm()), Pred(Zero()), Pred(Succ(Zero())), IsZero(Zero()), IfElse(TrueTerm(), Zero(), Zero()),
            Succ(IsZero(Zero()))
        ]
        for case in should_fail:
            self.assertFalse(case.is_value(), case)

    def test_str(self):
        cases = {
            "true": TrueTerm(),
            "false": FalseTerm(),
            "0": Zero(),
            "succ 0": Succ(Zero()),
            "iszero pred succ 0": IsZero(Pred(Succ(Zero()))),
            "if true then 0 else succ 0": IfElse(TrueTerm(), Zero(), Succ(Zero())),
            "if if false then true else false then 0 else 0": IfElse(
                IfElse(FalseTerm(), TrueTerm(), FalseTerm()), Zero(), Zero()
            ),
        }
        for expected, case in cases.items():
            self.assertEqual(expected, str(case), repr(case))

    def test_nodes(self):
        cases = {
            TrueTerm(): [],
            Zero(): [],
            Succ(Zero()): [Zero()],
            IsZero(Pred(Zero())): [Pred(Zero())],
            IfElse(TrueTerm(), Zero(), FalseTerm()): [TrueTerm(), Zero(), FalseTerm()],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, case.nodes, case)

    def test_display(self):
        cases = {
            "Zero(expr='0')": Zero(),
            "Succ(expr='succ 0', nodes=[\n    Zero(expr='0')\n])": Succ(Zero()),
            (
                "IfElse(expr='if true then 0 else succ 0', nodes=[\n"
                "    TrueTerm(expr='true'),\n"
                "    Zero(expr='0'),\n"
                "    Succ(expr='succ 0', nodes=[\n"
                "        Zero(expr='0')\n"
                "    ])\n"
                "])"
            ): IfElse(TrueTerm(), Zero(), Succ(Zero())),
        }
        for expected, case in cases.items():
            self.assertEqual(expected, case.display(), case)

    def test_equality(self):
        self.assertEqual(Succ(Succ(Zero())), Succ(Succ(Zero())))
        self.assertNotEqual(Succ(Zero()), Pred(Zero()))
        self.assertNotEqual(TrueTerm(), FalseTerm())

    def test_immutable(self):
        term = Succ(Zero())
        with self.assertRaises(FrozenInstanceError):
            term.term = TrueTerm()

        term = IfElse(TrueTerm(), Zero(), Zero())
        with self.assertRaises(FrozenInstanceError):
            term.condition = FalseTerm()


if __name__ == '__main__':
    unittest.main()
