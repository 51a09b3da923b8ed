from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
import os
import tempfile
import unittest
from unittest import mock

from arith.main import main


class MainTestCase(unittest.TestCase):

    def setUp(self):
        patcher = mock.patch.dict(os.environ, {"ANSI_COLORS_DISABLED": "1"})
        patcher.start()
        self.addCleanup(patcher.stop)

        tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(tmp_dir.cleanup)
        self.tmp_dir = tmp_dir.name

    def run_main(self, source, *args):
        """Runs main on a file containing source, returning (stdout, stderr, exit code)."""
        path = os.path.join(self.tmp_dir, "main.arith")
        with open(path, "w") as file:
            file.write(source)

        stdout, stderr, code = StringIO(), StringIO(), 0
        with redirect_stdout(stdout), redirect_stderr(stderr):
            try:
                main([*args, path])
            except SystemExit as exit:
                code = exit.code
        return stdout.getvalue(), stderr.getvalue(), code

    def test_trace(self):
        cases = {
            "if true then 0 else succ 0": "   if true then 0 else succ 0\n-> 0\n",
            "iszero pred succ 0": "   iszero pred succ 0\n-> iszero 0\n-> true\n",
            "pred succ succ 0": "   pred succ succ 0\n-> succ 0\n",
        }
        for source, expected in cases.items():
            self.assertEqual((expected, "", 0), self.run_main(source, "-t", "unty-arith"), source)

    def test_ast(self):
        stdout, __, code = self.run_main("iszero 0", "--ast")
        self.assertEqual("IsZero(expr='iszero 0', nodes=[\n    Zero(expr='0')\n])\n   iszero 0\n-> true\n", stdout)
        self.assertEqual(0, code)

    def test_eval_error(self):
        stdout, stderr, code = self.run_main("succ true")
        self.assertEqual("   succ true\n", stdout)
        self.assertIn("eval error: 'true' is a non-numeric normal form but it appears as the operand of a succ term",
                      stderr)
        self.assertEqual(1, code)

        __, stderr, code = self.run_main("if 0 then true else false")
        self.assertIn("'0' is a non-boolean normal form but it appears as the condition of an if-else term", stderr)
        self.assertEqual(1, code)

    def test_parse_error(self):
        stdout, stderr, code = self.run_main("if true then 0\n")
        self.assertEqual("", stdout)
        self.assertIn(":1:15: parse error: unexpected end of token stream, expected 'else'", stderr)
        self.assertEqual(1, code)

    def test_missing_file(self):
        stderr = StringIO()
        with redirect_stderr(stderr), self.assertRaises(SystemExit) as cm:
            main([os.path.join(self.tmp_dir, "missing.arith")])

        self.assertEqual(1, cm.exception.code)
        self.assertIn("could not be opened", stderr.getvalue())

    def test_unknown_topic(self):
        __, __, code = self.run_main("0", "-t", "lambda")
        self.assertEqual(2, code)

    def test_shell(self):
        stdout = StringIO()
        with mock.patch("sys.stdin", StringIO("succ pred 0\n")), redirect_stdout(stdout):
            main([])

        self.assertIn("   succ pred 0\n-> succ 0\n", stdout.getvalue())


if __name__ == '__main__':
    unittest.main()
