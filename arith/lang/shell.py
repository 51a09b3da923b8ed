"""Handles interactive/command-line mode for arith interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Arithmetic expression interpreter shell."""
    intro = "Untyped arithmetic expression interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continutations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def default(self, line):
        """Evaluates arbitrary term. A term that is cut short continues on the next line."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line = f"{self._tmp_line} {line}" if self._tmp_line else line

            if self.sess.is_incomplete(line):
                self._tmp_line = line
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt

            self.sess.run(line, self.line_num)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the arith interpreter!\n\n"
              "Untyped arithmetic expressions are the smallest calculus in Pierce's 'Types and \n"
              "Programming Languages': booleans, natural numbers, and conditionals. Terms are \n"
              "built from true, false, 0, succ, pred, iszero, and if ... then ... else ...\n\n"
              "Try it out by typing 'iszero pred succ 0'. Every reduction step is printed, \n"
              "ending with the value 'true'. A term left unfinished continues on the next line.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
