"""Error handling for arith. Only GenericExceptions should be encountered during running: if another type of error is
raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw an arith error. msg is a str.format template that is
    filled in with exprs; source, start and end locate the offending text (used for the caret diagnosis).
    """
    kind = ""

    def __init__(self, msg, exprs=None, source=None, start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException."""
        if exprs is None:
            exprs = []
        if isinstance(exprs, str):
            exprs = [exprs]

        self.template = msg
        self.exprs = [str(expr) for expr in exprs]
        self.msg = msg.format(*self.exprs)

        self.source = source if source is not None else ""
        self.start = start
        self.end = end if end != -1 else len(self.source)  # needed for error display

        self.diagnosis = diagnosis
        self.internal = internal
        self.context = []  # innermost first

        super().__init__(self.msg)

    def annotate(self, frame):
        """Adds a context frame (e.g. the rule being evaluated) as this error propagates outward."""
        self.context.append(frame)
        return self

    def colored_msg(self):
        """self.msg with expr snippets bolded."""
        return self.template.format(*(colored(expr, attrs=["bold"]) for expr in self.exprs))

    def __str__(self):
        return "\n".join([self.msg] + [f"    {frame}" for frame in self.context])


class ParseError(GenericException):
    """Raised when source text is not a single well-formed term. start/end index the offending token in source; if
    the token stream ran out, at_end is set and start points just past the last token.
    """
    kind = "parse"

    def __init__(self, msg, exprs=None, source=None, start=0, end=-1, at_end=False):
        super().__init__(msg, exprs, source, start, end)
        self.at_end = at_end


class EvaluationError(GenericException):
    """Raised when a term is stuck: it is not a value but no evaluation rule applies to it."""
    kind = "eval"

    def __init__(self, msg, term):
        super().__init__(msg, [term], diagnosis=False)
        self.term = term


class ErrorHandler:
    """Context manager that will silently suppress Python errors and print custom arith errors."""
    ERROR = "red"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, source, line_num):
        """Registers source in traceback given path. line_num is the line source starts on. Should be called prior to
        Session run.
        """
        self.traceback[path] = (source, line_num)

    def remove_line(self, path):
        """Removes source from traceback given path. Should be called after successful Session run."""
        self.traceback[path] = (None, None)

    @staticmethod
    def position(source, offset):
        """Returns (line, col) of offset in source, both starting at 1."""
        line_start = source.rfind("\n", 0, offset) + 1
        return source.count("\n", 0, offset) + 1, offset - line_start + 1

    @staticmethod
    def diagnose(error):
        """Returns the line of error.source containing the offending text, highlighted and underlined."""
        line_start = error.source.rfind("\n", 0, error.start) + 1
        line_end = error.source.find("\n", error.start)
        if line_end == -1:
            line_end = len(error.source)

        line = error.source[line_start:line_end]
        start = error.start - line_start
        end = min(max(error.end - line_start, start + 1), len(line))

        diagnosis = "  " + line[:start]
        diagnosis += colored(line[start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * max(end - start - 1, 0), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Prints error using error and self.traceback, then exits if fatal. error must be a GenericException, and
        self.traceback must be a dict of file: (source, line_num) representing origination of error.
        """
        error_msg = ""
        for file, (source, line_num) in self.traceback.items():
            if source is None:
                continue
            if error.diagnosis and error.source == source:
                line, col = ErrorHandler.position(source, error.start)
                error_msg += colored(f"{file}:{line_num + line - 1}:{col}: ", attrs=["bold"])
            else:
                error_msg += colored(f"{file}:{line_num}: ", attrs=["bold"])

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        label = f"{error.kind} error: " if error.kind else "error: "
        error_msg += colored(label, ErrorHandler.ERROR, attrs=["bold"]) + error.colored_msg()
        for frame in error.context:
            error_msg += f"\n    {frame}"
        print(error_msg, file=sys.stderr)

        if not error.internal and error.source and error.diagnosis:
            print(ErrorHandler.diagnose(error), file=sys.stderr)

        if self.fatal:
            sys.exit(1)
        self.traceback = {}  # if error occurred, reset traceback (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("term is nested too deeply, maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}: {}'", [exc_type.__name__, exc_val], internal=True))
            do_exit = True

        return not do_exit
