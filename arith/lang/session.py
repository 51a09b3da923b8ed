"""Session control for arith. Runs source text through a calculus (parse, then evaluate) and prints the evaluation
trace, either for a whole file or line by line in command-line mode.
"""

from arith.lang.error import GenericException, ParseError


class Session:
    """Governs an arith session for a single topic."""
    SH_FILE = "<in>"  # command-line interpreter filename
    PAD = "   "       # printed before the initial term of a trace
    ARROW = "-> "     # printed before every term after the initial one

    def __init__(self, error_handler, path, topic, cmd_line, show_ast=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.topic = topic
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.show_ast = show_ast  # whether or not to display the parsed term before evaluating it

        self.parser = topic.create_parser()
        self.evaluator = topic.create_evaluator()

        self.source = None
        self.results = []  # normal forms, in order of evaluation

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    self.source = file.read()
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename", diagnosis=False)

    def is_incomplete(self, source):
        """Whether or not source only fails to parse because it ends too early. Used for line continuations."""
        try:
            self.parser.parse(source)
        except ParseError as error:
            return error.at_end and bool(source.strip())
        return False

    def run(self, source=None, line_num=1):
        """Parses and evaluates source (the session's file if None), printing every step. Returns the normal form.
        Raises any errors that are encountered.
        """
        if source is None:
            source = self.source
        self.error_handler.register_line(self.path, source, line_num)  # in case error is raised

        term = self.parser.parse(source)
        if self.show_ast:
            print(term.display())

        result = self.evaluator.eval_with_monitor(term, self.trace())
        self.results.append(result)

        self.error_handler.remove_line(self.path)  # error was not raised
        return result

    @staticmethod
    def trace():
        """Returns a monitor that prints the initial term padded and every later term after an arrow."""
        first_term = True

        def print_step(term):
            nonlocal first_term
            prefix = Session.PAD if first_term else Session.ARROW
            first_term = False
            print(f"{prefix}{term}")

        return print_step
