"""Uses the registered calculi to interpret arith files or run in command-line mode. Also uses error handling context
manager. Called from arith executable script.
"""

import argparse

from arith.lang.error import ErrorHandler
from arith.lang.session import Session
from arith.lang.shell import Shell
from arith.topics import DEFAULT_TOPIC, TOPICS, get_topic


def main(argv=None):
    """Runs arith interpreter. Called from arith executable script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(description="Small-step interpreter for the calculi of TaPL.")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("-t", "--topic", help="calculus to run (default: %(default)s)", default=DEFAULT_TOPIC,
                            choices=sorted(TOPICS))
        parser.add_argument("-a", "--ast", help="display the syntax tree of the term before evaluating it",
                            action="store_true")
        args = parser.parse_args(argv)

        topic = get_topic(args.topic)

        if args.file is not None:
            sess = Session(error_handler, args.file, topic, cmd_line=False, show_ast=args.ast)
            sess.run()

        else:
            Shell(Session(error_handler, Session.SH_FILE, topic, cmd_line=True, show_ast=args.ast)).cmdloop()


if __name__ == "__main__":
    main()
