"""Registry of the calculi the interpreter can run, selected by name with --topic."""

from arith.calculus import Topic
from arith.lang.error import GenericException
from arith.untyped.lexical import ArithParser
from arith.untyped.reducer import SmallStepEvaluator


class UntypedArith(Topic):
    """Untyped arithmetic expressions: booleans, natural numbers and conditionals."""
    name = "unty-arith"
    description = "untyped arithmetic expressions"

    @staticmethod
    def create_parser():
        return ArithParser()

    @staticmethod
    def create_evaluator():
        return SmallStepEvaluator()


TOPICS = {topic.name: topic for topic in [UntypedArith]}
DEFAULT_TOPIC = UntypedArith.name


def get_topic(name):
    """Returns the Topic registered as name."""
    try:
        return TOPICS[name]
    except KeyError:
        raise GenericException("unknown topic '{}'", name, diagnosis=False)
