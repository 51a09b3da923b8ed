"""Capabilities shared by every calculus the interpreter can run. A calculus (a "topic") supplies a Parser, which turns
source text into a term, and an Evaluator, which advances a term by one reduction step. The session layer only ever
talks to these abstractions, so adding a calculus means implementing both and registering a Topic in arith/topics.py.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class Parser(ABC):
    """Parses source text into a single syntax tree."""

    @abstractmethod
    def parse(self, source):
        """This method should return the term that source denotes, or raise a ParseError. No partial result is ever
        returned.
        """


@dataclass(frozen=True)
class EvaluationStep:
    """Result of advancing a term by one step: either the reduct (halted=False) or the term itself, unchanged, if it
    is already a normal form (halted=True).
    """
    term: Any
    halted: bool = False

    @classmethod
    def step(cls, term):
        return cls(term, halted=False)

    @classmethod
    def halt(cls, term):
        return cls(term, halted=True)

    @property
    def is_step(self):
        return not self.halted

    @property
    def is_halt(self):
        return self.halted


class Evaluator(ABC):
    """Reduces terms toward their normal form, one step at a time."""

    @abstractmethod
    def eval_one_step(self, term):
        """This method should return an EvaluationStep for term, or raise an EvaluationError if term is stuck."""

    def eval(self, term):
        """Evaluates term until it reaches its normal form."""
        return self.eval_with_monitor(term)

    def eval_with_monitor(self, term, monitor=None):
        """Evaluates term until it reaches its normal form, calling monitor with the initial term and with every term
        produced by a step. Any EvaluationError aborts the evaluation.
        """
        while True:
            if monitor is not None:
                monitor(term)

            step = self.eval_one_step(term)
            if step.halted:
                return step.term
            term = step.term


class Topic(ABC):
    """A calculus selectable by name from the command line."""
    name = None
    description = None

    @staticmethod
    @abstractmethod
    def create_parser():
        """Returns a new Parser for this calculus."""

    @staticmethod
    @abstractmethod
    def create_evaluator():
        """Returns a new Evaluator for this calculus."""
