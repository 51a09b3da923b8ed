"""Terms of the untyped calculus of booleans and natural numbers (TaPL, chapter 3).

```
<term> ::= "true" | "false" | "0"
         | "if" <term> "then" <term> "else" <term>
         | "succ" <term> | "pred" <term> | "iszero" <term>
```

Values are the booleans and the numeric values, where a numeric value is "0" or "succ" applied to a numeric value.
Terms are frozen: evaluation builds new terms rather than changing old ones.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Term(ABC):
    """Superclass of every term. Subclasses are frozen dataclasses whose fields are their subterms."""

    @property
    def nodes(self):
        """Direct subterms, in source order."""
        return []

    def is_value(self):
        return self.is_bool_value() or self.is_numeric_value()

    def is_bool_value(self):
        return False

    def is_numeric_value(self):
        return False

    @abstractmethod
    def __str__(self):
        """Canonical rendering. Nested renderings are not parenthesized, so they may be ambiguous."""

    def display(self, indents=0):
        """Recursively displays Term tree with readable format.

        Format:
        <Term>(expr='<expr>', nodes=[
            <Term>(expr='<expr>', nodes=[
                ...
                <Term>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}(expr='{self}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"


@dataclass(frozen=True)
class TrueTerm(Term):

    def is_bool_value(self):
        return True

    def __str__(self):
        return "true"


@dataclass(frozen=True)
class FalseTerm(Term):

    def is_bool_value(self):
        return True

    def __str__(self):
        return "false"


@dataclass(frozen=True)
class Zero(Term):

    def is_numeric_value(self):
        return True

    def __str__(self):
        return "0"


@dataclass(frozen=True)
class IfElse(Term):
    condition: Term
    true_branch: Term
    false_branch: Term

    @property
    def nodes(self):
        return [self.condition, self.true_branch, self.false_branch]

    def __str__(self):
        return f"if {self.condition} then {self.true_branch} else {self.false_branch}"


@dataclass(frozen=True)
class Succ(Term):
    term: Term

    @property
    def nodes(self):
        return [self.term]

    def is_numeric_value(self):
        # only recurses through succ: "succ true" is not a numeric value
        return self.term.is_numeric_value()

    def __str__(self):
        return f"succ {self.term}"


@dataclass(frozen=True)
class Pred(Term):
    term: Term

    @property
    def nodes(self):
        return [self.term]

    def __str__(self):
        return f"pred {self.term}"


@dataclass(frozen=True)
class IsZero(Term):
    term: Term

    @property
    def nodes(self):
        return [self.term]

    def __str__(self):
        return f"iszero {self.term}"
