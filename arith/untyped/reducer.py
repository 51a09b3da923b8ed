"""Small-step operational semantics of untyped arithmetic expressions.

Rules, by term shape (v is a value, nv a numeric value, t -> t' a single step):

```
if true then t2 else t3   ->  t2                        ; E-IfTrue
if false then t2 else t3  ->  t3                        ; E-IfFalse
if t1 then t2 else t3     ->  if t1' then t2 else t3    ; E-If
succ t1                   ->  succ t1'                  ; E-Succ
pred 0                    ->  0                         ; E-PredZero
pred (succ nv)            ->  nv                        ; E-PredSucc
pred t1                   ->  pred t1'                  ; E-Pred
iszero 0                  ->  true                      ; E-IszeroZero
iszero (succ nv)          ->  false                     ; E-IszeroSucc
iszero t1                 ->  iszero t1'                ; E-Iszero
```

A value halts. A term that is not a value and to which no rule applies is stuck, which raises an EvaluationError
annotated with every enclosing rule it propagated through.
"""

from arith.calculus import EvaluationStep, Evaluator
from arith.lang.error import EvaluationError
from arith.untyped.term import FalseTerm, IfElse, IsZero, Pred, Succ, TrueTerm, Zero


class SmallStepEvaluator(Evaluator):
    """Evaluates a term by applying exactly one of the rules above per step."""

    def eval_one_step(self, term):
        if term.is_value():
            return EvaluationStep.halt(term)

        if isinstance(term, IfElse):
            return EvaluationStep.step(self._eval_if_else(term))
        elif isinstance(term, Succ):
            return EvaluationStep.step(self._eval_succ(term))
        elif isinstance(term, Pred):
            return EvaluationStep.step(self._eval_pred(term))
        elif isinstance(term, IsZero):
            return EvaluationStep.step(self._eval_is_zero(term))

        raise EvaluationError("'{}' is not a term of untyped arithmetic expressions", term)

    def _eval_if_else(self, term):
        if isinstance(term.condition, TrueTerm):
            return term.true_branch
        elif isinstance(term.condition, FalseTerm):
            return term.false_branch

        try:
            step = self.eval_one_step(term.condition)
        except EvaluationError as error:
            error.annotate("during evaluation of an if-else term")
            raise

        if step.halted:
            msg = "'{}' is a non-boolean normal form but it appears as the condition of an if-else term"
            raise EvaluationError(msg, step.term)
        return IfElse(step.term, term.true_branch, term.false_branch)

    def _eval_succ(self, term):
        # succ of a numeric value is itself a value, so a halting operand here is always stuck
        return Succ(self._eval_operand(term.term, "a succ term", "during evaluation of a succ term"))

    def _eval_pred(self, term):
        if isinstance(term.term, Zero):
            return Zero()
        elif isinstance(term.term, Succ) and term.term.term.is_numeric_value():
            return term.term.term

        return Pred(self._eval_operand(term.term, "a pred term", "during the evaluation of a pred term"))

    def _eval_is_zero(self, term):
        if isinstance(term.term, Zero):
            return TrueTerm()
        elif isinstance(term.term, Succ) and term.term.term.is_numeric_value():
            return FalseTerm()

        return IsZero(self._eval_operand(term.term, "an iszero term", "during the evaluation of an iszero term"))

    def _eval_operand(self, operand, operator, frame):
        """Steps the operand of a numeric operator. Raises an EvaluationError if operand is a normal form, since the
        caller has already applied every rule for numeric operands.
        """
        try:
            step = self.eval_one_step(operand)
        except EvaluationError as error:
            error.annotate(frame)
            raise

        if step.halted:
            msg = f"'{{}}' is a non-numeric normal form but it appears as the operand of {operator}"
            raise EvaluationError(msg, step.term)
        return step.term
