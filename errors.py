"""Exception types raised by the mixer.

Every failure is fatal for the run; ``main`` is the single place that
catches ``MixerError`` and reports it.

Exports
-------
MixerError
ConfigurationError
ConstraintReferenceError
InfeasibleConstraintsError
OverBudgetError
SearchStarvedError
DegenerateProposalError
"""


class MixerError(Exception):
    """Base class for all errors reported to the operator."""


class ConfigurationError(MixerError):
    """Input document is missing, unreadable, or malformed."""


class ConstraintReferenceError(MixerError):
    """A constraint names an ingredient that was not loaded."""


class InfeasibleConstraintsError(MixerError):
    """Constraints cannot be satisfied within the optimization budget."""


class OverBudgetError(InfeasibleConstraintsError):
    """Constraint pieces exceed the total number of optimization steps."""


class SearchStarvedError(InfeasibleConstraintsError):
    """No ingredient is eligible for the next piece."""


class DegenerateProposalError(MixerError):
    """A proposal without any pieces has no defined mix."""
