"""Exceptions for the decision support module."""


class DecisionSupportError(Exception):
    """Base error for decision support lookups and validation."""
    pass


class UnknownCriterionError(DecisionSupportError):
    """Requested criterion id is not in any catalog."""
    pass


class InvalidScoreError(DecisionSupportError):
    """A Bishop score is not one of the criterion's option scores."""
    pass
