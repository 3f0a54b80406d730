"""
Error types raised by the scoring and classification engine.
"""


class CSSWeightsError(Exception):
    """Base class for every error raised by the engine."""


class InvalidInputError(CSSWeightsError, TypeError):
    """Raised when a sanitizer or scorer receives a non-string."""


class MissingRuleTreeError(CSSWeightsError):
    """Raised when a rule tree is absent or has no rule collection."""


class AtRuleTypeNotFoundError(CSSWeightsError):
    """Raised when condition text carries no ``@word`` marker."""


class SelectorSyntaxError(CSSWeightsError):
    """Raised when the specificity calculator cannot parse a selector."""

    def __init__(self, message: str, selector: str = ''):
        self.selector = selector
        super().__init__(message)


class OutputError(CSSWeightsError, ValueError):
    """Raised when the outputter is called without data or a file name."""
