"""sigmaparser exception hierarchy.

Ordinary match failures are never raised; they are returned as
:class:`~sigmaparser.core.result.Failure` values. The exceptions here report
programming-contract violations in grammar construction and use.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "GrammarError",
    "InvalidRuleError",
    "SigmaParserError",
    "UnknownRuleError",
    "UnpatchedRuleError",
]


class SigmaParserError(Exception):
    """Base exception for all sigmaparser errors."""


class GrammarError(SigmaParserError):
    """Grammar construction or wiring is broken.

    Raised for defects in the grammar definition itself, never for input
    that simply does not match.
    """


class UnpatchedRuleError(GrammarError):
    """A rule placeholder was invoked before its definition was installed.

    This is an internal invariant violation: grammar() finishes patching
    every placeholder before returning, so reaching this means a placeholder
    was called from inside a rule-definition function, or a grammar object
    was used while still under construction.

    Attributes:
        rule_name: Name of the placeholder that was invoked
    """

    def __init__(self, message: str, rule_name: str) -> None:
        """Initialize UnpatchedRuleError.

        Args:
            message: Error message
            rule_name: Name of the unpatched rule
        """
        super().__init__(message)
        self.rule_name = rule_name


class UnknownRuleError(GrammarError, AttributeError):
    """A rule body referenced a rule name the grammar does not define.

    Subclasses AttributeError so attribute-protocol helpers (getattr with a
    default, hasattr) keep working on Grammar objects.

    Attributes:
        rule_name: The name that was looked up
    """

    def __init__(self, message: str, rule_name: str) -> None:
        """Initialize UnknownRuleError.

        Args:
            message: Error message
            rule_name: The missing rule name
        """
        super().__init__(message)
        self.rule_name = rule_name


class InvalidRuleError(GrammarError):
    """A rule-definition function returned something that is not a Parser.

    Attributes:
        rule_name: Name of the offending rule
    """

    def __init__(self, message: str, rule_name: str) -> None:
        """Initialize InvalidRuleError.

        Args:
            message: Error message
            rule_name: Name of the offending rule
        """
        super().__init__(message)
        self.rule_name = rule_name
