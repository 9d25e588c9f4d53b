"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All exception messages are created here. NO f-strings in exception
    constructors! Raise sites stay short and the wording is testable in
    one place.
    """

    @staticmethod
    def unpatched_rule(rule_name: str) -> str:
        """Placeholder invoked before phase two installed its parser.

        Args:
            rule_name: Name of the placeholder rule

        Returns:
            Error message
        """
        return (
            f"internal error: rule '{rule_name}' was invoked before its "
            "definition was installed"
        )

    @staticmethod
    def unknown_rule(rule_name: str, known: tuple[str, ...]) -> str:
        """Rule body referenced an undefined rule.

        Args:
            rule_name: The name that was looked up
            known: Names the grammar does define

        Returns:
            Error message
        """
        available = ", ".join(known) if known else "<none>"
        return f"Grammar has no rule '{rule_name}' (defined: {available})"

    @staticmethod
    def invalid_rule(rule_name: str, returned: object) -> str:
        """Rule definition returned a non-Parser.

        Args:
            rule_name: Name of the rule
            returned: The value the definition returned

        Returns:
            Error message
        """
        type_name = type(returned).__name__
        return f"Rule '{rule_name}' must return a Parser, got {type_name}"

    @staticmethod
    def empty_combinator(combinator: str) -> str:
        """sequence()/choice() called with no parsers.

        Args:
            combinator: Combinator name

        Returns:
            Error message
        """
        return f"{combinator}() requires at least one parser"
