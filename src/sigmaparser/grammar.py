"""Grammar builder for named, mutually recursive rules.

A grammar is built from a mapping of rule name to rule-definition function.
Each definition receives the grammar under construction and returns a
:class:`~sigmaparser.core.parser.Parser`. Definitions may reference any rule,
including themselves and rules defined later:

    >>> from sigmaparser import choice, grammar, sequence, string, take_mid
    >>> nested = grammar({
    ...     "Item": lambda g: choice(g.List, string("x")),
    ...     "List": lambda g: take_mid(string("["), g.Item, string("]")),
    ... })
    >>> nested.Item.parse("[[x]]", 0).pos
    5

Construction runs in two phases:

1. Allocate one placeholder Parser per rule name. Calling a placeholder
   raises UnpatchedRuleError.
2. Call each definition with the grammar of placeholders and install the
   returned parse function onto the placeholder in place.

Combinators hold Parser objects, never their functions, so a placeholder
captured in phase 2 sees its final behavior once phase 2 completes. The
grammar object is returned only after every placeholder is patched.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from sigmaparser.core.parser import ParseFn, Parser
from sigmaparser.core.result import Result
from sigmaparser.diagnostics.errors import (
    InvalidRuleError,
    UnknownRuleError,
    UnpatchedRuleError,
)
from sigmaparser.diagnostics.templates import ErrorTemplate

__all__ = ["Grammar", "RuleDefinition", "grammar"]

logger = logging.getLogger(__name__)

type RuleDefinition = Callable[[Grammar], Parser[Any]]


class Grammar(Mapping[str, Parser[Any]]):
    """Immutable mapping of rule name to Parser, with attribute access.

    Rule bodies reference siblings as attributes (``g.Value``); callers may
    use either ``g.Value`` or ``g["Value"]``.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Mapping[str, Parser[Any]]) -> None:
        object.__setattr__(self, "_rules", dict(rules))

    def __getattr__(self, name: str) -> Parser[Any]:
        # Only called when normal lookup fails; dunder probes must stay
        # AttributeError so copy/pickle/inspect behave.
        if name.startswith("__") or name == "_rules":
            raise AttributeError(name)
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRuleError(
                ErrorTemplate.unknown_rule(name, tuple(self._rules)), name
            ) from None

    def __setattr__(self, name: str, value: object) -> None:
        msg = "Grammar is immutable"
        raise AttributeError(msg)

    def __getitem__(self, name: str) -> Parser[Any]:
        return self._rules[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Grammar({', '.join(self._rules)})"


def _unpatched(rule_name: str) -> ParseFn[Any]:
    def parse(source: str, pos: int) -> Result[Any]:
        logger.error("Rule %r invoked before its definition was installed", rule_name)
        raise UnpatchedRuleError(ErrorTemplate.unpatched_rule(rule_name), rule_name)

    return parse


def grammar(rules: Mapping[str, RuleDefinition]) -> Grammar:
    """Build a grammar from rule-definition functions.

    Args:
        rules: Mapping of rule name to a function taking the grammar and
            returning that rule's Parser

    Returns:
        Grammar whose rules are all patched and ready to parse

    Raises:
        InvalidRuleError: If a definition returns something other than a Parser
        UnknownRuleError: If a definition references an undefined rule
    """
    logger.debug("Building grammar with %d rules", len(rules))

    placeholders: dict[str, Parser[Any]] = {
        name: Parser(_unpatched(name), name=name) for name in rules
    }
    built = Grammar(placeholders)
    placeholder_ids = {id(parser) for parser in placeholders.values()}

    for name, definition in rules.items():
        resolved = definition(built)
        if not isinstance(resolved, Parser):
            raise InvalidRuleError(ErrorTemplate.invalid_rule(name, resolved), name)
        if id(resolved) in placeholder_ids:
            # Alias of another rule, which may not be patched yet: delegate
            # through the placeholder so its final function is used.
            placeholders[name].install(resolved.parse)
        else:
            placeholders[name].install(resolved.parse_fn)

    logger.debug("Grammar ready: %s", ", ".join(placeholders))
    return built
