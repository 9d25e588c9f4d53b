"""Quickstart example for sigmaparser.

Builds a small configuration-list language with a mutually recursive grammar,
runs it leniently and strictly, and prints failure diagnostics.

    settings = { name = "demo", retries = 3, ratio = 0.75, tags = [ "a", "b" ] }
"""

import logging

from sigmaparser import (
    OutputFormat,
    choice,
    float_,
    format_failure,
    grammar,
    integer,
    map_,
    optional,
    regexp,
    run,
    sep_by,
    sequence,
    string,
    take_mid,
    whitespace,
)

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

space = optional(whitespace())


def token(text):
    return take_mid(space, string(text), space)


identifier = take_mid(space, regexp(r"[a-z_][a-z0-9_]*", "identifier"), space)
quoted = map_(regexp(r'"[^"]*"', "string"), lambda text, span: text[1:-1])

config = grammar({
    "Document": lambda g: map_(
        sequence(identifier, token("="), g.Table), lambda v, span: {v[0]: v[2]}
    ),
    "Table": lambda g: map_(
        take_mid(token("{"), sep_by(g.Entry, token(",")), token("}")),
        lambda entries, span: dict(entries),
    ),
    "Entry": lambda g: map_(
        sequence(identifier, token("="), g.Value), lambda v, span: (v[0], v[2])
    ),
    "List": lambda g: take_mid(token("["), sep_by(g.Value, token(",")), token("]")),
    "Value": lambda g: take_mid(
        space, choice(g.Table, g.List, quoted, float_(), integer()), space
    ),
})

# Example 1: Successful parse
print("=" * 50)
print("Example 1: Parse a document")
print("=" * 50)

source = 'settings = { name = "demo", retries = 3, ratio = 0.75, tags = [ "a", "b" ] }'
result = run(config.Document).strict(source)
print(result.value)
# Output: {'settings': {'name': 'demo', 'retries': 3, 'ratio': 0.75, 'tags': ['a', 'b']}}

# Example 2: Furthest-failure diagnostics
print("\n" + "=" * 50)
print("Example 2: Diagnostics")
print("=" * 50)

broken = 'settings = {\n  name = "demo",\n  retries = 3;\n}'
failure = run(config.Document).with_(broken)
print(format_failure(failure, broken, output_format=OutputFormat.CONTEXT))

# Example 3: Lenient vs strict
print("\n" + "=" * 50)
print("Example 3: Trailing input")
print("=" * 50)

trailing = "x = { } extra"
print(run(config.Document).with_(trailing))
print(run(config.Document).strict(trailing))

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
