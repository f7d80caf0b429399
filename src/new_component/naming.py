"""Name casing for generated component identifiers."""

from __future__ import annotations

import re

from new_component.errors import InvalidComponentNameError

# Acronym runs, capitalised/lowercase words with trailing digits, lone
# capitals, then digit runs -- in that priority order.
_TOKEN_RE = re.compile(
    r"[A-Z]{2,}(?=[A-Z][a-z]+[0-9]*|\b)|[A-Z]?[a-z]+[0-9]*|[A-Z]|[0-9]+"
)


def to_pascal_case(value: str) -> str:
    """Convert an identifier-like string to PascalCase.

    Separators such as ``-``, ``_`` and spaces are dropped; acronym runs
    keep only their leading capital (``XMLParser`` -> ``XmlParser``).

    Raises:
        InvalidComponentNameError: If *value* contains no letters or digits.
    """
    # Not idempotent for every input: "aB" gives "AB", which then reads as
    # an acronym and gives "Ab".
    tokens = _TOKEN_RE.findall(value)
    if not tokens:
        raise InvalidComponentNameError(
            f"Cannot derive a component name from {value!r}"
        )
    return "".join(token[0].upper() + token[1:].lower() for token in tokens)
