"""``%name%`` placeholder rendering."""

import re
from typing import Optional, Protocol

TOKEN_PATTERN = re.compile(r"%([A-Za-z0-9_-]*)%")


class Resolver(Protocol):
    def resolve(self, name: str) -> Optional[str]:
        ...


def render(template: str, resolver: Resolver) -> str:
    """
    Replace every ``%name%`` token in *template* with the resolved value.

    - ``%%`` becomes a literal ``%``.
    - Unknown or empty variables become ``""``.
    - Tokens are matched left to right and never overlap, so ``%a%b%`` only
      substitutes ``%a%`` and leaves ``b%`` as text.
    """

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        if not name:
            return "%"
        return resolver.resolve(name) or ""

    return TOKEN_PATTERN.sub(substitute, template)
