"""Path-template compiler: ``/users/:number/profile`` -> regex source.

A single left-to-right scan finds ``:keyword`` tokens. A token runs from
its colon up to the next ``/`` (exclusive) or the end of the template.
A ``/`` that is the template's last character ends up inside the token,
so ``/users/:number/`` is not expanded. Recognized keywords are replaced by a grouped character-class fragment;
anything else is copied through untouched, colon included.

Literal text between placeholders is not escaped: the template is regex
source, so ``.`` in ``/file.json`` still means "any character".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType

logger = logging.getLogger("routematch.template")

PLACEHOLDER_TRIGGER = ":"
SEPARATOR = "/"

NUMBER_PLACEHOLDER = ":number"
STRING_PLACEHOLDER = ":string"

PLACEHOLDERS: MappingProxyType[str, str] = MappingProxyType(
    {
        NUMBER_PLACEHOLDER: "([0-9]+)",
        STRING_PLACEHOLDER: "([a-zA-Z]+)",
    }
)


@dataclass(slots=True)
class _Variable:
    """Scan state for the placeholder currently being read."""

    start: int | None = None
    end: int | None = None

    def reset(self) -> None:
        self.start = None
        self.end = None


def compile_path_template(template: str) -> str:
    """Expand placeholder keywords in ``template`` into regex fragments.

    Returns unanchored regex source; callers anchor and compile it.

    >>> compile_path_template("/users/:number/profile")
    '/users/([0-9]+)/profile'
    """
    parts: list[str] = []
    copied = 0
    last = len(template) - 1
    var = _Variable()

    for i, char in enumerate(template):
        if char == PLACEHOLDER_TRIGGER:
            var.start = i
            continue
        if var.start is None:
            continue

        if char != SEPARATOR and i != last:
            continue
        # The last character always belongs to the token, even a "/".
        var.end = i + 1 if i == last else i

        token = template[var.start : var.end]
        fragment = PLACEHOLDERS.get(token)
        if fragment is None:
            logger.warning(
                "unrecognized placeholder %r in path template %r left as literal text",
                token,
                template,
            )
        else:
            parts.append(template[copied : var.start])
            parts.append(fragment)
            copied = var.end
        var.reset()

    parts.append(template[copied:])
    source = "".join(parts)
    logger.debug("compiled path template %r -> %r", template, source)
    return source
