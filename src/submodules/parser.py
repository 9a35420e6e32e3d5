"""Parser for one line of submodule status output.

A line looks like ``<marker><object-id> <name> (<refdescr>)`` where the
marker is a space, ``U``, ``+`` or ``-``.
"""

from src.submodules.models import ParsedLine


PLACEHOLDER = "???"

# Stripped from anywhere in the object id token, not only the leading marker.
# An id that legitimately contains one of these loses it as well.
MARKER_CHARACTERS = ("U", "+", "-")

# Token positions after splitting on single spaces
_OBJECT_ID_INDEX = 0
_NAME_INDEX = 1
_REFERENCE_INDEX = 2


def marker_of(line: str | None) -> str:
    """Return the marker character of a raw, untrimmed line.

    Args:
        line: Raw status line.

    Returns:
        First character of the line, or an empty string.
    """
    if not line:
        return ""
    return line[0]


def _strip_markers(token: str) -> str:
    for char in MARKER_CHARACTERS:
        token = token.replace(char, "")
    return token.lstrip()


def _strip_parentheses(token: str) -> str:
    if token.startswith("("):
        token = token[1:]
    if token.endswith(")"):
        token = token[:-1]
    return token


def parse_line(line: str | None) -> ParsedLine:
    """Split a raw status line into object id, name and reference.

    Missing tokens degrade to ``???``; an empty line yields a ParsedLine
    with every field left as ``None``.

    Args:
        line: Raw status line.

    Returns:
        Parsed fields.
    """
    if not line:
        return ParsedLine()

    tokens = line.lstrip().split(" ")

    object_id = _strip_markers(tokens[_OBJECT_ID_INDEX])
    name = tokens[_NAME_INDEX] if len(tokens) > _NAME_INDEX else PLACEHOLDER
    reference = (
        _strip_parentheses(tokens[_REFERENCE_INDEX])
        if len(tokens) > _REFERENCE_INDEX
        else PLACEHOLDER
    )

    return ParsedLine(
        object_id=object_id or PLACEHOLDER,
        name=name,
        reference=reference,
    )
