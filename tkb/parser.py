"""
Parser for the object template Gemini is prompted with:

    {Name}

    - Attributes:
        - {Attr}: {Value}        (concepts: "- {Attr}")

    - Behaviors:
        - {Behavior}

Lines are classified by a small state machine. Section markers move it
between states, so extra ornamental lines do not shift the data.
"""
import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

from tkb.errors import MalformedAttributeLineError, TemplateMismatchError
from tkb.schema import GeneratedObject, ObjectKind

logger = logging.getLogger(__name__)

# Characters the legacy parser deleted from every data line
INVALID_CHARS = ("*", "-", " ", "\n", "\"")

# Characters trimmed at line / key boundaries (bullets included)
BOUNDARY_CHARS = "*-\" \t\r\n"

# Characters trimmed around a value; a leading "-" is a sign, not a bullet
VALUE_CHARS = "*\" \t\r\n"

ATTRIBUTES_MARKER = "attributes:"
BEHAVIORS_MARKER = "behaviors:"


class StripMode(str, Enum):
    BOUNDARY = "boundary"
    REMOVE = "remove"


class Section(str, Enum):
    ATTRIBUTES = "attributes"
    BEHAVIORS = "behaviors"


def remove_invalid_chars(s: str) -> str:
    for c in INVALID_CHARS:
        s = s.replace(c, "")
    return s


def trim(s: str) -> str:
    return s.strip(BOUNDARY_CHARS)


def clean(s: str, mode: StripMode) -> str:
    if mode == StripMode.REMOVE:
        return remove_invalid_chars(s)
    return trim(s)


def split_lines(text: str) -> List[Tuple[int, str]]:
    """Non-empty lines of text, paired with their 1-based line number."""
    return [(i, line) for i, line in enumerate(text.split("\n"), start=1) if line.strip()]


def split_attribute(line_number: int, raw: str, cleaned: str, mode: StripMode) -> Tuple[str, str]:
    key, sep, value = cleaned.partition(":")
    if mode == StripMode.BOUNDARY:
        key, value = trim(key), value.strip(VALUE_CHARS)

    if not sep:
        raise MalformedAttributeLineError("Attribute line has no ':' separator", Section.ATTRIBUTES.value, line_number, raw)
    if not key or not value:
        raise MalformedAttributeLineError("Attribute line is missing a name or value", Section.ATTRIBUTES.value, line_number, raw)
    return key, value


def parse_answer(text: str, kind=ObjectKind.INSTANCE, strip_mode=StripMode.BOUNDARY) -> GeneratedObject:
    kind = ObjectKind(kind)
    mode = StripMode(strip_mode)

    lines = split_lines(text or "")
    if not lines:
        raise TemplateMismatchError("Answer contains no lines", "name")

    _, first = lines[0]
    # the legacy parser kept the name verbatim
    name = first if mode == StripMode.REMOVE else trim(first)
    if not name:
        raise TemplateMismatchError("Object name is empty", "name", lines[0][0], first)

    attrs: Dict[str, Optional[str]] = {}
    behaviors: List[str] = []
    section = Section.ATTRIBUTES

    for line_number, raw in lines[1:]:
        cleaned = clean(raw, mode)
        if not cleaned:
            continue

        marker = cleaned.lower()
        if marker == ATTRIBUTES_MARKER:
            section = Section.ATTRIBUTES
            continue
        if marker == BEHAVIORS_MARKER:
            section = Section.BEHAVIORS
            continue

        if section == Section.BEHAVIORS:
            behaviors.append(cleaned)
        elif kind == ObjectKind.CONCEPT:
            attrs[cleaned] = None
        else:
            key, value = split_attribute(line_number, raw, cleaned, mode)
            attrs[key] = value

    logger.debug("Parsed %s %r: %d attributes, %d behaviors", kind.value, name, len(attrs), len(behaviors))

    return GeneratedObject(objectName=name, className="", attrs=attrs, behaviorNames=behaviors, kind=kind)
