"""
Line-by-line classification of post bodies.

This is not a Markdown parser: every line of the body becomes exactly one
block, with no inline formatting and no constructs spanning several lines.
"""
import re
from typing import List

from app.schemas.content import ContentBlock

_HEADING_PREFIXES = (("### ", 3), ("## ", 2), ("# ", 1))
_ORDERED_ITEM = re.compile(r"^\d+\. ")
_LIST_MARKER = re.compile(r"^[-\d+. ]+")


def classify_line(line: str) -> ContentBlock:
    if line.strip() == "":
        return ContentBlock(kind="spacer")

    for prefix, level in _HEADING_PREFIXES:
        if line.startswith(prefix):
            return ContentBlock(kind="heading", level=level, text=line[len(prefix):])

    if line.startswith("> "):
        return ContentBlock(kind="quote", text=line[2:])

    if line.startswith("- ") or _ORDERED_ITEM.match(line):
        return ContentBlock(
            kind="list_item",
            text=_LIST_MARKER.sub("", line),
            ordered=not line.startswith("- "),
        )

    return ContentBlock(kind="paragraph", text=line)


def render_content(content: str) -> List[ContentBlock]:
    return [classify_line(line) for line in content.split("\n")]
