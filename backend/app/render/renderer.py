"""Response renderer - classifies model output lines into display blocks.

Each line is classified on its own; there is no cross-line state. Rules, first
match wins:

1. blank            -> skipped (or Spacer in "spacer" mode)
2. contains [x](u)  -> CallToAction for the first link only, fixed label
3. starts with #    -> Heading
4. starts with _ or mentions "Chosen because" -> Caption
5. starts with "- " -> BulletItem
6. anything else    -> BodyText

URLs are taken as the model wrote them; they are not checked against the
activity catalog.
"""

import re
from collections.abc import Iterable
from typing import Literal

from backend.app.models.blocks import (
    BodyText,
    BulletItem,
    CallToAction,
    Caption,
    DisplayBlock,
    Heading,
    Spacer,
)

BlankLineMode = Literal["skip", "spacer"]

CTA_LABEL = "Check Availability"
CAPTION_PHRASE = "Chosen because"

LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


def classify_line(line: str, cta_label: str = CTA_LABEL) -> DisplayBlock | None:
    """Classify a single non-blank line. Returns None for blank lines."""
    trimmed = line.strip()
    if not trimmed:
        return None

    match = LINK_RE.search(line)
    if match:
        # Rest of the line, and any further links, are dropped
        return CallToAction(url=match.group(2), label=cta_label)

    if trimmed.startswith("#"):
        return Heading(text=trimmed.lstrip("#").strip())

    if trimmed.startswith("_") or CAPTION_PHRASE in trimmed:
        return Caption(text=trimmed.replace("_", "").strip())

    if trimmed.startswith("- "):
        return BulletItem(text=trimmed[2:].strip())

    return BodyText(text=trimmed)


def render_response(
    text: str,
    blank_lines: BlankLineMode = "skip",
    cta_label: str = CTA_LABEL,
) -> list[DisplayBlock]:
    """Render model text into an ordered list of display blocks.

    Args:
        text: Raw model output
        blank_lines: "skip" drops blank lines, "spacer" emits a Spacer for each
        cta_label: Visible text for every call-to-action

    Returns:
        Blocks in input line order. Never raises for any string input.
    """
    blocks: list[DisplayBlock] = []
    for line in text.split("\n"):
        block = classify_line(line, cta_label=cta_label)
        if block is not None:
            blocks.append(block)
        elif blank_lines == "spacer":
            blocks.append(Spacer())
    return blocks


def block_to_line(block: DisplayBlock) -> str:
    """Serialize one block back into the line syntax the renderer reads."""
    if isinstance(block, Heading):
        return f"### {block.text}"
    if isinstance(block, Caption):
        return f"_{block.text}_"
    if isinstance(block, BulletItem):
        return f"- {block.text}"
    if isinstance(block, CallToAction):
        return f"[{block.label}]({block.url})"
    if isinstance(block, Spacer):
        return ""
    return block.text


def blocks_to_markdown(blocks: Iterable[DisplayBlock]) -> str:
    """Serialize blocks so that re-rendering yields the same blocks."""
    return "\n".join(block_to_line(block) for block in blocks)
