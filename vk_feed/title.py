from __future__ import annotations

import re

from .hashtags import humanize_hashtags, is_hashtag_only

MAX_TITLE_LENGTH = 80
MIN_PARAGRAPH_LENGTH_FOR_TITLE = 30
EMPTY_POST_TITLE = "No text"

_PARAGRAPH_END_CHARS = (".", "!", "?", ",", ":", ";")
_TRIMMED_END_CHARS = (",", ":", ";", "-")
_FINAL_END_CHARS = (".", "!", "?", ")")

_NON_BREAK_TAG_RE = re.compile(r"<(?!br|br/)[^>]+>")
_SUPERFLUOUS_BREAKS_RE = re.compile(
    r"^(?:<br/?>\s*?)+|(?:<br/?>\s*?)+$|(?:<br/?>\s*?)+(?=<br/?>)"
)
_BREAK_RE = re.compile(r"<br/?>")
_LAST_WORD_RE = re.compile(r"\s+\S*$")


def _title_paragraphs(paragraphs: list[str]) -> list[str]:
    picked: list[str] = []
    length = 0

    for raw in paragraphs:
        paragraph = raw.strip()
        if is_hashtag_only(paragraph):
            continue
        paragraph = humanize_hashtags(paragraph)

        fits = length < MAX_TITLE_LENGTH and (
            len(paragraph) >= MIN_PARAGRAPH_LENGTH_FOR_TITLE
            or length + MIN_PARAGRAPH_LENGTH_FOR_TITLE < MAX_TITLE_LENGTH
        )
        if not fits:
            break

        if not paragraph.endswith(_PARAGRAPH_END_CHARS):
            paragraph += "."
        length += len(paragraph)
        picked.append(paragraph)

    return picked


def _shorten(title: str) -> str:
    # Drop the word cut by the length limit, whole words stay intact.
    short = _LAST_WORD_RE.sub("", title[:MAX_TITLE_LENGTH])

    if short.endswith(_TRIMMED_END_CHARS):
        return short[:-1] + "..."
    if not short.endswith(_FINAL_END_CHARS):
        return short + "..."
    return short


def generate_title(text: str) -> str:
    """
    Build a feed item title from the flattened post text.

    Paragraphs are the `<br>`-separated parts of the text. Paragraphs made only of
    hashtags are skipped; the rest are taken in order while they fit, each closed
    with a period. Over-long results are cut on a word boundary and end with an
    ellipsis.
    """
    stripped = _NON_BREAK_TAG_RE.sub("", text or "")
    stripped = _SUPERFLUOUS_BREAKS_RE.sub("", stripped)

    if not stripped.strip():
        return EMPTY_POST_TITLE

    picked = _title_paragraphs(_BREAK_RE.split(stripped))
    if not picked:
        return EMPTY_POST_TITLE

    title = " ".join(picked)
    if len(title) > MAX_TITLE_LENGTH:
        title = _shorten(title)

    first = title[:1].upper()
    if len(first) != 1:
        # Some letters uppercase to several characters (e.g. "ß" -> "SS").
        first = title[:1]
    return first + title[1:]
