from __future__ import annotations

import re

HASH_TAG_REGEX = r"#([а-яёА-ЯЁa-zA-Z0-9_]+)(?:@[a-zA-Z0-9_]+)?"

HASH_TAG_PATTERN = re.compile(HASH_TAG_REGEX)

_HASH_TAG_ONLY_PATTERN = re.compile(r"\s*(?:" + HASH_TAG_REGEX + r"\s*)*")


def extract_hashtags(text: str) -> list[str]:
    """
    Return hashtag names in order of appearance, duplicates kept.

    The `@mention` suffix is matched but never part of the name.
    """
    return [m.group(1) for m in HASH_TAG_PATTERN.finditer(text or "")]


def is_hashtag_only(paragraph: str) -> bool:
    return _HASH_TAG_ONLY_PATTERN.fullmatch(paragraph or "") is not None


def _hashtag_as_words(match: re.Match[str]) -> str:
    return match.group(1).replace("_", " ")


def humanize_hashtags(paragraph: str) -> str:
    """Rewrite `#some_tag@club` as `some tag` for display in titles."""
    return HASH_TAG_PATTERN.sub(_hashtag_as_words, paragraph or "")
