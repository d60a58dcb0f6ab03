from __future__ import annotations

import re
from html import escape
from typing import Iterable

from .post import Attachment, DocAttachment, LinkAttachment, PhotoAttachment, WallPost

LINE_BREAK = "<br/>"
VERTICAL_DELIMITER = " <br/> ________________ <br/> "

_MENTION_LINK_RE = re.compile(r"\[[^|]+\|([^\]]+)\]")


def text_fragments(post: WallPost) -> list[str]:
    """
    Collect the textual parts of a post in display order.

    Repost text comes first, then the post's own text, media captions and the
    attached link's title and description.
    """
    fragments: list[str] = []

    if post.reposted_text:
        fragments.append(post.reposted_text)
    if post.text:
        fragments.append(post.text)

    for caption in (post.photo_caption, post.video_caption):
        if caption:
            fragments.append(caption)

    link = post.link_caption
    if link is not None:
        fragments.append(f"{link.title}{LINE_BREAK}{link.description}")

    return fragments


def _anchor(url: str | None, title: str | None) -> str | None:
    if not url:
        return None
    label = title or url
    return f"<br><a href='{escape(url, quote=True)}'>{label}</a>"


def render_attachment(attachment: Attachment) -> str | None:
    """Return markup for one attachment, or None when it has nothing to show."""
    if isinstance(attachment, PhotoAttachment):
        if not attachment.src_url:
            return None
        return f"<br><img src='{escape(attachment.src_url, quote=True)}'/>"
    if isinstance(attachment, (DocAttachment, LinkAttachment)):
        return _anchor(attachment.url, attachment.title)
    return None


def attachment_fragments(post: WallPost) -> list[str]:
    out: list[str] = []
    for attachment in post.attachments:
        rendered = render_attachment(attachment)
        if rendered is not None:
            out.append(rendered)
    return out


def strip_mention_links(fragment: str) -> str:
    """Replace internal links like `[id123|Alice]` with their display name."""
    return _MENTION_LINK_RE.sub(r"\1", fragment)


def join_description(fragments: Iterable[str]) -> str:
    return VERTICAL_DELIMITER.join(fragments)


def join_flattened(fragments: Iterable[str]) -> str:
    return LINE_BREAK.join(fragments)
