from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol, Sequence

from .description import (
    attachment_fragments,
    join_description,
    join_flattened,
    strip_mention_links,
    text_fragments,
)
from .hashtags import extract_hashtags
from .normalize import wall_post_from_api_item
from .post import WallPost
from .post_filter import PostFilter
from .title import generate_title

DEFAULT_BASE_URL = "https://vk.com"


class EventLogger(Protocol):
    def info(self, event: str, *, post_id: str | None = None, **data: Any) -> None: ...

    def warning(self, event: str, *, post_id: str | None = None, **data: Any) -> None: ...


@dataclass(frozen=True)
class FeedItem:
    title: str
    link: str
    guid: str
    published_at: datetime | None
    description: str
    categories: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "link": self.link,
            "guid": self.guid,
            "published_at": self.published_at.isoformat() if self.published_at else None,
            "description": self.description,
            "categories": list(self.categories),
        }


def post_url(post: WallPost, *, base_url: str = DEFAULT_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/wall{post.owner_id or ''}_{post.post_id}"


def build_feed_item(
    post: WallPost,
    *,
    post_filter: PostFilter | None = None,
    base_url: str = DEFAULT_BASE_URL,
) -> FeedItem | None:
    """
    Turn one post into a feed item, or None when the filter rejects it.

    The filter only sees the post's text parts; attachment markup is added after
    it has passed.
    """
    fragments = text_fragments(post)
    if post_filter is not None and not post_filter.allows(fragments):
        return None

    fragments.extend(attachment_fragments(post))
    fragments = [strip_mention_links(f) for f in fragments]

    text_content = join_flattened(fragments)
    link = post_url(post, base_url=base_url)

    return FeedItem(
        title=generate_title(text_content),
        link=link,
        guid=link,
        published_at=post.published_at,
        description=join_description(fragments),
        categories=tuple(extract_hashtags(text_content)),
    )


def build_feed_items(
    raw_items: Sequence[Any],
    *,
    post_filter: PostFilter | None = None,
    base_url: str = DEFAULT_BASE_URL,
    logger: EventLogger | None = None,
) -> list[FeedItem]:
    """
    Build feed items for a raw wall response, preserving post order.

    The first element of the response is metadata (the post count) and is never
    treated as a post.
    """
    items: list[FeedItem] = []

    for index, raw in enumerate(raw_items[1:], start=1):
        post = wall_post_from_api_item(raw)
        if post is None:
            if logger is not None:
                logger.info("post_skipped_malformed", index=index)
            continue

        item = build_feed_item(post, post_filter=post_filter, base_url=base_url)
        if item is None:
            if logger is not None:
                logger.info("post_filtered", post_id=post.post_id)
            continue

        if post.owner_id is None and logger is not None:
            logger.warning("post_missing_owner", post_id=post.post_id, link=item.link)

        items.append(item)

    return items

