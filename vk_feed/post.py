from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union


@dataclass(frozen=True)
class PhotoAttachment:
    src_url: str | None = None


@dataclass(frozen=True)
class DocAttachment:
    url: str | None = None
    title: str | None = None


@dataclass(frozen=True)
class LinkAttachment:
    url: str | None = None
    title: str | None = None


@dataclass(frozen=True)
class VideoAttachment:
    """Recognized but not rendered."""


@dataclass(frozen=True)
class AudioAttachment:
    """Recognized but not rendered."""


@dataclass(frozen=True)
class OtherAttachment:
    kind: str | None = None


Attachment = Union[
    PhotoAttachment,
    DocAttachment,
    LinkAttachment,
    VideoAttachment,
    AudioAttachment,
    OtherAttachment,
]


@dataclass(frozen=True)
class LinkCaption:
    """The single link a post may carry alongside its text."""

    title: str = ""
    description: str = ""
    url: str | None = None


@dataclass(frozen=True)
class WallPost:
    """A wall post reduced to the fields the feed pipeline reads."""

    post_id: str
    owner_id: str | None = None
    published_at: datetime | None = None

    text: str = ""
    reposted_text: str | None = None

    photo_caption: str | None = None
    video_caption: str | None = None
    link_caption: LinkCaption | None = None

    attachments: tuple[Attachment, ...] = ()
