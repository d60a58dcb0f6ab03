from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping, Sequence

from .errors import WallResponseError
from .post import (
    Attachment,
    AudioAttachment,
    DocAttachment,
    LinkAttachment,
    LinkCaption,
    OtherAttachment,
    PhotoAttachment,
    VideoAttachment,
    WallPost,
)


def _coerce_str(value: Any) -> str | None:
    if isinstance(value, str):
        s = value.strip()
        return s if s else None
    return None


def _coerce_text(value: Any) -> str | None:
    # Post bodies keep their own whitespace; only empty strings count as absent.
    if isinstance(value, str) and value != "":
        return value
    return None


def _coerce_id(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        v = value.strip()
        return v if v else None
    return None


def _coerce_timestamp(value: Any) -> datetime | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def attachment_from_api_item(item: Any) -> Attachment:
    """
    Map one raw attachment record to its variant.

    Unknown or malformed records become OtherAttachment, which renders nothing.
    """
    raw = _mapping(item)
    kind = _coerce_str(raw.get("type"))
    body = _mapping(raw.get(kind)) if kind else {}

    if kind == "photo":
        src = (
            _coerce_str(body.get("src_big"))
            or _coerce_str(body.get("src_xbig"))
            or _coerce_str(body.get("photo_604"))
            or _coerce_str(body.get("src"))
        )
        return PhotoAttachment(src_url=src)
    if kind == "doc":
        return DocAttachment(url=_coerce_str(body.get("url")), title=_coerce_str(body.get("title")))
    if kind == "link":
        return LinkAttachment(url=_coerce_str(body.get("url")), title=_coerce_str(body.get("title")))
    if kind == "video":
        return VideoAttachment()
    if kind == "audio":
        return AudioAttachment()
    return OtherAttachment(kind=kind)


def _link_caption(value: Any) -> LinkCaption | None:
    if not isinstance(value, Mapping):
        return None
    return LinkCaption(
        title=value.get("title") if isinstance(value.get("title"), str) else "",
        description=value.get("description") if isinstance(value.get("description"), str) else "",
        url=_coerce_str(value.get("url")),
    )


def wall_post_from_api_item(item: Any) -> WallPost | None:
    """
    Best-effort extraction of a WallPost from one raw wall record.

    Returns None when the record is not a post at all (not a mapping, or no id).
    Absent optional fields simply contribute nothing.
    """
    if not isinstance(item, Mapping):
        return None

    post_id = _coerce_id(item.get("id"))
    if post_id is None:
        return None

    owner_id = _coerce_id(item.get("to_id")) or _coerce_id(item.get("owner_id"))

    single = _mapping(item.get("attachment"))
    photo = _mapping(single.get("photo"))
    video = _mapping(single.get("video"))

    raw_attachments = item.get("attachments")
    attachments: tuple[Attachment, ...] = ()
    if isinstance(raw_attachments, list):
        attachments = tuple(attachment_from_api_item(a) for a in raw_attachments)

    return WallPost(
        post_id=post_id,
        owner_id=owner_id,
        published_at=_coerce_timestamp(item.get("date")),
        text=item.get("text") if isinstance(item.get("text"), str) else "",
        reposted_text=_coerce_text(item.get("copy_text")),
        photo_caption=_coerce_text(photo.get("text")),
        video_caption=_coerce_text(video.get("text")),
        link_caption=_link_caption(single.get("link")),
        attachments=attachments,
    )


def unwrap_wall_response(payload: Any) -> Sequence[Any]:
    """
    Return the raw record list of a wall response.

    Accepts the bare list or a `{"response": [...]}` envelope. An `{"error": ...}`
    envelope raises WallResponseError.
    """
    if isinstance(payload, list):
        return payload

    if isinstance(payload, Mapping):
        error = payload.get("error")
        if isinstance(error, Mapping):
            msg = _coerce_str(error.get("error_msg")) or "Unknown API error"
            code = error.get("error_code")
            raise WallResponseError(msg, code if isinstance(code, int) else None)

        response = payload.get("response")
        if isinstance(response, list):
            return response

    raise WallResponseError("Wall response must be a list or contain a 'response' list")
