from __future__ import annotations

import unittest
from datetime import datetime, timezone

from vk_feed.errors import WallResponseError
from vk_feed.normalize import (
    attachment_from_api_item,
    unwrap_wall_response,
    wall_post_from_api_item,
)
from vk_feed.post import (
    AudioAttachment,
    DocAttachment,
    LinkAttachment,
    LinkCaption,
    OtherAttachment,
    PhotoAttachment,
    VideoAttachment,
)


class TestWallPostFromApiItem(unittest.TestCase):
    def test_extracts_common_fields(self) -> None:
        item = {
            "id": 5,
            "to_id": -42,
            "date": 1735689600,
            "text": "Hello",
            "copy_text": "Repost comment",
            "attachment": {
                "type": "photo",
                "photo": {"text": "Photo caption"},
                "video": {"text": ""},
                "link": {"url": "https://example.com", "title": "T", "description": "D"},
            },
            "attachments": [
                {"type": "photo", "photo": {"src_big": "https://example.com/a.jpg"}},
                {"type": "doc", "doc": {"url": "https://example.com/d", "title": "Doc"}},
            ],
        }

        post = wall_post_from_api_item(item)
        self.assertIsNotNone(post)
        assert post is not None

        self.assertEqual(post.post_id, "5")
        self.assertEqual(post.owner_id, "-42")
        self.assertEqual(post.published_at, datetime(2025, 1, 1, tzinfo=timezone.utc))
        self.assertEqual(post.text, "Hello")
        self.assertEqual(post.reposted_text, "Repost comment")
        self.assertEqual(post.photo_caption, "Photo caption")
        self.assertIsNone(post.video_caption)
        self.assertEqual(post.link_caption, LinkCaption(title="T", description="D", url="https://example.com"))
        self.assertEqual(
            post.attachments,
            (
                PhotoAttachment(src_url="https://example.com/a.jpg"),
                DocAttachment(url="https://example.com/d", title="Doc"),
            ),
        )

    def test_owner_id_fallback_and_missing_optionals(self) -> None:
        post = wall_post_from_api_item({"id": "7", "owner_id": 3})
        assert post is not None
        self.assertEqual(post.owner_id, "3")
        self.assertEqual(post.text, "")
        self.assertIsNone(post.reposted_text)
        self.assertIsNone(post.link_caption)
        self.assertIsNone(post.published_at)
        self.assertEqual(post.attachments, ())

    def test_returns_none_for_non_posts(self) -> None:
        self.assertIsNone(wall_post_from_api_item(12))
        self.assertIsNone(wall_post_from_api_item({"text": "no id"}))
        self.assertIsNone(wall_post_from_api_item({"id": True}))


class TestAttachmentFromApiItem(unittest.TestCase):
    def test_variants(self) -> None:
        self.assertEqual(
            attachment_from_api_item({"type": "photo", "photo": {"photo_604": "https://x/p.jpg"}}),
            PhotoAttachment(src_url="https://x/p.jpg"),
        )
        self.assertEqual(
            attachment_from_api_item({"type": "link", "link": {"url": "https://x", "title": "X"}}),
            LinkAttachment(url="https://x", title="X"),
        )
        self.assertEqual(attachment_from_api_item({"type": "video", "video": {}}), VideoAttachment())
        self.assertEqual(attachment_from_api_item({"type": "audio"}), AudioAttachment())
        self.assertEqual(attachment_from_api_item({"type": "poll"}), OtherAttachment(kind="poll"))
        self.assertEqual(attachment_from_api_item("junk"), OtherAttachment(kind=None))

    def test_missing_payload_yields_empty_variant(self) -> None:
        self.assertEqual(attachment_from_api_item({"type": "doc"}), DocAttachment())


class TestUnwrapWallResponse(unittest.TestCase):
    def test_accepts_bare_list_and_envelope(self) -> None:
        self.assertEqual(unwrap_wall_response([1, {"id": 1}]), [1, {"id": 1}])
        self.assertEqual(unwrap_wall_response({"response": [0]}), [0])

    def test_error_envelope_raises(self) -> None:
        with self.assertRaises(WallResponseError) as ctx:
            unwrap_wall_response({"error": {"error_code": 15, "error_msg": "Access denied"}})
        self.assertEqual(str(ctx.exception), "Access denied")
        self.assertEqual(ctx.exception.code, 15)

    def test_unexpected_shape_raises(self) -> None:
        with self.assertRaises(WallResponseError):
            unwrap_wall_response("nope")


if __name__ == "__main__":
    unittest.main()
