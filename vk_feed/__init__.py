from __future__ import annotations

from .config import config_sha256, load_config
from .config_schema import AppConfig
from .errors import ConfigError, PatternError, WallResponseError
from .pipeline import FeedItem, build_feed_item, build_feed_items
from .post_filter import PostFilter

__all__ = [
    "AppConfig",
    "ConfigError",
    "FeedItem",
    "PatternError",
    "PostFilter",
    "WallResponseError",
    "build_feed_item",
    "build_feed_items",
    "config_sha256",
    "load_config",
]
