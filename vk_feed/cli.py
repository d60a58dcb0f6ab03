from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Sequence

from .config import config_sha256, load_config
from .errors import ConfigError, WallResponseError
from .normalize import unwrap_wall_response
from .pipeline import build_feed_items
from .post_filter import PostFilter
from .run_log import RunLogger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vk_feed")

    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser(
        "render",
        help="Convert a saved wall response into feed items (JSON Lines).",
    )
    render.add_argument(
        "--config",
        required=True,
        help="Path to YAML config file.",
    )
    source = render.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--input",
        help="Path to a JSON wall response.",
    )
    source.add_argument(
        "--offline",
        action="store_true",
        help="Use a small built-in sample response instead of --input.",
    )
    render.add_argument(
        "--out",
        required=True,
        help="Output directory for items and logs.",
    )
    render.set_defaults(_handler=_cmd_render)

    return parser


def _eprint(message: str) -> None:
    print(message, file=sys.stderr)


def _read_response(path: str | Path) -> Any:
    p = Path(path)
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise WallResponseError(f"Failed to read wall response: {p}") from e
    except json.JSONDecodeError as e:
        raise WallResponseError(f"Invalid JSON in {p}: {e}") from e


def _cmd_render(args: argparse.Namespace) -> int:
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)

    log_path = out_dir / "run.log"
    items_path = out_dir / "items.jsonl"

    with RunLogger.open(log_path, overwrite=True) as log:
        log.info(
            "render_command_started",
            config_path=str(args.config),
            input_path=args.input,
            offline=bool(args.offline),
            out_dir=str(out_dir),
        )

        try:
            cfg = load_config(args.config)
            post_filter = PostFilter.from_config(cfg.filters)

            log.info(
                "config_loaded",
                config_sha256=config_sha256(cfg),
                include=cfg.filters.include,
                exclude=cfg.filters.exclude,
            )

            if args.offline:
                from .offline import sample_wall_response

                raw_items = sample_wall_response()
            else:
                raw_items = unwrap_wall_response(_read_response(args.input))

            items = build_feed_items(
                raw_items,
                post_filter=post_filter,
                base_url=cfg.feed.base_url,
                logger=log,
            )

            with items_path.open("w", encoding="utf-8", newline="\n") as fp:
                for item in items:
                    fp.write(json.dumps(item.to_dict(), ensure_ascii=False, sort_keys=True) + "\n")

            posts = max(0, len(raw_items) - 1)
            log.info("feed_items_built", posts=posts, items=len(items), path=str(items_path))

            print(f"posts={posts}")
            print(f"items={len(items)}")
            print(f"filtered={log.counts['post_filtered']}")
            print(f"malformed={log.counts['post_skipped_malformed']}")
            print(f"items_jsonl={items_path}")
            print(f"run_log={log_path}")

            return 0
        except Exception as e:
            log.exception("render_command_failed", exc=e)
            raise


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        handler = getattr(args, "_handler")
        return int(handler(args))
    except ConfigError as e:
        _eprint(str(e))
        return 2
    except WallResponseError as e:
        _eprint(str(e))
        return 3
    except KeyboardInterrupt:
        _eprint("Interrupted")
        return 130
    except Exception as e:
        _eprint(f"Unexpected error: {e}")
        return 1
