from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from vk_feed.run_log import RunLogger


class TestRunLogger(unittest.TestCase):
    def test_writes_one_json_object_per_line(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "logs" / "run.log"
            with RunLogger.open(path) as log:
                log.info("post_filtered", post_id="12")
                log.warning("odd_record", index=3)
                try:
                    raise ValueError("boom")
                except ValueError as e:
                    log.exception("failed", exc=e)

                counts = dict(log.counts)

            records = [json.loads(ln) for ln in path.read_text(encoding="utf-8").splitlines()]

        self.assertEqual([r["event"] for r in records], ["post_filtered", "odd_record", "failed"])
        self.assertEqual([r["level"] for r in records], ["INFO", "WARN", "ERROR"])
        self.assertEqual(records[0]["post_id"], "12")
        self.assertNotIn("data", records[0])
        self.assertEqual(records[1]["data"], {"index": 3})
        self.assertEqual(records[2]["data"]["error"]["type"], "ValueError")
        self.assertEqual(len({r["session_id"] for r in records}), 1)
        self.assertEqual(counts, {"post_filtered": 1, "odd_record": 1, "failed": 1})

    def test_overwrite_then_append_after_reopen(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "run.log"
            path.write_text("stale\n", encoding="utf-8")

            log = RunLogger.open(path, overwrite=True)
            log.info("first")
            log.close()
            log.info("second")
            log.close()

            lines = path.read_text(encoding="utf-8").splitlines()

        self.assertEqual([json.loads(ln)["event"] for ln in lines], ["first", "second"])


if __name__ == "__main__":
    unittest.main()
