from __future__ import annotations

import copy
from typing import Any

_SAMPLE_TEXT_1 = (
    "Субботник в парке в эту субботу, начинаем в 10:00 у главного входа<br>"
    "Перчатки и мешки выдадим на месте, приходите с друзьями!<br>"
    "#субботник #городской_парк"
)
_SAMPLE_TEXT_2 = "[id1|Павел] подготовил отчёт о прошедшей встрече #отчёт"
_SAMPLE_TEXT_3 = "Реклама: скидки на всё до конца недели"

# Element 0 is the post count, as in the wall.get response.
_DEFAULT_SAMPLE_RESPONSE: list[Any] = [
    3,
    {
        "id": 101,
        "to_id": -1,
        "date": 1735689600,
        "text": _SAMPLE_TEXT_1,
        "attachments": [
            {"type": "photo", "photo": {"src_big": "https://example.com/photo-101.jpg"}},
            {"type": "video", "video": {"title": "Прошлый субботник"}},
        ],
    },
    {
        "id": 102,
        "to_id": -1,
        "date": 1735776000,
        "text": _SAMPLE_TEXT_2,
        "attachment": {
            "type": "link",
            "link": {
                "url": "https://example.com/report",
                "title": "Отчёт о встрече",
                "description": "Главные решения и планы на месяц",
            },
        },
        "attachments": [
            {"type": "link", "link": {"url": "https://example.com/report", "title": "Отчёт о встрече"}},
            {"type": "doc", "doc": {"url": "https://example.com/minutes.pdf", "title": "Протокол"}},
        ],
    },
    {
        "id": 103,
        "to_id": -1,
        "date": 1735862400,
        "text": _SAMPLE_TEXT_3,
    },
]


def sample_wall_response() -> list[Any]:
    """
    Network-free wall response for smoke checks.

    Covers multi-paragraph text, mention links, a link caption, and photo, doc,
    link and video attachments.
    """
    return copy.deepcopy(_DEFAULT_SAMPLE_RESPONSE)
