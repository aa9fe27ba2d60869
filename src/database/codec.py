"""JSON encoding of the ordered item list.

The stored value is a JSON array of ``{"id": ..., "text": ...}`` objects.
Array order is display order.
"""

import json
import logging
from typing import Iterable, List

from pydantic import TypeAdapter

from models.clipitem import ClipItem

logger = logging.getLogger(__name__)

_ITEM_LIST = TypeAdapter(List[ClipItem])


def encode_items(items: Iterable[ClipItem]) -> str:
    return json.dumps(
        [item.model_dump() for item in items],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def decode_items(raw: str) -> List[ClipItem]:
    """Parse a stored value.

    Raises ``ValueError`` (``pydantic.ValidationError`` is a subclass) when
    the value is not a JSON array of item objects. Records repeating an
    earlier id are dropped so the result always has distinct ids.
    """
    items = _ITEM_LIST.validate_json(raw)

    seen = set()
    unique: List[ClipItem] = []
    for item in items:
        if item.id in seen:
            logger.warning(f"Dropping stored item with duplicate id {item.id}")
            continue
        seen.add(item.id)
        unique.append(item)
    return unique
