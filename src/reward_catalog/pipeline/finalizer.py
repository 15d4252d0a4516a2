from __future__ import annotations

import json
import sys
from typing import Iterable, List, Optional, TextIO, Tuple

from ..api_fetcher.schema import RewardRecord


def sort_key(record: RewardRecord) -> Tuple[int, str, str]:
    return (record.price, record.name, record.partner)


def sort_records(records: Iterable[RewardRecord]) -> List[RewardRecord]:
    """Total order: price, then name, then partner, all ascending."""
    return sorted(records, key=sort_key)


def to_json(records: Iterable[RewardRecord]) -> str:
    """
    Pretty-printed JSON array; keys in field order
    (name, price, description, stock, partner).
    """
    return json.dumps(
        [record.model_dump() for record in records],
        indent=4,
        ensure_ascii=False,
    )


def finalize(records: Iterable[RewardRecord], stream: Optional[TextIO] = None) -> List[RewardRecord]:
    """Sort, serialize and write the catalog; returns the ordered records."""
    ordered = sort_records(records)
    out = stream if stream is not None else sys.stdout
    out.write(to_json(ordered) + "\n")
    out.flush()
    return ordered
