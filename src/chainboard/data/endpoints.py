"""
Endpoint normalizer.

Raw endpoint lists come either as bare address strings or as partial
endpoint objects. Each raw value is first classified into a tagged variant
and then resolved into a uniform Endpoint record.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Union

from .models import Endpoint, provider_from_address


@dataclass(frozen=True)
class StringAddress:
    address: str


@dataclass(frozen=True)
class PartialRecord:
    fields: Dict[str, Any]


RawEndpoint = Union[StringAddress, PartialRecord]


def classify(raw: Any) -> List[RawEndpoint]:
    """Split a raw endpoint value into tagged variants. Absent or empty input gives []."""
    if not raw:
        return []
    items = [raw] if isinstance(raw, (str, dict)) else list(raw)
    out: List[RawEndpoint] = []
    for item in items:
        if isinstance(item, str):
            out.append(StringAddress(item))
        elif isinstance(item, Endpoint):
            out.append(PartialRecord(item.model_dump(by_alias=True, exclude_none=True)))
        else:
            out.append(PartialRecord(dict(item)))
    return out


def resolve(variant: RawEndpoint, now: datetime) -> Endpoint:
    if isinstance(variant, StringAddress):
        return Endpoint(
            address=variant.address,
            provider=provider_from_address(variant.address),
            is_active=True,
            last_checked=now,
        )
    fields = dict(variant.fields)
    # isActive/lastChecked always reflect this registration, whatever the caller sent
    for key in ("isActive", "is_active", "lastChecked", "last_checked"):
        fields.pop(key, None)
    return Endpoint(**fields, is_active=True, last_checked=now)


def normalize_endpoints(raw: Any) -> List[Endpoint]:
    now = datetime.now()
    return [resolve(v, now) for v in classify(raw)]
