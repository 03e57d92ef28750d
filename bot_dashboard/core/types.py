"""
Core data types for bot trades and positions as served by the dashboard API.
"""

from __future__ import annotations
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


BOTS = ("flipperbot", "lutz", "quant", "ditz", "trader")


class InvalidRecordError(TypeError):
    """Structurally invalid record input (not a list, missing id/symbol)."""


class TradeAction(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


def record_value(record: Any, key: str, default: Any = None) -> Any:
    """Read a field from a mapping (raw API JSON) or a record object."""
    if isinstance(record, Mapping):
        return record.get(key, default)
    return getattr(record, key, default)


def require_sequence(value: Any, name: str) -> Sequence:
    """Reject None, strings, mappings and other non-list inputs."""
    if value is None or isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise InvalidRecordError(f"{name} must be a list of records, got {type(value).__name__}")
    return value


def pct_or_zero(value: Any) -> float:
    """Missing percentage -> 0.0. Non-numeric values raise ValueError."""
    if value is None:
        return 0.0
    return float(value)


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def _required(data: Mapping, key: str) -> Any:
    value = data.get(key)
    if value is None or value == "":
        raise InvalidRecordError(f"record is missing required field '{key}'")
    return value


def parse_action(value: Any) -> Union[TradeAction, str]:
    """BUY/SELL become TradeAction; anything else stays an (upper-cased) string."""
    text = str(value or "").strip().upper()
    try:
        return TradeAction(text)
    except ValueError:
        return text


@dataclass
class TradeRecord:
    """One bot action (BUY or SELL). profit_loss_pct is set on closing trades."""
    id: Union[int, str]
    symbol: str
    action: Union[TradeAction, str]
    profit_loss_pct: Optional[float] = None
    profit_loss: Optional[float] = None
    price: Optional[float] = None
    buy_price: Optional[float] = None
    quantity: Optional[float] = None
    is_live: bool = False
    timestamp: Optional[str] = None
    raw: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping) -> "TradeRecord":
        if not isinstance(data, Mapping):
            raise InvalidRecordError(f"trade record must be an object, got {type(data).__name__}")
        return cls(
            id=_required(data, "id"),
            symbol=str(_required(data, "symbol")),
            action=parse_action(data.get("action")),
            profit_loss_pct=_optional_float(data.get("profit_loss_pct")),
            profit_loss=_optional_float(data.get("profit_loss")),
            price=_optional_float(data.get("price")),
            buy_price=_optional_float(data.get("buy_price")),
            quantity=_optional_float(data.get("quantity")),
            is_live=bool(data.get("is_live", False)),
            timestamp=data.get("signal_date") or data.get("created_at") or data.get("timestamp"),
            raw=dict(data),
        )


@dataclass
class PositionRecord:
    """Open (unrealized) holding, simulated or live."""
    id: Union[int, str]
    symbol: str
    total_return_pct: Optional[float] = None
    is_live: bool = False
    avg_price: Optional[float] = None
    current_price: Optional[float] = None
    quantity: Optional[float] = None
    raw: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping) -> "PositionRecord":
        if not isinstance(data, Mapping):
            raise InvalidRecordError(f"position record must be an object, got {type(data).__name__}")
        return cls(
            id=_required(data, "id"),
            symbol=str(_required(data, "symbol")),
            total_return_pct=_optional_float(data.get("total_return_pct")),
            is_live=bool(data.get("is_live", False)),
            avg_price=_optional_float(data.get("avg_price")),
            current_price=_optional_float(data.get("current_price")),
            quantity=_optional_float(data.get("quantity")),
            raw=dict(data),
        )
