"""Shared record types and factories for fielddiff integration tests.

Models a marketing activity with nested rules, a prize list keyed by
prize id and per-prize coupon lists, the shape of record an update handler
would snapshot before and after saving.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from fielddiff.schema.markers import diff_field, diff_id

_START = datetime(2026, 3, 1, 9, 0, 0)
_END = datetime(2026, 3, 31, 21, 0, 0)


class ActivityStatus(StrEnum):
    DRAFT = "draft"
    PUBLISHED = "published"
    CLOSED = "closed"


@dataclass
class Coupon:
    code: str = diff_field("Coupon code", identity=True, default="")
    amount: Decimal = diff_field("Amount", default=Decimal("0"))
    expires_at: datetime | None = diff_field("Expires", date_format="%Y-%m-%d", default=None)


@dataclass
class Prize:
    prize_id: int | None = diff_id()
    name: str = diff_field("Prize name", default="")
    stock: int = diff_field("Stock", default=0)
    coupons: list[Coupon] = diff_field("Coupons", default_factory=list)
    warehouse_ref: str = ""


@dataclass
class ParticipationRules:
    max_per_user: int = diff_field("Max per user", default=1)
    regions: list[str] = diff_field("Regions", default_factory=list)


@dataclass
class MarketingActivity:
    activity_id: int = diff_id()
    name: str = diff_field("Activity name", default="")
    status: ActivityStatus = diff_field("Status", default=ActivityStatus.DRAFT)
    budget: Decimal = diff_field("Budget", default=Decimal("0"))
    starts_at: datetime | None = diff_field("Start time", default=None)
    ends_at: datetime | None = diff_field("End time", date_format="%Y-%m-%d %H:%M", default=None)
    rules: ParticipationRules | None = diff_field("Rules", default=None)
    prizes: list[Prize] | None = diff_field("Prizes", default=None)
    updated_by: str = ""


def make_activity(**overrides: object) -> MarketingActivity:
    """Create a fully populated activity with sensible defaults for testing."""
    values: dict[str, object] = {
        "activity_id": 42,
        "name": "Spring raffle",
        "status": ActivityStatus.PUBLISHED,
        "budget": Decimal("1000.00"),
        "starts_at": _START,
        "ends_at": _END,
        "rules": ParticipationRules(max_per_user=3, regions=["north", "south"]),
        "prizes": [
            Prize(
                prize_id=1,
                name="Mug",
                stock=100,
                coupons=[Coupon("MUG10", Decimal("10"), datetime(2026, 4, 30, 23, 59))],
            ),
            Prize(prize_id=2, name="Bike", stock=2),
        ],
        "updated_by": "alice",
    }
    values.update(overrides)
    return MarketingActivity(**values)  # type: ignore[arg-type]
