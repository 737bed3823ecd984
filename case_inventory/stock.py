import logging
from typing import Optional, Sequence
import pandas as pd

from . import settings
from .schemas import DimensionSummary, InventoryItem, StockReport

logger = logging.getLogger(__name__)


def _matches(value: str, wanted: Optional[str]) -> bool:
    return not wanted or value.lower() == wanted.lower()


def _summarize(df: pd.DataFrame, dimension: str) -> list[DimensionSummary]:
    if df.empty:
        return []

    grouped = df.groupby(dimension, sort=False).agg(
        total=("zeroed", "size"),
        zeroed=("zeroed", "sum"),
        below_minimum=("below_minimum", "sum"),
    )
    return [
        DimensionSummary(
            label=str(label),
            total=int(row["total"]),
            zeroed=int(row["zeroed"]),
            below_minimum=int(row["below_minimum"]),
        )
        for label, row in grouped.iterrows()
    ]


def classify(
    items: Sequence[InventoryItem],
    threshold: int,
    type_filter: Optional[str] = None,
    color_filter: Optional[str] = None,
) -> StockReport:
    """
    Splits the (optionally filtered) catalog into three disjoint stock buckets:

    - zeroed: quantity == 0
    - below_minimum: 0 < quantity <= threshold
    - healthy: quantity > threshold

    `threshold` is expected to be a positive integer; callers validate it.
    Type and color filters compare case-insensitively; empty means no filter.
    The unique type/color lists always come from the unfiltered catalog.
    """
    filtered = [
        item
        for item in items
        if _matches(item.type, type_filter) and _matches(item.color, color_filter)
    ]

    zeroed, below_minimum, healthy = [], [], []
    for item in filtered:
        if item.quantity == 0:
            zeroed.append(item)
        elif item.quantity <= threshold:
            below_minimum.append(item)
        else:
            healthy.append(item)

    df = pd.DataFrame(
        [
            {
                "type": item.type or settings.UNSPECIFIED_TYPE,
                "color": item.color or settings.UNSPECIFIED_COLOR,
                "zeroed": item.quantity == 0,
                "below_minimum": 0 < item.quantity <= threshold,
            }
            for item in filtered
        ],
        columns=["type", "color", "zeroed", "below_minimum"],
    )

    report = StockReport(
        threshold=threshold,
        zeroed=zeroed,
        below_minimum=below_minimum,
        healthy=healthy,
        by_type=_summarize(df, "type"),
        by_color=_summarize(df, "color"),
        types_unique=sorted({item.type for item in items if item.type}),
        colors_unique=sorted({item.color for item in items if item.color}),
        total_filtered=len(filtered),
    )
    logger.debug(
        f"Stock classified (threshold={threshold}): {len(zeroed)} zeroed, "
        f"{len(below_minimum)} below minimum, {len(healthy)} healthy"
    )
    return report
