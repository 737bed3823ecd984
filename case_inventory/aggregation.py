import logging
from typing import Sequence, Union
import pandas as pd

from . import settings
from .schemas import AggregateBucket, CatalogStats, InventoryItem, QuantityBucket

logger = logging.getLogger(__name__)

_FRAME_COLUMNS = ["brand", "type", "color", "quantity", "value"]


def _to_frame(items: Sequence[InventoryItem]) -> pd.DataFrame:
    """Flattens the catalog into one row per item, with empty dimensions labelled."""
    df = pd.DataFrame(
        [
            {
                "brand": item.brand,
                "type": item.type,
                "color": item.color,
                "quantity": item.quantity,
                "value": item.stock_value,
            }
            for item in items
        ],
        columns=_FRAME_COLUMNS,
    )
    # Quantities stay Python ints so totals are exact past the int64 range.
    df = df.astype({"quantity": object, "value": "float64"})

    df["brand"] = df["brand"].replace("", settings.UNSPECIFIED_BRAND)
    df["type"] = df["type"].replace("", settings.UNSPECIFIED_TYPE)
    df["color"] = df["color"].replace("", settings.UNSPECIFIED_COLOR)
    return df


def _buckets(
    df: pd.DataFrame, dimension: str, with_value: bool = True
) -> list[Union[AggregateBucket, QuantityBucket]]:
    if df.empty:
        return []

    # sort=False keeps buckets in first-appearance order
    grouped = df.groupby(dimension, sort=False)[["quantity", "value"]].sum()
    if not with_value:
        return [
            QuantityBucket(label=str(label), quantity=int(row["quantity"]))
            for label, row in grouped.iterrows()
        ]
    return [
        AggregateBucket(
            label=str(label),
            quantity=int(row["quantity"]),
            value=float(row["value"]),
        )
        for label, row in grouped.iterrows()
    ]


def aggregate(
    items: Sequence[InventoryItem], top_limit: int = settings.TOP_ITEMS_LIMIT
) -> CatalogStats:
    """
    Computes catalog totals, the brand/type/color breakdowns and the best
    stocked items. Always a full recomputation over `items`.
    """
    df = _to_frame(items)

    # Python's sort is stable, so ties keep their catalog order.
    top_items = sorted(items, key=lambda item: item.quantity, reverse=True)[:top_limit]

    stats = CatalogStats(
        total_models=len(df),
        total_units=sum(item.quantity for item in items),
        total_value=float(df["value"].sum()),
        by_brand=_buckets(df, "brand"),
        by_type=_buckets(df, "type"),
        by_color=_buckets(df, "color", with_value=False),
        top_items=top_items,
    )
    logger.debug(
        f"Aggregated {stats.total_models} models, {stats.total_units} units, "
        f"value {stats.total_value:.2f}"
    )
    return stats
