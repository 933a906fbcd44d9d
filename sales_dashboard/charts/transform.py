"""Подготовка данных для 3D-диаграммы продаж."""

import enum
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any, NamedTuple

QUARTERS = ("q1_sales", "q2_sales", "q3_sales", "q4_sales")
QUARTER_COLORS = ("#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7")
PRODUCT_PALETTE = (
    "#4ECDC4",
    "#45B7D1",
    "#96CEB4",
    "#FFEAA7",
    "#DDA0DD",
    "#98D8C8",
)
DEFAULT_BAR_HEIGHT = Decimal(5)


class ChartMode(str, enum.Enum):
    """Доступные проекции данных."""

    QUARTERLY = "quarterly"
    PERFORMANCE = "performance"
    PRODUCT = "product"


class QuarterPoint(NamedTuple):
    label: str
    total_value: Decimal
    color: str


class PerformancePoint(NamedTuple):
    product_name: str
    total_sales: Decimal
    target: Decimal


class ProductPoint(NamedTuple):
    product_name: str
    total_value: Decimal
    color: str


ChartPoint = QuarterPoint | PerformancePoint | ProductPoint


def _field(record: Any, name: str) -> Any:
    # Записи приходят либо моделями, либо словарями из JSON
    if isinstance(record, Mapping):
        return record[name]
    return getattr(record, name)


def _amount(record: Any, name: str) -> Decimal:
    return Decimal(str(_field(record, name)))


def _total_sales(record: Any) -> Decimal:
    return sum((_amount(record, q) for q in QUARTERS), Decimal(0))


def build_chart_data(
    records: Sequence[Any], mode: ChartMode | str
) -> list[ChartPoint]:
    """
    Строит точки диаграммы для выбранной проекции.

    Args:
        records: Записи о продажах (модели или словари с полями
                 product_name, q1_sales..q4_sales, target).
        mode: Проекция: quarterly, performance или product.

    Returns:
        Список точек в порядке входных записей (для quarterly: Q1..Q4).

    Raises:
        ValueError: Если передана неизвестная проекция.
    """
    mode = ChartMode(mode)
    if not records:
        return []

    if mode is ChartMode.QUARTERLY:
        return [
            QuarterPoint(
                label=f"Q{i}",
                total_value=sum((_amount(r, quarter) for r in records), Decimal(0)),
                color=QUARTER_COLORS[i - 1],
            )
            for i, quarter in enumerate(QUARTERS, start=1)
        ]

    if mode is ChartMode.PERFORMANCE:
        return [
            PerformancePoint(
                product_name=_field(r, "product_name"),
                total_sales=_total_sales(r),
                target=_amount(r, "target"),
            )
            for r in records
        ]

    return [
        ProductPoint(
            product_name=_field(r, "product_name"),
            total_value=_total_sales(r),
            color=PRODUCT_PALETTE[index % len(PRODUCT_PALETTE)],
        )
        for index, r in enumerate(records)
    ]


def chart_scale(points: Sequence[ChartPoint], mode: ChartMode | str) -> Decimal:
    """
    Максимальное значение среди точек, используется для нормализации высоты.

    Для performance учитываются и продажи, и цели. Для пустого набора
    (или если все значения нулевые) возвращается 1, чтобы не делить на ноль.
    """
    mode = ChartMode(mode)
    values: list[Decimal] = []
    for point in points:
        if mode is ChartMode.PERFORMANCE:
            values.extend((point.total_sales, point.target))  # type: ignore[union-attr]
        else:
            values.append(point.total_value)  # type: ignore[union-attr]

    scale = max(values, default=Decimal(0))
    return scale if scale > 0 else Decimal(1)


def normalized_height(
    value: Decimal, scale: Decimal, max_height: Decimal = DEFAULT_BAR_HEIGHT
) -> Decimal:
    """Высота столбца относительно самого высокого."""
    return value / scale * max_height
