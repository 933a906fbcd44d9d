"""Pydantic-схемы для записей о продажах."""

import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    StringConstraints,
)

PRODUCT_NAME_MAX_LENGTH = 255
# NUMERIC(12, 2): 10 цифр до запятой
MAX_AMOUNT = Decimal("9999999999.99")
CENTS = Decimal("0.01")

BUSINESS_FIELDS = (
    "product_name",
    "q1_sales",
    "q2_sales",
    "q3_sales",
    "q4_sales",
    "target",
)
AMOUNT_FIELDS = BUSINESS_FIELDS[1:]


def _round_cents(value: Decimal) -> Decimal:
    # "+ 0" превращает -0.00 в 0.00
    return value.quantize(CENTS, rounding=ROUND_HALF_UP) + 0


ProductName = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, min_length=1, max_length=PRODUCT_NAME_MAX_LENGTH
    ),
]

Amount = Annotated[
    Decimal,
    Field(ge=0, le=MAX_AMOUNT, allow_inf_nan=False),
    AfterValidator(_round_cents),
]

# В JSON суммы отдаются строкой с двумя знаками после запятой: "10.00"
AmountOut = Annotated[
    Decimal,
    PlainSerializer(lambda v: f"{v:.2f}", return_type=str, when_used="json"),
]


class SalesDataPayload(BaseModel):
    """Типизированные данные для создания или обновления записи."""

    model_config = ConfigDict(extra="ignore")

    product_name: ProductName
    q1_sales: Amount
    q2_sales: Amount
    q3_sales: Amount
    q4_sales: Amount
    target: Amount


class SalesRecordRead(BaseModel):
    """Запись о продажах в том виде, в каком она уходит через API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    product_name: str
    q1_sales: AmountOut
    q2_sales: AmountOut
    q3_sales: AmountOut
    q4_sales: AmountOut
    target: AmountOut
    created_at: datetime.datetime
    updated_at: datetime.datetime
