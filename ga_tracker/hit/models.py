from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ga_tracker.utils import get_item, to_float, to_text

HitParams = dict[str, Any]


class HitType(Enum):
    pageview = "pageview"
    ecommerce = "ecommerce"


class PageviewInfo(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    title: str | None = None
    slug: str | None = None

    @field_validator("title", "slug", mode="before")
    @classmethod
    def _none_if_not_text(cls, value: Any) -> Any:
        return to_text(value)

    @classmethod
    def from_mapping(cls, info: Mapping[str, Any]) -> "PageviewInfo":
        return cls(title=get_item(info, "title"), slug=get_item(info, "slug"))


class EcommerceItem(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    name: str = ""
    price: float = 0.0
    quantity: float = 0.0
    sku: str = ""

    @field_validator("name", "sku", mode="before")
    @classmethod
    def _empty_if_not_text(cls, value: Any) -> Any:
        return to_text(value, "")

    @field_validator("price", "quantity", mode="before")
    @classmethod
    def _coerce_float(cls, value: Any) -> float:
        return to_float(value)

    @classmethod
    def from_mapping(cls, item: Any) -> "EcommerceItem":
        if isinstance(item, EcommerceItem):
            return item

        return cls(
            name=get_item(item, "name", ""),
            price=get_item(item, "price"),
            quantity=get_item(item, "quantity"),
            sku=get_item(item, "sku", ""),
        )


class EcommerceInfo(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    currency_code: str | None = None
    price: float | None = None
    items: tuple[EcommerceItem, ...] = ()

    @field_validator("currency_code", mode="before")
    @classmethod
    def _none_if_not_text(cls, value: Any) -> Any:
        return to_text(value)

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value: Any) -> float | None:
        if value is None:
            return None
        return to_float(value)

    @classmethod
    def from_mapping(cls, info: Mapping[str, Any]) -> "EcommerceInfo":
        items = get_item(info, "items")
        if isinstance(items, Mapping):
            items = list(items.values())
        elif not isinstance(items, (list, tuple)):
            items = []

        return cls(
            currency_code=get_item(info, "currencyCode"),
            price=get_item(info, "price"),
            items=tuple(EcommerceItem.from_mapping(x) for x in items),
        )


@dataclass(frozen=True)
class EcommerceHits:
    transaction: HitParams
    items: list[HitParams] = field(default_factory=list)
