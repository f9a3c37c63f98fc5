import time
from collections.abc import Callable
from urllib.parse import quote_plus

from ga_tracker.consts import AFFILIATION, CURRENCY_CODE, HIT_TYPE, TRANSACTION_ID
from ga_tracker.utils import format_number

from .models import EcommerceHits, EcommerceInfo, EcommerceItem, HitParams, PageviewInfo


def generate_transaction_id() -> str:
    """Return a time based ID: 8 hex digits of seconds and 5 of microseconds."""
    seconds, microseconds = divmod(time.time_ns() // 1000, 1_000_000)
    return f"{seconds:08x}{microseconds:05x}"


class HitBuilder:
    """Builds the Measurement Protocol parameters for each hit type.

    All methods are pure apart from the transaction ID, which comes from the
    injected ``transaction_id_factory``.
    """

    def __init__(
        self, transaction_id_factory: Callable[[], str] = generate_transaction_id
    ) -> None:
        self.transaction_id_factory = transaction_id_factory

    def build_pageview(self, defaults: HitParams, info: PageviewInfo) -> HitParams:
        return {
            **defaults,
            HIT_TYPE: "pageview",
            "dt": info.title,  # page title
            "dp": info.slug,  # page path, e.g. /home
        }

    def build_ecommerce_item(self, defaults: HitParams, item: EcommerceItem) -> HitParams:
        return {
            **defaults,
            HIT_TYPE: "item",
            "in": quote_plus(item.name),
            "ip": quote_plus(format_number(item.price)),
            "iq": format_number(item.quantity),
            "ic": quote_plus(item.sku),
            "iv": quote_plus(AFFILIATION),
        }

    def build_ecommerce(self, defaults: HitParams, info: EcommerceInfo) -> EcommerceHits:
        transaction_id = self.transaction_id_factory()
        transaction = {
            **defaults,
            HIT_TYPE: "transaction",
            TRANSACTION_ID: transaction_id,
            "ta": quote_plus(AFFILIATION),  # affiliation
            "tr": None if info.price is None else format_number(info.price),  # revenue
            CURRENCY_CODE: info.currency_code,
        }

        item_defaults = {
            **defaults,
            TRANSACTION_ID: transaction_id,
            CURRENCY_CODE: info.currency_code,
        }
        items = [self.build_ecommerce_item(item_defaults, x) for x in info.items]

        return EcommerceHits(transaction, items)
