from .hit_builder import HitBuilder, generate_transaction_id
from .models import EcommerceHits, EcommerceInfo, EcommerceItem, HitParams, HitType, PageviewInfo

__all__ = [
    "EcommerceHits",
    "EcommerceInfo",
    "EcommerceItem",
    "HitBuilder",
    "HitParams",
    "HitType",
    "PageviewInfo",
    "generate_transaction_id",
]
