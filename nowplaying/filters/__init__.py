from .deduplication import Deduplicator
from .promo_filter import PromoFilter

__all__ = ["Deduplicator", "PromoFilter"]
