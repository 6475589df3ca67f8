from .decimals import DECIMAL_ZERO, quantize_decimal, quantize_one_place, to_decimal
from .models import ActiveFlagMixin, ActiveQuerySet, BaseModel

__all__ = [
    "ActiveFlagMixin",
    "ActiveQuerySet",
    "BaseModel",
    "DECIMAL_ZERO",
    "quantize_decimal",
    "quantize_one_place",
    "to_decimal",
]
