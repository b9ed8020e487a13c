from .mapper import AmountMapper
from .models import PersistedAmount, PersistedContext

__all__ = [
    "AmountMapper",
    "PersistedAmount",
    "PersistedContext",
]
