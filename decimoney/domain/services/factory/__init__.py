from .amounts_factory import AmountFactory

__all__ = [
    "AmountFactory",
]
