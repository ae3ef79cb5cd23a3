from .resolve_price_use_case import ResolvePriceUseCase

__all__ = ["ResolvePriceUseCase"]
