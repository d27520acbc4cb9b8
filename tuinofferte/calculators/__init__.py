from .registry import get_calculator, has_calculator, list_calculators

__all__ = ["get_calculator", "has_calculator", "list_calculators"]
