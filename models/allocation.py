from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class AuxiliaryValues:
    total_general: int
    base_capacity_per_cart: int
    remainder_carts: int         # Carts 1..remainder_carts get one extra general slot
    option_shares: List[float]   # Proportional weights, not re-normalized after rounding


@dataclass
class CartAllocation:
    cart_index: int
    special: int
    general_by_option: List[int]
    total: int
    general_capacity: int = 0
    explanation_steps: List[str] = field(default_factory=list)

    @property
    def cart_name(self) -> str:
        return f"Cart {self.cart_index}"

    def free_space(self, max_capacity: int) -> int:
        return max_capacity - self.total


@dataclass
class ExcessEntry:
    option_label: str
    quantity: int                        # supplied - placed (negative = deficit)
    option_index: Optional[int] = None   # None for the special category

    @property
    def is_general(self) -> bool:
        return self.option_index is not None


@dataclass
class MealShortage:
    is_short: bool
    missing: int
    coverage_percent: float

    @property
    def message(self) -> str:
        if not self.is_short:
            return "✅ Meal Quantity OK"
        return (
            "⚠️ PROBLEM: MEALS MISSING! Not enough meals for all passengers. "
            f"({self.missing} meals missing. Coverage: {self.coverage_percent:.1f}%)"
        )
