from dataclasses import dataclass, field
from typing import Dict, List, Optional

from models.allocation import AuxiliaryValues, CartAllocation, ExcessEntry, MealShortage
from data.validator import ValidationResult


@dataclass
class DistributionResult:
    valid: bool
    validation: ValidationResult
    allocation: List[CartAllocation] = field(default_factory=list)
    excess: List[ExcessEntry] = field(default_factory=list)
    shortage: Optional[MealShortage] = None
    aux: Optional[AuxiliaryValues] = None

    @property
    def errors(self) -> List[str]:
        return self.validation.errors


@dataclass
class RedistributionResult:
    adjusted_allocation: List[CartAllocation]
    updated_excess: List[ExcessEntry]
    placed_by_option: Dict[int, int] = field(default_factory=dict)  # option index -> units placed
    explanation_steps: List[str] = field(default_factory=list)
