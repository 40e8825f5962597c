from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Union

from config.defaults import DEFAULT_GENERAL_OPTIONS, DEFAULT_OPTION_NAMES

RawValue = Union[str, int, float, None]


@dataclass(frozen=True)
class MealOption:
    name: str        # Display label only; allocation identifies options by position
    quantity: int


@dataclass(frozen=True)
class FlightManifest:
    total_passengers: int
    total_special_meals: int
    num_carts: int
    general_options: Tuple[MealOption, ...]

    def __post_init__(self):
        if len(self.general_options) not in (2, 3):
            raise ValueError(
                f"A flight needs 2 or 3 general meal options, got {len(self.general_options)}."
            )

    @property
    def num_general_options(self) -> int:
        return len(self.general_options)

    @property
    def option_names(self) -> List[str]:
        return [o.name for o in self.general_options]

    @property
    def option_quantities(self) -> List[int]:
        return [o.quantity for o in self.general_options]


# Cart number (1-based) -> manually entered special meal count
CartSpecialInput = Dict[int, int]


@dataclass
class ManifestForm:
    """Raw, unparsed form values as typed by the user."""
    passengers: RawValue = ""
    total_special_meals: RawValue = ""
    num_carts: RawValue = ""
    num_general_options: int = DEFAULT_GENERAL_OPTIONS
    option_names: List[str] = field(default_factory=lambda: list(DEFAULT_OPTION_NAMES))
    option_quantities: List[RawValue] = field(default_factory=lambda: ["", "", ""])
    special_meals_per_cart: Dict[int, RawValue] = field(default_factory=dict)

    @classmethod
    def from_manifest(cls, manifest: FlightManifest, cart_specials: CartSpecialInput) -> "ManifestForm":
        return cls(
            passengers=manifest.total_passengers,
            total_special_meals=manifest.total_special_meals,
            num_carts=manifest.num_carts,
            num_general_options=manifest.num_general_options,
            option_names=manifest.option_names,
            option_quantities=manifest.option_quantities,
            special_meals_per_cart=dict(cart_specials),
        )
