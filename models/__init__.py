from models.manifest import MealOption, FlightManifest, CartSpecialInput, ManifestForm
from models.allocation import AuxiliaryValues, CartAllocation, ExcessEntry, MealShortage
