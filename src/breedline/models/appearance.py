"""Visual description of a bird, resolved from its genotype.

Each body part carries a color; chest and wings also carry a plumage pattern.
``secondary_color`` is the accent used by patterned plumage (lacing rim,
barring stripe, splash speckle).
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class PartColor(str, Enum):
    """Plumage colors with their display hex value."""

    hex: str

    def __new__(cls, value: str, hex_code: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.hex = hex_code
        return obj

    WHITE = ("white", "#FAFAFA")
    BUFF = ("buff", "#FFCC80")
    GOLD = ("gold", "#FFB300")
    RED = ("red", "#E53935")
    MAHOGANY = ("mahogany", "#6D4C41")
    BROWN = ("brown", "#8D6E63")
    BLACK = ("black", "#212121")
    BLUE = ("blue", "#78909C")  # Blue-gray (Andalusian)
    SILVER = ("silver", "#BDBDBD")
    GREEN_BLACK = ("green_black", "#1B5E20")  # Beetle-green sheen
    WHEATEN = ("wheaten", "#FFE082")


class PlumagePattern(str, Enum):
    SOLID = "solid"
    LACED = "laced"  # Feather edge in a different color (Wyandotte)
    DOUBLE_LACED = "double_laced"  # Double ring (Barnevelder)
    BARRED = "barred"  # Alternating light/dark stripes (Plymouth Rock)
    MOTTLED = "mottled"  # White-tipped feathers (Ancona)
    COLUMBIAN = "columbian"  # Light body, dark neck/tail (Light Brahma)
    SPLASH = "splash"  # White with blue/black speckles


class TailStyle(str, Enum):
    SHORT = "short"
    SICKLE = "sickle"


class CombStyle(str, Enum):
    SINGLE = "single"
    NONE = "none"  # Young chicks


class BodySize(str, Enum):
    CHICK = "chick"
    MEDIUM = "medium"


# Regions whose color rules may rewrite
BODY_REGIONS = ("chest_color", "back_color", "wing_color", "tail_color")


class AppearanceDescription(BaseModel):
    """Resolved appearance. Immutable; rules return updated copies."""
    model_config = ConfigDict(frozen=True)

    chest_color: PartColor = PartColor.WHITE
    back_color: PartColor = PartColor.WHITE
    wing_color: PartColor = PartColor.WHITE
    tail_color: PartColor = PartColor.BLACK
    chest_pattern: PlumagePattern = PlumagePattern.SOLID
    wing_pattern: PlumagePattern = PlumagePattern.SOLID
    secondary_color: PartColor | None = None
    tail_style: TailStyle = TailStyle.SICKLE
    comb: CombStyle = CombStyle.SINGLE
    body_size: BodySize = BodySize.MEDIUM
    is_mature: bool = True

    def recolor(self, old: PartColor, new: PartColor) -> AppearanceDescription:
        """Replace ``old`` with ``new`` in every body region."""
        changes = {name: new for name in BODY_REGIONS if getattr(self, name) is old}
        return self.model_copy(update=changes) if changes else self

    def region_colors(self) -> dict[str, PartColor]:
        return {name: getattr(self, name) for name in BODY_REGIONS}
