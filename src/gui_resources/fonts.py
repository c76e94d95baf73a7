"""Font table bookkeeping for GUI toolkits."""

import enum
from dataclasses import dataclass, field


class FontFamily(enum.Enum):
    PROPORTIONAL = "proportional"
    MONOSPACE = "monospace"


FamilyKey = FontFamily | str


@dataclass(frozen=True)
class FontData:
    """Raw font file contents (TTF/OTF) and the face index inside the file."""

    font: bytes
    index: int = 0


def _default_families() -> dict[FamilyKey, list[str]]:
    return {family: [] for family in FontFamily}


@dataclass
class FontDefinitions:
    """Registered fonts and the per-family lookup order (first name wins)."""

    font_data: dict[str, FontData] = field(default_factory=dict)
    families: dict[FamilyKey, list[str]] = field(default_factory=_default_families)

    def insert(self, name: str, data: FontData, family: FamilyKey) -> None:
        """Stores ``data`` under ``name`` and puts it first in ``family``."""
        self.font_data[name] = data
        self.families.setdefault(family, []).insert(0, name)

    def fonts_for(self, family: FamilyKey) -> list[str]:
        return list(self.families.get(family, []))
