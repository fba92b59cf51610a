"""Lab catalog — wings, the items installed in them, and item skins."""

from __future__ import annotations

from dataclasses import dataclass

from slimelab.data.balance import STARS_FOR_WING_UNLOCK


@dataclass(frozen=True)
class SkinDef:
    """A cosmetic variant an item can be installed with."""

    id: str
    name: str
    description: str
    # Rich style used by the TUI
    color: str


@dataclass(frozen=True)
class ItemDef:
    """An installable lab item."""

    id: str
    name: str
    wing_id: str
    skins: tuple[str, ...]


@dataclass(frozen=True)
class WingDef:
    """A themed area of the lab, fogged until enough stars are collected."""

    id: str
    wing_name: str
    unlock_stars: int
    items: tuple[str, ...]

    @property
    def element_id(self) -> str:
        """Display element id: astro_garden -> astro-garden (first underscore only)."""
        return self.id.replace("_", "-", 1)


ALL_SKINS: dict[str, SkinDef] = {}
ALL_ITEMS: dict[str, ItemDef] = {}
LAB_ITEMS_DATA: dict[str, WingDef] = {}


def _register_skins(*skins: SkinDef) -> None:
    for s in skins:
        ALL_SKINS[s.id] = s


def _register_wing(wing_id: str, wing_name: str, *items: ItemDef) -> None:
    # Thresholds follow catalog order: 0, 10, 20, ...
    unlock_stars = len(LAB_ITEMS_DATA) * STARS_FOR_WING_UNLOCK
    LAB_ITEMS_DATA[wing_id] = WingDef(
        id=wing_id,
        wing_name=wing_name,
        unlock_stars=unlock_stars,
        items=tuple(i.id for i in items),
    )
    for item in items:
        ALL_ITEMS[item.id] = item


_register_skins(
    SkinDef(
        id="tech_neon",
        name="Tech Neon",
        description="Glowing tubes and humming circuitry.",
        color="bright_cyan",
    ),
    SkinDef(
        id="retro_cobre",
        name="Retro Cobre",
        description="Riveted copper from the lab's first days.",
        color="dark_orange3",
    ),
    SkinDef(
        id="cristal_lunar",
        name="Cristal Lunar",
        description="Pale crystal that shimmers in moonlight.",
        color="bright_white",
    ),
    SkinDef(
        id="bio_goma",
        name="Bio Goma",
        description="Grown, not built. Slightly sticky.",
        color="bright_green",
    ),
)

_ALL = ("tech_neon", "retro_cobre", "cristal_lunar")

_register_wing(
    "fusion_bay",
    "Fusion Bay",
    ItemDef(id="mesa_principal", name="Mesa Principal", wing_id="fusion_bay", skins=_ALL),
    ItemDef(id="acelerador_quantico", name="Acelerador Quântico", wing_id="fusion_bay", skins=_ALL),
)
_register_wing(
    "astro_garden",
    "Astro Garden",
    ItemDef(
        id="estufa_astro",
        name="Estufa Astro",
        wing_id="astro_garden",
        skins=("bio_goma", "cristal_lunar", "tech_neon"),
    ),
)
_register_wing(
    "cryo_vault",
    "Cryo Vault",
    ItemDef(id="camara_criogenica", name="Câmara Criogênica", wing_id="cryo_vault", skins=_ALL),
)
_register_wing(
    "nebula_observatory",
    "Nebula Observatory",
    ItemDef(
        id="telescopio_nebular",
        name="Telescópio Nebular",
        wing_id="nebula_observatory",
        skins=("cristal_lunar", "tech_neon"),
    ),
)


def skins_for_item(item_id: str) -> list[SkinDef]:
    """Skins offered when installing ``item_id`` (empty for unknown items)."""
    item = ALL_ITEMS.get(item_id)
    if item is None:
        return []
    return [ALL_SKINS[sid] for sid in item.skins]
