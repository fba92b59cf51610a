"""Balance constants — all tuning knobs in one place.

Starting values are scaled by ``starting_multiplier`` when a session is
initialised; wing thresholds step by ``stars_for_wing_unlock``.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProfileBalance:
    """Starting values and caps for the player profile."""

    max_energy: int = 100
    diamonds_initial: int = 5
    goma_coins_initial: int = 100

    # Mock sessions start with this many times the base currencies
    starting_multiplier: int = 10
    # Enough to lift the fog on the first locked wing
    starting_stars: int = 10


@dataclass(frozen=True)
class UnlockBalance:
    """Star rewards and thresholds."""

    # Stars granted when an item is installed in a wing
    stars_for_item_unlock: int = 1
    # Star gap between consecutive wings in the catalog
    stars_for_wing_unlock: int = 10


@dataclass(frozen=True)
class FlaskBalance:
    """Tuning for the slime spawner and the flask."""

    spawner_charge_initial: int = 15
    # Horizontal drop range in flask units (x in [margin, width - margin])
    flask_width: float = 400.0
    drop_margin: float = 30.0
    spawn_level: int = 1
    base_colors: tuple[str, ...] = ("Roxo", "Azul", "Verde", "Amarelo")


@dataclass(frozen=True)
class DisplayBalance:
    """Number formatting for the HUD."""

    suffixes: tuple[tuple[float, str], ...] = (
        (1e3, "K"),
        (1e6, "M"),
        (1e9, "B"),
        (1e12, "T"),
    )


@dataclass(frozen=True)
class GameBalance:
    """Top-level container for all balance constants."""

    profile: ProfileBalance = field(default_factory=ProfileBalance)
    unlocks: UnlockBalance = field(default_factory=UnlockBalance)
    flask: FlaskBalance = field(default_factory=FlaskBalance)
    display: DisplayBalance = field(default_factory=DisplayBalance)


# Singleton, import this everywhere
BALANCE = GameBalance()

# Flat aliases for the values every module reaches for
MAX_ENERGY = BALANCE.profile.max_energy
GOMA_COINS_INITIAL = BALANCE.profile.goma_coins_initial
DIAMONDS_INITIAL = BALANCE.profile.diamonds_initial
STARS_FOR_ITEM_UNLOCK = BALANCE.unlocks.stars_for_item_unlock
STARS_FOR_WING_UNLOCK = BALANCE.unlocks.stars_for_wing_unlock
