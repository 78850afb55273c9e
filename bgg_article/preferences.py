# preferences.py - user preference vectors built from sliders or quiz answers
import math
import numbers
from dataclasses import dataclass
from typing import Mapping, Optional

from .config import WEIGHT_DOMAIN, WILDCARD_MECHANICS
from .errors import InvalidPreferenceError


def _coerce_number(key: str, value) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidPreferenceError(f"{key} must be numeric, got {value!r}")
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if value == "" or value.lower() in WILDCARD_MECHANICS:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidPreferenceError(f"{key} must be numeric, got {value!r}") from None
    if not math.isfinite(number):
        raise InvalidPreferenceError(f"{key} must be finite, got {value!r}")
    return number


def _coerce_int(key: str, value) -> Optional[int]:
    number = _coerce_number(key, value)
    if number is None:
        return None
    if number < 0:
        raise InvalidPreferenceError(f"{key} must not be negative, got {value!r}")
    return int(round(number))


@dataclass(frozen=True)
class PreferenceVector:
    """Target values for one query. ``None`` means "no preference"."""

    playtime: Optional[int] = None
    weight: Optional[float] = None
    mechanic: Optional[str] = None
    year: Optional[int] = None
    players: Optional[int] = None

    def __post_init__(self):
        # numpy scalars from pandas columns are normalised to builtins
        if self.weight is not None:
            lo, hi = WEIGHT_DOMAIN
            if isinstance(self.weight, bool) or not isinstance(self.weight, numbers.Real):
                raise InvalidPreferenceError(f"weight must be numeric, got {self.weight!r}")
            weight = float(self.weight)
            if not (lo <= weight <= hi):
                raise InvalidPreferenceError(f"weight must be within {lo}-{hi}, got {self.weight}")
            object.__setattr__(self, "weight", weight)
        for key in ("playtime", "year", "players"):
            v = getattr(self, key)
            if v is None:
                continue
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                raise InvalidPreferenceError(f"{key} must be an integer, got {v!r}")
            if v < 0:
                raise InvalidPreferenceError(f"{key} must not be negative, got {v}")
            object.__setattr__(self, key, int(v))
        if self.mechanic is not None and not isinstance(self.mechanic, str):
            raise InvalidPreferenceError(f"mechanic must be text, got {self.mechanic!r}")

    @property
    def wants_mechanic(self) -> bool:
        return bool(self.mechanic) and self.mechanic.strip().lower() not in WILDCARD_MECHANICS

    @classmethod
    def from_answers(cls, answers: Mapping) -> "PreferenceVector":
        """Coerce raw UI values (strings from buttons and sliders)."""
        mechanic = answers.get("mechanic")
        if mechanic is not None:
            mechanic = str(mechanic).strip() or None
        return cls(
            playtime=_coerce_int("playtime", answers.get("playtime")),
            weight=_coerce_number("weight", answers.get("weight")),
            mechanic=mechanic,
            year=_coerce_int("year", answers.get("year")),
            players=_coerce_int("players", answers.get("players")),
        )
