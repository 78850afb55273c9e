# records.py - immutable game records and the session record store
import ast
import json
import logging
import math
import os
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional

import numpy as np
import pandas as pd

from .config import COLUMN_ALIASES, DATA_PATH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameRecord:
    """One game as read from the dataset. ``None`` marks a missing value."""

    name: str
    year: Optional[int] = None
    weight: Optional[float] = None
    rating: Optional[float] = None
    playtime: Optional[int] = None
    mechanics: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def has_plot_position(self) -> bool:
        # Needs both coordinates of the complexity/rating plane
        return self.weight is not None and self.rating is not None and self.weight > 0

    def has_mechanic(self, mechanic: str) -> bool:
        return mechanic in self.mechanics


def _as_float(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        v = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(v):
        return None
    return v


def _positive_float(value) -> Optional[float]:
    # BGG exports 0 for "no votes yet"
    v = _as_float(value)
    return v if v is not None and v > 0 else None


def _positive_int(value) -> Optional[int]:
    v = _as_float(value)
    if v is None or v <= 0:
        return None
    return int(round(v))


def _nonzero_int(value) -> Optional[int]:
    # Ancient games carry negative (BCE) years; only 0 means unknown
    v = _as_float(value)
    if v is None or v == 0:
        return None
    return int(round(v))


def _parse_mechanics(value) -> FrozenSet[str]:
    if value is None:
        return frozenset()
    if isinstance(value, (list, tuple, set, frozenset, np.ndarray)):
        return frozenset(str(m).strip() for m in value if str(m).strip())
    if isinstance(value, float) and math.isnan(value):
        return frozenset()
    text = str(value).strip()
    if not text:
        return frozenset()
    if text.startswith("["):
        # CSV exports keep the list literal as text
        try:
            items = json.loads(text)
        except ValueError:
            try:
                items = ast.literal_eval(text)
            except (ValueError, SyntaxError):
                items = [text.strip("[]")]
        return _parse_mechanics(list(items))
    # Mechanic names contain commas ("Deck, Bag, and Pool Building"), so use pipes
    return frozenset(m.strip() for m in text.split("|") if m.strip())


def record_from_mapping(row: Dict) -> GameRecord:
    """Build a record from one raw row keyed by canonical field names."""
    name = row.get("name")
    if name is None or (isinstance(name, float) and math.isnan(name)):
        name = "Unknown"
    return GameRecord(
        name=str(name),
        year=_nonzero_int(row.get("year")),
        weight=_positive_float(row.get("weight")),
        rating=_positive_float(row.get("rating")),
        playtime=_positive_int(row.get("playtime")),
        mechanics=_parse_mechanics(row.get("mechanics")),
    )


def _resolve_columns(columns) -> Dict[str, str]:
    cols = set(columns)
    resolved = {}
    for canonical, aliases in COLUMN_ALIASES.items():
        for alias in aliases:
            if alias in cols:
                resolved[canonical] = alias
                break
    return resolved


def _onehot_mechanics(df: pd.DataFrame) -> pd.Series:
    """Collapse ``Mechanic_*`` indicator columns into one list per row."""
    mech_cols = [c for c in df.columns if isinstance(c, str) and c.startswith("Mechanic_")]
    names = {c: c.replace("Mechanic_", "").replace("_", " ") for c in mech_cols}
    if not mech_cols or df.empty:
        return pd.Series([[] for _ in range(len(df))], index=df.index)
    flags = df[mech_cols].fillna(0).astype(float) == 1
    return flags.apply(lambda r: [names[c] for c in mech_cols if r[c]], axis=1)


class RecordStore:
    """Read-only, ordered collection of game records for one session."""

    def __init__(self, records: Iterable[GameRecord] = ()):
        self._records = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[GameRecord]:
        return iter(self._records)

    def __getitem__(self, index):
        return self._records[index]

    def __repr__(self) -> str:
        return f"RecordStore({len(self._records)} games)"

    def plottable(self) -> List[GameRecord]:
        return [r for r in self._records if r.has_plot_position]

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "RecordStore":
        resolved = _resolve_columns(df.columns)
        if "weight" not in resolved or "rating" not in resolved:
            raise ValueError("dataset needs a weight and a rating column")
        frame = pd.DataFrame({canonical: df[col] for canonical, col in resolved.items()}, index=df.index)
        if "mechanics" not in frame.columns:
            frame["mechanics"] = _onehot_mechanics(df)
        frame = frame.astype(object).where(frame.notna(), None)

        records = [record_from_mapping(row) for row in frame.to_dict(orient="records")]
        missing = sum(1 for r in records if not r.has_plot_position)
        if missing:
            logger.info("%d of %d games have no weight/rating pair", missing, len(records))
        return cls(records)

    def to_frame(self) -> pd.DataFrame:
        rows = [{
            "name": r.name,
            "year": r.year,
            "weight": r.weight,
            "rating": r.rating,
            "playtime": r.playtime,
            "mechanics": sorted(r.mechanics),
        } for r in self._records]
        return pd.DataFrame(rows, columns=["name", "year", "weight", "rating", "playtime", "mechanics"])


def load_records(path: Optional[str] = None) -> RecordStore:
    """Read a processed dataset (JSON, CSV or Parquet) into a record store."""
    path = path or DATA_PATH
    if not os.path.exists(path):
        raise FileNotFoundError(f"No dataset found at {path}")
    lower = path.lower()
    if lower.endswith(".parquet"):
        df = pd.read_parquet(path)
    elif lower.endswith(".csv"):
        df = pd.read_csv(path)
    else:
        df = pd.read_json(path)
    store = RecordStore.from_frame(df)
    logger.info("Loaded %d games from %s", len(store), path)
    return store
