"""
Yield curve point storage.

The CurveStore holds the observations for a single as-of date. Its state
lives in one immutable CurveSnapshot; loading builds a new snapshot and
swaps the reference, so the curve date and the point set always change
together.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple
import logging
import math

import numpy as np

from ..tenors import LIVE_TENORS, TenorSet
from .interpolation import LinearInterpolator

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class YieldPoint:
    """
    A single curve observation.

    Attributes:
        maturity: Time to maturity in years
        yield_: Yield in percent (may be negative)
        label: Tenor code, e.g. "3MO" or "10Y"
    """
    maturity: float
    yield_: float
    label: str

    def __post_init__(self):
        if self.maturity < 0:
            raise ValueError(f"Maturity must be non-negative: {self.maturity}")

    def to_dict(self) -> dict:
        return {
            "maturity_label": self.label,
            "maturity_years": self.maturity,
            "yield": self.yield_,
        }


@dataclass(frozen=True)
class CurveSnapshot:
    """Immutable curve state: date, sorted points and their arrays."""
    curve_date: str = ""
    points: Tuple[YieldPoint, ...] = ()
    maturities: np.ndarray = field(default_factory=lambda: np.empty(0), repr=False, compare=False)
    yields: np.ndarray = field(default_factory=lambda: np.empty(0), repr=False, compare=False)
    interpolator: Optional[LinearInterpolator] = field(default=None, repr=False, compare=False)

    @classmethod
    def build(cls, curve_date: str, points: Iterable[YieldPoint]) -> "CurveSnapshot":
        """
        Build a snapshot from unordered points.

        Points sharing a maturity collapse to the last one given.
        """
        by_maturity = {}
        for point in points:
            by_maturity[point.maturity] = point
        ordered = tuple(sorted(by_maturity.values(), key=lambda p: p.maturity))

        maturities = np.array([p.maturity for p in ordered], dtype=np.float64)
        yields = np.array([p.yield_ for p in ordered], dtype=np.float64)
        maturities.setflags(write=False)
        yields.setflags(write=False)

        interpolator = LinearInterpolator().fit(maturities, yields) if ordered else None
        return cls(
            curve_date=curve_date,
            points=ordered,
            maturities=maturities,
            yields=yields,
            interpolator=interpolator,
        )


EMPTY_SNAPSHOT = CurveSnapshot()


def parse_yield(token) -> Optional[float]:
    """
    Parse a yield field.

    Returns None for empty, non-numeric or non-finite fields
    (H.15 files mark missing observations with "ND" or ".").
    """
    if token is None:
        return None
    text = str(token).strip()
    # float() would accept digit separators such as "4_25"
    if not text or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


class CurveStore:
    """
    Yield observations for one curve date.

    Points are kept sorted ascending by maturity with unique maturities.
    An empty store is valid; analytics on it return 0.0.

    Not safe for concurrent writers. Readers that hold a snapshot()
    are never affected by a later load().
    """

    def __init__(self, curve_date: str = "", points: Optional[Iterable[YieldPoint]] = None):
        self._snapshot = CurveSnapshot.build(curve_date, points or ())

    # ------------------------------------------------------------------ State
    def snapshot(self) -> CurveSnapshot:
        """Current immutable state."""
        return self._snapshot

    def replace(self, curve_date: str, points: Iterable[YieldPoint]) -> None:
        """Swap in a new date and point set in one step."""
        self._snapshot = CurveSnapshot.build(curve_date, points)

    def clear(self) -> None:
        self._snapshot = EMPTY_SNAPSHOT

    # ---------------------------------------------------------------- Loading
    def load(
        self,
        rows: Iterable[Sequence[str]],
        date_filter: str = "",
        tenors: TenorSet = LIVE_TENORS,
    ) -> bool:
        """
        Load the curve from tokenized rows.

        Each row is [date, value_1, ..., value_n] with values in the
        order of `tenors`. Rows with fewer fields are ignored. Empty or
        non-numeric values are skipped for that tenor only; a row with no
        usable value does not count.

        With a date filter, the first row whose date contains the filter
        is loaded and scanning stops. Without one, the last usable row in
        the input wins; rows are not re-ordered by date.

        The store is emptied first, so it stays empty when nothing loads.

        Args:
            rows: Tokenized data rows (header already removed)
            date_filter: Substring to match against the row date
            tenors: Tenor vocabulary describing the value columns

        Returns:
            True if a curve was loaded
        """
        date_filter = date_filter or ""
        min_fields = 1 + len(tenors)

        self.clear()
        found = False

        for row_num, row in enumerate(rows):
            fields = list(row)
            if len(fields) < min_fields:
                LOGGER.debug("Row %d has %d fields, expected %d; skipped", row_num, len(fields), min_fields)
                continue

            row_date = str(fields[0])
            if date_filter and date_filter not in row_date:
                continue

            points = self._parse_points(row_date, fields[1:], tenors)
            if not points:
                LOGGER.debug("Row %d (%s) has no valid yields; skipped", row_num, row_date)
                continue

            self.replace(row_date, points)
            found = True
            if date_filter:
                break

        return found

    @staticmethod
    def _parse_points(row_date: str, values: Sequence[str], tenors: TenorSet) -> List[YieldPoint]:
        points = []
        for (label, years), token in zip(tenors, values):
            value = parse_yield(token)
            if value is None:
                LOGGER.debug("%s: invalid %s yield %r; skipped", row_date, label, token)
                continue
            points.append(YieldPoint(maturity=years, yield_=value, label=label))
        return points

    # ---------------------------------------------------------------- Queries
    def points(self) -> Tuple[YieldPoint, ...]:
        """Sorted yield points."""
        return self._snapshot.points

    def date(self) -> str:
        """Resident curve date ("" when empty)."""
        return self._snapshot.curve_date

    def maturities(self) -> np.ndarray:
        """Read-only array of maturities in years."""
        return self._snapshot.maturities

    def yields(self) -> np.ndarray:
        """Read-only array of yields in percent."""
        return self._snapshot.yields

    def point_for(self, label: str) -> Optional[YieldPoint]:
        """Point with the given tenor label, if loaded."""
        key = label.upper().strip()
        for point in self._snapshot.points:
            if point.label == key:
                return point
        return None

    def is_empty(self) -> bool:
        return not self._snapshot.points

    def copy(self) -> "CurveStore":
        new_store = CurveStore()
        new_store._snapshot = self._snapshot
        return new_store

    def __len__(self) -> int:
        return len(self._snapshot.points)

    def __iter__(self):
        return iter(self._snapshot.points)

    def __repr__(self) -> str:
        parts = [f"  {p.label}: {p.yield_:.2f}%" for p in self._snapshot.points]
        header = f"CurveStore(date='{self.date()}', points={len(self)})"
        return "\n".join([header] + parts)


__all__ = [
    "YieldPoint",
    "CurveSnapshot",
    "CurveStore",
    "parse_yield",
]
