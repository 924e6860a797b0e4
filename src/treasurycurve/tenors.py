"""
Tenor vocabularies for Treasury yield curve files.

Provides:
- Tenor label parsing ("1MO", "3M", "26W", "10Y") to year fractions
- The legacy 6-tenor and live 11-tenor vocabularies
- TenorSet: an ordered label -> years table used by the loader

A tenor set is configuration handed to the ingestion layer. Its order is
the column order of the CSV rows it describes; the curve itself never
consults it.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple
import re


# Tenor regex pattern: number + unit (D/W/M/MO/Y)
TENOR_PATTERN = re.compile(r'^(\d+)(MO|[DWMY])$', re.IGNORECASE)


def parse_tenor(tenor: str) -> Tuple[int, str]:
    """
    Parse a tenor label into (amount, unit).

    Args:
        tenor: Tenor label like "3MO", "6M", "2Y"

    Returns:
        Tuple of (amount, unit) where unit is D/W/M/Y

    Raises:
        ValueError: If the label format is invalid
    """
    match = TENOR_PATTERN.match(tenor.upper().strip())
    if not match:
        raise ValueError(f"Invalid tenor format: {tenor}. Expected format like '3MO', '10Y'")

    unit = match.group(2).upper()
    if unit == "MO":
        unit = "M"
    return int(match.group(1)), unit


def tenor_to_years(tenor: str) -> float:
    """
    Convert a tenor label to a year fraction.

    Months are exact twelfths ("1MO" -> 1/12), weeks and days use a
    365-day year.
    """
    amount, unit = parse_tenor(tenor)

    if unit == 'D':
        return amount / 365.0
    elif unit == 'W':
        return amount * 7 / 365.0
    elif unit == 'M':
        return amount / 12.0
    elif unit == 'Y':
        return float(amount)
    else:
        raise ValueError(f"Unknown tenor unit: {unit}")


@dataclass(frozen=True)
class TenorSet:
    """
    Ordered tenor vocabulary.

    Attributes:
        name: Short identifier ("legacy", "live", ...)
        labels: Tenor labels in CSV column order
        years: Year fraction for each label, same order
    """
    name: str
    labels: Tuple[str, ...]
    years: Tuple[float, ...]

    def __post_init__(self):
        if len(self.labels) != len(self.years):
            raise ValueError("Labels and years must have same length")
        if len(set(self.labels)) != len(self.labels):
            raise ValueError(f"Duplicate tenor label in set '{self.name}'")

    @classmethod
    def from_labels(cls, name: str, labels) -> "TenorSet":
        """Build a tenor set, deriving each year fraction from its label."""
        labels = tuple(str(label).upper().strip() for label in labels)
        return cls(name=name, labels=labels, years=tuple(tenor_to_years(l) for l in labels))

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[Tuple[str, float]]:
        return iter(zip(self.labels, self.years))

    def to_years(self, label: str) -> float:
        """Year fraction for a label in this set."""
        key = label.upper().strip()
        for lbl, yrs in self:
            if lbl == key:
                return yrs
        raise KeyError(f"Tenor {label} not in tenor set '{self.name}'")

    def as_dict(self) -> Dict[str, float]:
        return dict(zip(self.labels, self.years))


# Original six H.15 columns
LEGACY_TENORS = TenorSet.from_labels(
    "legacy", ["3MO", "6MO", "2Y", "5Y", "10Y", "30Y"]
)

# Full Federal Reserve H.15 constant-maturity set
LIVE_TENORS = TenorSet.from_labels(
    "live", ["1MO", "3MO", "6MO", "1Y", "2Y", "3Y", "5Y", "7Y", "10Y", "20Y", "30Y"]
)

TENOR_SETS: Dict[str, TenorSet] = {
    LEGACY_TENORS.name: LEGACY_TENORS,
    LIVE_TENORS.name: LIVE_TENORS,
}


def get_tenor_set(name: str) -> TenorSet:
    """
    Look up a built-in tenor set by name.

    Raises:
        ValueError: If no set has that name
    """
    key = name.lower().strip()
    if key in TENOR_SETS:
        return TENOR_SETS[key]
    raise ValueError(f"Unknown tenor set: {name}. Choose from {sorted(TENOR_SETS)}")


__all__ = [
    "TenorSet",
    "LEGACY_TENORS",
    "LIVE_TENORS",
    "TENOR_SETS",
    "parse_tenor",
    "tenor_to_years",
    "get_tenor_set",
]
