"""
Premium table data models.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class RankEntry:
    """
    One rank (income bracket) of a premium table.

    Attributes:
        rank: Health insurance rank, 1-based
        pension_rank: Welfare pension rank, None until backfilled
        label: Standard monthly remuneration as printed in the table
        rank_min: Lower bound of the remuneration bracket
        rank_max: Upper bound of the remuneration bracket
        insurance_younger_total: Premium without nursing care, total
        insurance_younger_salary: Premium without nursing care, employee half
        insurance_elder_total: Premium with nursing care, total
        insurance_elder_salary: Premium with nursing care, employee half
        pension_total: Welfare pension premium, total
        pension_salary: Welfare pension premium, employee half
    """
    rank: int
    pension_rank: Optional[int]
    label: Optional[str]
    rank_min: int
    rank_max: int
    insurance_younger_total: Optional[str] = None
    insurance_younger_salary: Optional[str] = None
    insurance_elder_total: Optional[str] = None
    insurance_elder_salary: Optional[str] = None
    pension_total: Optional[str] = None
    pension_salary: Optional[str] = None

    @property
    def has_pension(self) -> bool:
        """Whether all pension fields are populated."""
        return None not in (self.pension_rank, self.pension_total, self.pension_salary)

    def to_dict(self) -> dict:
        """Convert rank entry to dictionary."""
        return {
            'rank': self.rank,
            'pension_rank': self.pension_rank,
            'label': self.label,
            'rank_min': self.rank_min,
            'rank_max': self.rank_max,
            'insurance_younger_total': self.insurance_younger_total,
            'insurance_younger_salary': self.insurance_younger_salary,
            'insurance_elder_total': self.insurance_elder_total,
            'insurance_elder_salary': self.insurance_elder_salary,
            'pension_total': self.pension_total,
            'pension_salary': self.pension_salary,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'RankEntry':
        """Create RankEntry from dictionary."""
        return cls(
            rank=data['rank'],
            pension_rank=data.get('pension_rank'),
            label=data.get('label'),
            rank_min=data['rank_min'],
            rank_max=data['rank_max'],
            insurance_younger_total=data.get('insurance_younger_total'),
            insurance_younger_salary=data.get('insurance_younger_salary'),
            insurance_elder_total=data.get('insurance_elder_total'),
            insurance_elder_salary=data.get('insurance_elder_salary'),
            pension_total=data.get('pension_total'),
            pension_salary=data.get('pension_salary'),
        )


@dataclass(frozen=True)
class PremiumTable:
    """
    Premium rate schedule of one area.

    Attributes:
        area: Area name, taken from the source file name
        effective_date: First day of the effective month (YYYY-MM-01) or None
        fee: Rank entries in source row order
    """
    area: str
    effective_date: Optional[str] = None
    fee: Tuple[RankEntry, ...] = field(default_factory=tuple)

    @property
    def ranks(self) -> list[int]:
        """Insurance ranks in table order."""
        return [entry.rank for entry in self.fee]

    def to_dict(self) -> dict:
        """Convert premium table to dictionary."""
        return {
            'area': self.area,
            'effective_date': self.effective_date,
            'fee': [entry.to_dict() for entry in self.fee],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'PremiumTable':
        """Create PremiumTable from dictionary."""
        return cls(
            area=data['area'],
            effective_date=data.get('effective_date'),
            fee=tuple(RankEntry.from_dict(entry) for entry in data.get('fee', [])),
        )
