"""
Models package - Data models and type definitions.
"""

from .premium_table import PremiumTable, RankEntry

__all__ = ['PremiumTable', 'RankEntry']
