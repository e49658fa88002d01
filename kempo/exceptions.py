"""
Exceptions raised while validating and parsing premium tables.
"""


class TableStructureError(ValueError):
    """The CSV does not match the expected premium table layout."""


class RankMinError(TableStructureError):
    """Lower bound column is not immediately left of the range separator column."""


class RankMaxError(TableStructureError):
    """Upper bound column is not immediately right of the range separator column."""


class RankIndexError(TableStructureError):
    """The rank column does not hold a complete 1..N rank index."""


class SalaryRateError(TableStructureError):
    """Total and employee-half columns disagree; columns are likely misaligned."""


class CellValueError(ValueError):
    """A numeric cell cannot be normalized."""
