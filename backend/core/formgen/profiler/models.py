# profiler/models.py
"""
Column profile model.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple


def is_null(value: str) -> bool:
    """Empty or whitespace-only cells count as nulls."""
    return value is None or not str(value).strip()


@dataclass(frozen=True)
class ColumnProfile:
    """Statistical summary of one CSV column."""
    column_index: int
    column_name: str
    sample_values: Tuple[str, ...]
    all_values: Tuple[str, ...]
    unique_count: int
    total_count: int
    null_count: int

    @property
    def non_null_values(self) -> List[str]:
        return [value.strip() for value in self.all_values if not is_null(value)]

    @property
    def non_null_count(self) -> int:
        return self.total_count - self.null_count

    @property
    def null_ratio(self) -> float:
        if self.total_count == 0:
            return 0.0
        return self.null_count / self.total_count

    @property
    def unique_ratio(self) -> float:
        if self.total_count == 0:
            return 0.0
        return self.unique_count / self.total_count

    @property
    def is_empty(self) -> bool:
        return self.non_null_count == 0

    def distinct_values(self) -> List[str]:
        """Distinct non-null values in order of first appearance."""
        return list(dict.fromkeys(self.non_null_values))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "column_index": self.column_index,
            "column_name": self.column_name,
            "sample_values": list(self.sample_values),
            "unique_count": self.unique_count,
            "total_count": self.total_count,
            "null_count": self.null_count
        }
