# reporting/models.py

"""
Data models of the quality report.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ColumnQuality:
    """Quality figures of a single column."""
    column_index: int
    column_name: str
    completeness: float
    uniqueness: float
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "column_index": self.column_index,
            "column_name": self.column_name,
            "completeness": self.completeness,
            "uniqueness": self.uniqueness,
            "confidence": self.confidence
        }


@dataclass(frozen=True)
class DataQualityMetrics:
    """
    Advisory quality metrics of a parsed table.

    completeness: 1 - null cells / total cells
    consistency: fraction of columns detected above the confidence threshold
    uniqueness: mean distinct/rows ratio over columns
    validity: mean detection confidence
    """
    completeness: float = 0.0
    consistency: float = 0.0
    uniqueness: float = 0.0
    validity: float = 0.0
    total_cells: int = 0
    null_cells: int = 0
    columns: List[ColumnQuality] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "completeness": self.completeness,
            "consistency": self.consistency,
            "uniqueness": self.uniqueness,
            "validity": self.validity,
            "total_cells": self.total_cells,
            "null_cells": self.null_cells,
            "columns": [column.to_dict() for column in self.columns]
        }
