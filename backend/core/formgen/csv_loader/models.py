# csv_loader/models.py
"""
Internal data models of the csv_loader.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from enum import Enum


class ErrorSeverity(Enum):
    FATAL = "FATAL"
    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass
class NormalizedError:
    """Normalized error for reporting."""
    code: str
    severity: ErrorSeverity
    message: str
    row_index: Optional[int] = None
    column_index: Optional[int] = None
    value: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "severity": self.severity.value,
            "message": self.message,
            "row_index": self.row_index,
            "column_index": self.column_index,
            "value": self.value
        }


@dataclass
class CsvDialectInfo:
    """Detected CSV dialect."""
    delimiter: str = ","
    quotechar: str = '"'
    doublequote: bool = True
    skipinitialspace: bool = False


@dataclass
class CsvParseOptions:
    """Options accepted by the tokenizer."""
    delimiter: str = ","           # "auto" sniffs among DialectDetector.COMMON_DELIMITERS
    has_header: bool = True
    skip_empty_rows: bool = True
    max_rows: Optional[int] = None


@dataclass(frozen=True)
class RawTable:
    """Parsed CSV: headers plus a row matrix aligned to them."""
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]
    delimiter: str = ","
    warnings: Tuple[NormalizedError, ...] = field(default_factory=tuple)

    @property
    def total_rows(self) -> int:
        return len(self.rows)

    @property
    def total_columns(self) -> int:
        return len(self.headers)

    def column(self, index: int) -> List[str]:
        """Full slice of one column."""
        return [row[index] for row in self.rows]
