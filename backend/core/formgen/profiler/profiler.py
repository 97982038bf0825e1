# profiler/profiler.py
"""
Builds one ColumnProfile per header of a RawTable.
"""

import logging
from typing import List, Optional

from .models import ColumnProfile, is_null
from ..csv_loader.models import RawTable
from ..config import InferenceConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class ColumnProfiler:
    """Profiles the columns of a parsed table."""

    def __init__(self, config: Optional[InferenceConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def profile_table(self, table: RawTable) -> List[ColumnProfile]:
        """Profiles every column, in header order."""
        profiles = [
            self.profile_column(index, header, table.column(index))
            for index, header in enumerate(table.headers)
        ]
        logger.debug(f"Profiled {len(profiles)} columns over {table.total_rows} rows")
        return profiles

    def profile_column(self, index: int, name: str, values: List[str]) -> ColumnProfile:
        non_null = [value.strip() for value in values if not is_null(value)]
        sample = non_null[:min(self.config.sample_size, len(values))]

        return ColumnProfile(
            column_index=index,
            column_name=name,
            sample_values=tuple(sample),
            all_values=tuple(values),
            unique_count=len(set(non_null)),
            total_count=len(values),
            null_count=len(values) - len(non_null)
        )
