# reporting/analyzer.py

"""
Quality analyzer: advisory metrics over a parsed table and its detections.

The metrics never feed back into form generation.
"""

import logging
from typing import List, Optional, Sequence

from .models import DataQualityMetrics, ColumnQuality
from ..csv_loader.models import RawTable
from ..detector.detector import TypeDetector
from ..detector.models import TypeDetectionResult
from ..profiler.models import ColumnProfile, is_null
from ..profiler.profiler import ColumnProfiler
from ..config import InferenceConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class QualityAnalyzer:
    """Computes completeness, consistency, uniqueness and validity."""

    def __init__(self, config: Optional[InferenceConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def analyze(
        self,
        table: RawTable,
        detections: Sequence[TypeDetectionResult] = (),
        profiles: Sequence[ColumnProfile] = ()
    ) -> DataQualityMetrics:
        """
        Builds the quality metrics of a table.

        Args:
            table: Parsed table
            detections: One detection per column; detected from the table when omitted
            profiles: Column profiles; computed from the table when omitted

        Returns:
            DataQualityMetrics
        """
        if not profiles:
            profiles = ColumnProfiler(self.config).profile_table(table)
        if not detections:
            logger.debug(f"No detections given; detecting {len(profiles)} columns")
            detections = TypeDetector(self.config).detect_all(profiles)

        total_cells = table.total_rows * table.total_columns
        null_cells = sum(1 for row in table.rows for cell in row if is_null(cell))

        completeness = self.completeness(total_cells, null_cells)
        consistency = self.consistency(detections)
        validity = self.validity(detections)

        columns = self._column_quality(table, detections, profiles)
        uniqueness = (
            sum(column.uniqueness for column in columns) / len(columns)
            if columns else 0.0
        )

        return DataQualityMetrics(
            completeness=completeness,
            consistency=consistency,
            uniqueness=uniqueness,
            validity=validity,
            total_cells=total_cells,
            null_cells=null_cells,
            columns=columns
        )

    @staticmethod
    def completeness(total_cells: int, null_cells: int) -> float:
        if total_cells == 0:
            return 0.0
        return 1 - null_cells / total_cells

    def consistency(self, detections: Sequence[TypeDetectionResult]) -> float:
        if not detections:
            return 0.0
        consistent = sum(
            1 for detection in detections
            if detection.confidence > self.config.consistency_threshold
        )
        return consistent / len(detections)

    @staticmethod
    def validity(detections: Sequence[TypeDetectionResult]) -> float:
        if not detections:
            return 0.0
        return sum(detection.confidence for detection in detections) / len(detections)

    @staticmethod
    def _column_quality(
        table: RawTable,
        detections: Sequence[TypeDetectionResult],
        profiles: Sequence[ColumnProfile]
    ) -> List[ColumnQuality]:
        confidence_by_index = {d.column_index: d.confidence for d in detections}
        rows = table.total_rows
        columns = []

        for profile in profiles:
            columns.append(ColumnQuality(
                column_index=profile.column_index,
                column_name=profile.column_name,
                completeness=(1 - profile.null_count / rows) if rows else 0.0,
                uniqueness=(profile.unique_count / rows) if rows else 0.0,
                confidence=confidence_by_index.get(profile.column_index, 0.0)
            ))

        return columns
