# formgen/models.py
"""
Results returned by the pipeline orchestrator.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .csv_loader.models import NormalizedError
from .detector.models import TypeDetectionResult
from .generator.models import FormPreview, GeneratedForm
from .profiler.models import ColumnProfile
from .reporting.models import DataQualityMetrics


@dataclass
class GenerationResult:
    """
    Partial-success result of one CSV to form run.

    On a parse or empty-input failure ``success`` is False, ``form`` is None
    and ``errors`` holds the fatal error.
    """
    success: bool
    form: Optional[GeneratedForm] = None
    detections: List[TypeDetectionResult] = field(default_factory=list)
    quality: Optional[DataQualityMetrics] = None
    preview: Optional[FormPreview] = None
    errors: List[NormalizedError] = field(default_factory=list)
    warnings: List[NormalizedError] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "form": self.form.to_dict() if self.form else None,
            "detections": [d.to_dict() for d in self.detections],
            "quality": self.quality.to_dict() if self.quality else None,
            "preview": self.preview.to_dict() if self.preview else None,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings]
        }


@dataclass
class AnalysisResult:
    """Column profiles, detections and quality without building a form."""
    success: bool
    total_rows: int = 0
    delimiter: str = ","
    profiles: List[ColumnProfile] = field(default_factory=list)
    detections: List[TypeDetectionResult] = field(default_factory=list)
    quality: Optional[DataQualityMetrics] = None
    errors: List[NormalizedError] = field(default_factory=list)
    warnings: List[NormalizedError] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "total_rows": self.total_rows,
            "delimiter": self.delimiter,
            "profiles": [p.to_dict() for p in self.profiles],
            "detections": [d.to_dict() for d in self.detections],
            "quality": self.quality.to_dict() if self.quality else None,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings]
        }
