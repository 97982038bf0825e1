# generator/generator.py
"""
Form generator: assembles detected columns into a form schema.

Runs Profiler -> Detector per column when given a RawTable, then builds one
GeneratedField per header, in header order.
"""

import logging
import time
import uuid
from typing import Dict, List, Optional, Sequence

from .models import (
    DetectionStrategy, FieldOverride, FieldValidation, FormPreview,
    GeneratedField, GeneratedForm, GenerationMetadata, GenerationOptions
)
from .errors import GeneratorErrors
from .placeholders import placeholder_for, properties_for
from ..config import InferenceConfig, DEFAULT_CONFIG
from ..csv_loader.models import NormalizedError, RawTable
from ..detector.detector import TypeDetector
from ..detector.models import FieldType, TypeDetectionResult
from ..detector.patterns import is_number
from ..profiler.models import ColumnProfile
from ..profiler.profiler import ColumnProfiler
from ..reporting.models import DataQualityMetrics

logger = logging.getLogger(__name__)

CONSERVATIVE_MIN_CONFIDENCE = 0.8
SUGGESTION_MIN_CONFIDENCE = 0.7
OPTION_TYPES = frozenset({
    FieldType.SELECT,
    FieldType.MULTISELECT,
    FieldType.CHECKBOX,
    FieldType.RADIO,
    FieldType.YESNO,
})

# Suggestion type -> FieldValidation attribute
_VALIDATION_KEYS = {
    "pattern": "pattern",
    "min": "min",
    "max": "max",
    "minLength": "min_length",
    "maxLength": "max_length",
}


def new_field_id() -> str:
    return f"field_{uuid.uuid4().hex[:8]}"


class FormGenerator:
    """Builds a GeneratedForm from a table or from precomputed detections."""

    def __init__(self,
                 config: Optional[InferenceConfig] = None,
                 profiler: Optional[ColumnProfiler] = None,
                 detector: Optional[TypeDetector] = None):
        self.config = config or DEFAULT_CONFIG
        self.profiler = profiler or ColumnProfiler(self.config)
        self.detector = detector or TypeDetector(self.config)

    def generate(self, table: RawTable, options: Optional[GenerationOptions] = None) -> GeneratedForm:
        """Profiles and detects every column of the table, then builds the form."""
        started_at = time.perf_counter()
        profiles = self.profiler.profile_table(table)
        detections = self.detector.detect_all(profiles)
        return self.build_form(profiles, detections, options, table.warnings, started_at)

    def build_form(
        self,
        profiles: Sequence[ColumnProfile],
        detections: Sequence[TypeDetectionResult],
        options: Optional[GenerationOptions] = None,
        table_warnings: Sequence[NormalizedError] = (),
        started_at: Optional[float] = None
    ) -> GeneratedForm:
        """
        Assembles the form from one profile and one detection per column.

        Args:
            profiles: Column profiles, in header order
            detections: Detections aligned with profiles
            options: Title, description, overrides and strategy
            table_warnings: Non-fatal tokenizer findings, reported as warnings
            started_at: time.perf_counter() value marking the start of the run

        Returns:
            GeneratedForm with one field per column
        """
        options = options or GenerationOptions()
        started_at = started_at if started_at is not None else time.perf_counter()

        warnings = [warning.message for warning in table_warnings]
        recommendations: List[str] = []
        fields: List[GeneratedField] = []

        for override in options.field_overrides:
            if not 0 <= override.column_index < len(profiles):
                warnings.append(
                    GeneratorErrors.unknown_override_column(override.column_index, len(profiles)).message
                )

        for profile, detection in zip(profiles, detections):
            override = options.override_for(profile.column_index)

            if profile.is_empty:
                warnings.append(
                    GeneratorErrors.empty_column(profile.column_index, profile.column_name).message
                )

            generated = self._build_field(profile, detection, override, options.detection_strategy, warnings)
            fields.append(generated)

            if override is None or override.field_type is None:
                recommendations.extend(self._recommendations(generated, detection))

        elapsed_ms = (time.perf_counter() - started_at) * 1000
        metadata = self._build_metadata(fields, elapsed_ms, warnings, recommendations)

        logger.info(
            f"Generated form '{options.title}': {metadata.total_fields} fields, "
            f"average confidence {metadata.average_confidence:.2f}, {elapsed_ms:.1f} ms"
        )

        return GeneratedForm(
            title=options.title,
            description=options.description,
            fields=tuple(fields),
            metadata=metadata
        )

    def select_field_type(self, detection: TypeDetectionResult, strategy: DetectionStrategy) -> FieldType:
        if strategy == DetectionStrategy.CONSERVATIVE and detection.confidence < CONSERVATIVE_MIN_CONFIDENCE:
            return FieldType.TEXT
        return detection.field_type

    def determine_required(self, profile: ColumnProfile) -> bool:
        """Mostly populated columns become required fields."""
        return profile.total_count > 0 and profile.null_ratio < self.config.required_null_ratio

    def _build_field(
        self,
        profile: ColumnProfile,
        detection: TypeDetectionResult,
        override: Optional[FieldOverride],
        strategy: DetectionStrategy,
        warnings: List[str]
    ) -> GeneratedField:
        if override is not None and override.field_type is not None:
            field_type = override.field_type
            confidence = 1.0
        else:
            field_type = self.select_field_type(detection, strategy)
            confidence = detection.confidence
            if field_type != detection.field_type:
                # Fallback to text carries the text baseline, not the rejected score
                confidence = min(confidence, self.config.text_baseline_confidence)

        label = (override.label if override and override.label else None) or profile.column_name

        if override is not None and override.required is not None:
            required = override.required
        else:
            required = self.determine_required(profile)

        if override is not None and override.options is not None:
            options = tuple(override.options)
        else:
            options = self._build_options(field_type, profile, detection, warnings)

        if override is not None and override.validation is not None:
            validation = override.validation
        else:
            validation = self._build_validation(field_type, profile, detection)

        return GeneratedField(
            id=new_field_id(),
            label=label,
            type=field_type,
            required=required,
            placeholder=placeholder_for(field_type, label),
            confidence=confidence,
            column_index=profile.column_index,
            options=options,
            validation=validation,
            properties=properties_for(field_type)
        )

    def _build_options(self, field_type: FieldType, profile: ColumnProfile,
                       detection: TypeDetectionResult, warnings: List[str]):
        if field_type not in OPTION_TYPES:
            return ()

        if detection.field_type == field_type and detection.options:
            return detection.options

        distinct = profile.distinct_values()
        if len(distinct) > self.config.max_options:
            warnings.append(GeneratorErrors.too_many_options(
                profile.column_index, profile.column_name, len(distinct), self.config.max_options
            ).message)
            return ()
        return tuple(distinct)

    def _build_validation(self, field_type: FieldType, profile: ColumnProfile,
                          detection: TypeDetectionResult) -> Optional[FieldValidation]:
        # Suggestions describe the detected type only
        if field_type != detection.field_type:
            return None

        values = {}
        for suggestion in detection.validation_suggestions:
            key = _VALIDATION_KEYS.get(suggestion.type)
            if key and suggestion.confidence >= SUGGESTION_MIN_CONFIDENCE:
                values[key] = suggestion.value

        if field_type == FieldType.NUMBER:
            numbers = [float(v) for v in profile.non_null_values if is_number(v)]
            if numbers and all(n.is_integer() for n in numbers):
                values["step"] = 1

        validation = FieldValidation(**values)
        return None if validation.is_empty else validation

    def _recommendations(self, generated: GeneratedField, detection: TypeDetectionResult) -> List[str]:
        recommendations = []

        if generated.confidence < self.config.low_confidence_threshold:
            recommendations.append(
                f'Consider reviewing field "{generated.label}" - low confidence detection '
                f'({round(generated.confidence * 100)}%)'
            )

        if detection.alternatives:
            names = ", ".join(alt.field_type.value for alt in detection.alternatives[:2])
            recommendations.append(f'Field "{generated.label}" could also be: {names}')

        return recommendations

    @staticmethod
    def _build_metadata(fields: List[GeneratedField], elapsed_ms: float,
                        warnings: List[str], recommendations: List[str]) -> GenerationMetadata:
        detected_types: Dict[str, int] = {}
        for generated in fields:
            detected_types[generated.type.value] = detected_types.get(generated.type.value, 0) + 1

        scores = [generated.confidence for generated in fields]
        average = sum(scores) / len(scores) if scores else 0.0

        return GenerationMetadata(
            total_fields=len(fields),
            detected_types=detected_types,
            confidence_scores=scores,
            average_confidence=average,
            processing_time_ms=elapsed_ms,
            warnings=warnings,
            recommendations=recommendations
        )

    @staticmethod
    def build_preview(detections: Sequence[TypeDetectionResult], quality: DataQualityMetrics) -> FormPreview:
        """
        Estimates how much user review the generated form needs.

        The complexity score weighs missing data, inconsistent and invalid
        detections, and the diversity of detected types, capped at 1.0.
        """
        score = 0.0
        score += (1 - quality.completeness) * 0.3
        score += (1 - quality.consistency) * 0.3
        score += (1 - quality.validity) * 0.2

        unique_types = len({detection.field_type for detection in detections})
        score += min(unique_types / 10, 0.2)
        complexity = min(score, 1.0)

        improvements = []
        if quality.completeness < 0.8:
            improvements.append("Consider cleaning up missing data for better form generation")
        if complexity > 0.7:
            improvements.append("Complex data detected - manual review recommended")
        if any(detection.confidence < 0.6 for detection in detections):
            improvements.append("Some fields have low confidence detection - review recommended")

        return FormPreview(
            estimated_fields=len(detections),
            complexity_score=complexity,
            user_interaction_required=complexity > 0.7 or quality.completeness < 0.8,
            suggested_improvements=improvements
        )
