"""
Service that runs the CSV to form pipeline for the API.
Stateless: nothing is stored between requests.
"""

import logging
from typing import List, Optional

from ..core.config import get_settings
from ..models.generation import (
    AnalysisResponse, FieldOverrideModel, GenerateTextRequest, GenerationResponse
)
from ...core.formgen import (
    FormGenerationOrchestrator, CsvParseOptions, GenerationOptions,
    FieldOverride, DetectionStrategy, FieldType, GenerationResult
)
from ...core.formgen.generator.models import FieldValidation

logger = logging.getLogger(__name__)


class GenerationFailed(Exception):
    """The CSV could not be turned into a form (parse or empty input error)."""

    def __init__(self, message: str, code: str):
        self.message = message
        self.code = code
        super().__init__(message)


class FormService:
    """Runs the pipeline and shapes its results as API responses"""

    @staticmethod
    def _orchestrator() -> FormGenerationOrchestrator:
        return FormGenerationOrchestrator(get_settings().inference_config())

    @staticmethod
    def upload_parse_options() -> CsvParseOptions:
        """Uploads may use any common delimiter."""
        return CsvParseOptions(delimiter="auto", max_rows=get_settings().MAX_ROWS)

    @staticmethod
    def text_parse_options() -> CsvParseOptions:
        return CsvParseOptions(max_rows=get_settings().MAX_ROWS)

    @staticmethod
    def build_options(
        title: str = "Generated Form",
        description: str = "Form generated from CSV data",
        include_preview: bool = True,
        detection_strategy: str = "auto",
        field_overrides: Optional[List[FieldOverrideModel]] = None
    ) -> GenerationOptions:
        """
        Converts request values into core GenerationOptions.

        Raises:
            ValueError: unknown detection strategy or field type
        """
        overrides = tuple(
            FieldOverride(
                column_index=override.column_index,
                field_type=FieldType(override.field_type) if override.field_type else None,
                label=override.label,
                required=override.required,
                options=tuple(override.options) if override.options is not None else None,
                validation=FieldValidation(**override.validation.dict()) if override.validation else None
            )
            for override in (field_overrides or [])
        )

        return GenerationOptions(
            title=title,
            description=description,
            include_preview=include_preview,
            field_overrides=overrides,
            detection_strategy=DetectionStrategy(detection_strategy)
        )

    @staticmethod
    def generate_from_upload(content: bytes, options: GenerationOptions) -> GenerationResponse:
        result = FormService._orchestrator().generate_form_from_csv(
            content, options, FormService.upload_parse_options()
        )
        return FormService._to_response(result)

    @staticmethod
    def generate_from_text(request: GenerateTextRequest) -> GenerationResponse:
        options = FormService.build_options(
            title=request.title,
            description=request.description,
            include_preview=request.include_preview,
            detection_strategy=request.detection_strategy,
            field_overrides=request.field_overrides
        )
        result = FormService._orchestrator().generate_form_from_csv(
            request.csv_text, options, FormService.text_parse_options()
        )
        return FormService._to_response(result)

    @staticmethod
    def analyze_upload(content: bytes) -> AnalysisResponse:
        result = FormService._orchestrator().analyze(content, FormService.upload_parse_options())

        if not result.success:
            error = result.errors[0]
            raise GenerationFailed(error.message, error.code)

        logger.info(f"Analyzed {len(result.detections)} columns over {result.total_rows} rows")

        return AnalysisResponse(
            success=True,
            message="CSV analyzed successfully",
            total_rows=result.total_rows,
            delimiter=result.delimiter,
            profiles=[profile.to_dict() for profile in result.profiles],
            detections=[detection.to_dict() for detection in result.detections],
            quality=result.quality.to_dict() if result.quality else None,
            warnings=[warning.to_dict() for warning in result.warnings]
        )

    @staticmethod
    def _to_response(result: GenerationResult) -> GenerationResponse:
        """
        Raises:
            GenerationFailed: when the pipeline produced no form
        """
        if not result.success or result.form is None:
            error = result.errors[0]
            raise GenerationFailed(error.message, error.code)

        form = result.form
        return GenerationResponse(
            success=True,
            message="Form generated successfully",
            form=form.to_dict(),
            detections=[detection.to_dict() for detection in result.detections],
            quality=result.quality.to_dict() if result.quality else None,
            preview=result.preview.to_dict() if result.preview else None,
            warnings=[warning.to_dict() for warning in result.warnings],
            field_count=len(form.fields),
            processing_time=form.metadata.processing_time_ms
        )
