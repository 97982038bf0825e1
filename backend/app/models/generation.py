from pydantic import BaseModel, Field, validator
from typing import Any, Dict, List, Optional

from ...core.formgen.detector.models import FieldType
from ...core.formgen.generator.models import DetectionStrategy

VALID_FIELD_TYPES = [field_type.value for field_type in FieldType]
VALID_STRATEGIES = [strategy.value for strategy in DetectionStrategy]


class FieldValidationModel(BaseModel):
    min: Optional[float] = None
    max: Optional[float] = None
    pattern: Optional[str] = None
    min_length: Optional[int] = Field(None, ge=0)
    max_length: Optional[int] = Field(None, ge=0)
    step: Optional[float] = None


class FieldOverrideModel(BaseModel):
    """Correction applied to one column before the form is built"""

    column_index: int = Field(..., ge=0, description="Zero-based column index")
    field_type: Optional[str] = Field(None, description="Forced field type, e.g. 'email'")
    label: Optional[str] = None
    required: Optional[bool] = None
    options: Optional[List[str]] = None
    validation: Optional[FieldValidationModel] = None

    @validator('field_type')
    def validate_field_type(cls, v):
        if v is not None and v not in VALID_FIELD_TYPES:
            raise ValueError(f"field_type must be one of: {VALID_FIELD_TYPES}")
        return v


class GenerateTextRequest(BaseModel):
    """Request to generate a form from CSV text"""

    csv_text: str = Field(..., description="Raw CSV content, header row first")
    title: str = Field("Generated Form", description="Form title")
    description: str = Field("Form generated from CSV data", description="Form description")
    include_preview: bool = True
    detection_strategy: str = Field("auto", description="auto, conservative or aggressive")
    field_overrides: List[FieldOverrideModel] = Field(default_factory=list)

    @validator('title')
    def validate_title(cls, v):
        if not v or not v.strip():
            raise ValueError("title cannot be empty")
        return v.strip()

    @validator('detection_strategy')
    def validate_detection_strategy(cls, v):
        if v not in VALID_STRATEGIES:
            raise ValueError(f"detection_strategy must be one of: {VALID_STRATEGIES}")
        return v


class GenerationResponse(BaseModel):
    """Response of a form generation"""

    success: bool
    message: str
    form: Optional[Dict[str, Any]] = None
    detections: List[Dict[str, Any]] = Field(default_factory=list)
    quality: Optional[Dict[str, Any]] = None
    preview: Optional[Dict[str, Any]] = None
    warnings: List[Dict[str, Any]] = Field(default_factory=list)
    field_count: int = 0
    processing_time: float = 0.0


class AnalysisResponse(BaseModel):
    """Per-column analysis of an uploaded CSV"""

    success: bool
    message: str
    total_rows: int = 0
    delimiter: str = ","
    profiles: List[Dict[str, Any]] = Field(default_factory=list)
    detections: List[Dict[str, Any]] = Field(default_factory=list)
    quality: Optional[Dict[str, Any]] = None
    warnings: List[Dict[str, Any]] = Field(default_factory=list)
