# backend/app/api/v1/endpoints/generate.py
from fastapi import APIRouter, UploadFile, File, Form, HTTPException
from ....models.generation import GenerateTextRequest, GenerationResponse
from ....services.form_service import FormService, GenerationFailed
from ....core.config import get_settings
import logging

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


async def read_csv_upload(file: UploadFile) -> bytes:
    """
    Reads an uploaded CSV, enforcing extension and size limit.

    Raises:
        HTTPException: 400 for non-CSV files, 413 for oversize uploads
    """
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(
            status_code=400,
            detail="Only CSV files are allowed"
        )

    content = await file.read()

    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum: {settings.MAX_UPLOAD_SIZE / (1024 * 1024):.0f}MB"
        )

    return content


@router.post("/", response_model=GenerationResponse)
async def generate_from_upload(
        file: UploadFile = File(...),
        title: str = Form("Generated Form"),
        description: str = Form("Form generated from CSV data"),
        include_preview: bool = Form(True),
        detection_strategy: str = Form("auto")
):
    """
    Generates a form schema from an uploaded CSV file.
    """
    content = await read_csv_upload(file)
    logger.info(f"Generating form from upload: {file.filename} ({len(content)} bytes)")

    try:
        options = FormService.build_options(
            title=title,
            description=description,
            include_preview=include_preview,
            detection_strategy=detection_strategy
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        return FormService.generate_from_upload(content, options)
    except GenerationFailed as e:
        logger.warning(f"Generation failed for {file.filename}: {e.code} {e.message}")
        raise HTTPException(status_code=422, detail=e.message)
    except Exception as e:
        logger.error(f"Unexpected error generating form from {file.filename}: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error generating form: {str(e)}"
        )


@router.post("/text", response_model=GenerationResponse)
async def generate_from_text(request: GenerateTextRequest):
    """
    Generates a form schema from CSV text sent as JSON.
    """
    logger.info(f"Generating form from text ({len(request.csv_text)} chars)")

    try:
        return FormService.generate_from_text(request)
    except GenerationFailed as e:
        logger.warning(f"Generation failed: {e.code} {e.message}")
        raise HTTPException(status_code=422, detail=e.message)
    except Exception as e:
        logger.error(f"Unexpected error generating form: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error generating form: {str(e)}"
        )
