# backend/app/api/v1/endpoints/analyze.py
from fastapi import APIRouter, UploadFile, File, HTTPException
from ....models.generation import AnalysisResponse
from ....services.form_service import FormService, GenerationFailed
from .generate import read_csv_upload
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/", response_model=AnalysisResponse)
async def analyze_upload(file: UploadFile = File(...)):
    """
    Profiles an uploaded CSV and reports detected types and data quality,
    without building a form.
    """
    content = await read_csv_upload(file)

    try:
        return FormService.analyze_upload(content)
    except GenerationFailed as e:
        logger.warning(f"Analysis failed for {file.filename}: {e.code} {e.message}")
        raise HTTPException(status_code=422, detail=e.message)
    except Exception as e:
        logger.error(f"Unexpected error analyzing {file.filename}: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error analyzing file: {str(e)}"
        )
