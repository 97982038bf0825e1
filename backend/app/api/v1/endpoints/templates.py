# backend/app/api/v1/endpoints/templates.py
from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from .....core.formgen.templates import CSV_TEMPLATES, get_template, template_csv

router = APIRouter()


@router.get("/")
async def list_templates():
    templates = [template.to_dict() for template in CSV_TEMPLATES.values()]
    return {
        "success": True,
        "templates": templates,
        "count": len(templates)
    }


@router.get("/{template_key}")
async def get_template_detail(template_key: str):
    template = get_template(template_key)
    if template is None:
        raise HTTPException(
            status_code=404,
            detail=f"Template not found: {template_key}"
        )
    return template.to_dict()


@router.get("/{template_key}/csv")
async def download_template(template_key: str):
    """Sample CSV of a template, as a file download."""
    template = get_template(template_key)
    if template is None:
        raise HTTPException(
            status_code=404,
            detail=f"Template not found: {template_key}"
        )

    return Response(
        content=template_csv(template),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{template.filename}"'}
    )
