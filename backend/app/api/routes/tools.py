"""
Calculator tool routes. These are stateless and need no sign-in.
"""
from fastapi import APIRouter, HTTPException, status, UploadFile, File
from app.core.config import settings
from app.schemas.estimator import (
    RoofEstimateRequest, RoofEstimateEnvelope, QuoteRequest, QuoteEnvelope,
    MaterialRecognitionEnvelope
)
from app.services.estimator_service import estimate_roof, calculate_quote, recognize_material

router = APIRouter(prefix="/tools", tags=["tools"])


@router.post("/roof-estimate", response_model=RoofEstimateEnvelope)
async def roof_estimate(request: RoofEstimateRequest):
    """Estimate tiles, battens, fascia, gutter and ridge capping for a roof."""
    estimate = estimate_roof(request.length, request.width, request.pitch, request.overhang)
    return {"estimate": estimate}


@router.post("/quote", response_model=QuoteEnvelope)
async def generate_quote(request: QuoteRequest):
    """Total up quote line items and add tax."""
    tax_rate = request.tax_rate if request.tax_rate is not None else settings.DEFAULT_TAX_RATE
    quote = calculate_quote(
        request.line_items,
        tax_rate,
        client_name=request.client_name,
        project_name=request.project_name
    )
    return {"quote": quote}


@router.post("/material-recognition", response_model=MaterialRecognitionEnvelope)
async def material_recognition(file: UploadFile = File(...)):
    """Identify the building material in an uploaded photo (demo)."""
    if file.content_type not in settings.ALLOWED_IMAGE_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid file type. Only JPEG and PNG are supported."
        )

    image_bytes = await file.read()
    if not image_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded file is empty"
        )
    if len(image_bytes) > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="File too large"
        )

    return {"result": recognize_material(image_bytes)}
