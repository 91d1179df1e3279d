"""
Pydantic schemas for the calculator tools.
"""
from pydantic import BaseModel
from typing import List, Optional


class RoofEstimateRequest(BaseModel):
    """Roof dimensions in metres; pitch as a percentage."""
    model_config = {"allow_inf_nan": False}

    length: float
    width: float
    pitch: float
    overhang: float = 0.3


class RoofEstimate(BaseModel):
    """Materials needed for a roof, waste allowance included."""
    roof_area: float
    tiles_needed: int
    battens_needed: int
    fascia_meters: float
    gutter_meters: float
    ridge_capping_meters: float
    overhang: float


class RoofEstimateEnvelope(BaseModel):
    estimate: RoofEstimate


class QuoteLineItem(BaseModel):
    """Schema for a quote line item."""
    model_config = {"allow_inf_nan": False}

    description: str = ""
    quantity: float = 1
    unit_price: float = 0


class QuoteRequest(BaseModel):
    """Schema for quote generation. Tax rate defaults to the configured GST."""
    model_config = {"allow_inf_nan": False}

    client_name: Optional[str] = None
    project_name: Optional[str] = None
    line_items: List[QuoteLineItem] = []
    tax_rate: Optional[float] = None


class QuoteLineTotal(QuoteLineItem):
    total: float


class Quote(BaseModel):
    """Schema for quote totals."""
    client_name: Optional[str] = None
    project_name: Optional[str] = None
    line_items: List[QuoteLineTotal]
    tax_rate: float
    subtotal: float
    tax: float
    total: float


class QuoteEnvelope(BaseModel):
    quote: Quote


class MaterialRecognition(BaseModel):
    """Result of the material recognition demo."""
    material: str
    confidence: int  # Percentage
    description: str


class MaterialRecognitionEnvelope(BaseModel):
    result: MaterialRecognition
