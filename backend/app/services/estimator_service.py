"""
Calculator tools: roof materials, quote totals, material recognition demo
and project progress. All functions are pure.
"""
import hashlib
import math
from datetime import date
from typing import Iterable, List, Optional, Tuple
from app.models.task import TaskStatus
from app.schemas.estimator import (
    RoofEstimate, QuoteLineItem, QuoteLineTotal, Quote, MaterialRecognition
)

TILE_SIZE = 0.19 * 0.33  # m² per tile
BATTEN_SPACING = 0.6  # metres
WASTE_FACTOR = 1.1  # 10% waste

MATERIAL_CATALOGUE = [
    MaterialRecognition(
        material="Pine Timber",
        confidence=92,
        description=(
            "Softwood commonly used in construction framing, furniture, and decorative "
            "elements. Typically light colored with visible grain patterns."
        ),
    ),
    MaterialRecognition(
        material="Clay Brick",
        confidence=88,
        description=(
            "Traditional building material made from fired clay. Durable, fire-resistant, "
            "and provides good thermal mass for energy efficiency."
        ),
    ),
    MaterialRecognition(
        material="Concrete",
        confidence=95,
        description=(
            "Composite material made from cement, aggregate (rocks and sand), and water. "
            "High compressive strength, used for foundations, slabs, and structural elements."
        ),
    ),
    MaterialRecognition(
        material="Structural Steel",
        confidence=87,
        description=(
            "Alloy of iron and carbon, used for structural framing, reinforcement, and "
            "connections. High tensile strength and durability."
        ),
    ),
    MaterialRecognition(
        material="Gypsum Board",
        confidence=91,
        description=(
            "Also known as drywall or plasterboard. Used for interior wall and ceiling "
            "finishes. Fire-resistant and provides good sound insulation."
        ),
    ),
]


def estimate_roof(length: float, width: float, pitch: float, overhang: float = 0.3) -> RoofEstimate:
    """
    Estimate roofing materials for a rectangular roof.

    Area is the plan area scaled by a pitch factor of (1 + pitch/100). Tiles and
    battens include a 10% waste allowance. Fascia and gutter run the full
    perimeter; ridge capping runs the length. Overhang is reported back but does
    not change the quantities.
    """
    pitch_factor = 1 + pitch / 100
    roof_area = length * width * pitch_factor

    tiles_needed = math.ceil((roof_area / TILE_SIZE) * WASTE_FACTOR)
    battens_needed = math.ceil((length / BATTEN_SPACING) * width * WASTE_FACTOR)

    perimeter = 2 * (length + width)

    return RoofEstimate(
        roof_area=round(roof_area, 2),
        tiles_needed=tiles_needed,
        battens_needed=battens_needed,
        fascia_meters=round(perimeter, 2),
        gutter_meters=round(perimeter, 2),
        ridge_capping_meters=round(length, 2),
        overhang=overhang,
    )


def calculate_quote(
    line_items: Iterable[QuoteLineItem],
    tax_rate: float,
    client_name: Optional[str] = None,
    project_name: Optional[str] = None
) -> Quote:
    """Compute line totals, subtotal, tax and grand total for a quote."""
    lines: List[QuoteLineTotal] = []
    for item in line_items:
        lines.append(QuoteLineTotal(
            description=item.description,
            quantity=item.quantity,
            unit_price=item.unit_price,
            total=round(item.quantity * item.unit_price, 2)
        ))

    subtotal = sum(item.quantity * item.unit_price for item in lines)
    tax = subtotal * (tax_rate / 100)

    return Quote(
        client_name=client_name,
        project_name=project_name,
        line_items=lines,
        tax_rate=tax_rate,
        subtotal=round(subtotal, 2),
        tax=round(tax, 2),
        total=round(subtotal + tax, 2),
    )


def recognize_material(image_bytes: bytes) -> MaterialRecognition:
    """
    Demo material recognizer.

    No model is involved: the image digest picks a catalogue entry, so the same
    image always yields the same answer.
    """
    digest = hashlib.sha256(image_bytes).digest()
    return MATERIAL_CATALOGUE[digest[0] % len(MATERIAL_CATALOGUE)]


def summarize_progress(
    statuses: Iterable[TaskStatus],
    end_date: Optional[date],
    today: Optional[date] = None
) -> Tuple[int, Optional[int]]:
    """Return (percent of tasks completed, days until end date)."""
    statuses = list(statuses)
    if statuses:
        completed = sum(1 for s in statuses if s == TaskStatus.COMPLETED)
        progress = int(round(completed / len(statuses) * 100))
    else:
        progress = 0

    if end_date is None:
        return progress, None

    today = today or date.today()
    return progress, (end_date - today).days
