"""
Municipality introduction response schemas.
"""
from pydantic import BaseModel
from typing import Dict, List


class ColumnHeaders(BaseModel):
    nepali: List[str]
    english: List[str]


class SlopeItem(BaseModel):
    slope_range_nepali: str
    slope_range_english: str
    area_sq_km: float
    area_percentage: float


class SlopeTotal(BaseModel):
    total_area_sq_km: float
    total_percentage: float


class SlopeMetadata(BaseModel):
    column_headers: ColumnHeaders
    summary: str


class SlopeResponse(BaseModel):
    title: str
    title_english: str
    data: List[SlopeItem]
    total: SlopeTotal
    metadata: SlopeMetadata


class AspectItem(BaseModel):
    direction_nepali: str
    direction_english: str
    area_sq_km: float
    area_percentage: float


class AspectExtreme(BaseModel):
    direction: str
    direction_english: str
    area_sq_km: float
    area_percentage: float


class AspectMetadata(BaseModel):
    column_headers: ColumnHeaders
    highest_area: AspectExtreme
    lowest_area: AspectExtreme


class AspectResponse(BaseModel):
    title: str
    title_english: str
    data: List[AspectItem]
    total: Dict[str, float]
    metadata: AspectMetadata


class WardSettlements(BaseModel):
    ward_number: str
    ward_number_english: str
    settlements: List[str]


class SettlementMetadata(BaseModel):
    total_wards: int
    column_headers: ColumnHeaders


class SettlementResponse(BaseModel):
    title: str
    title_english: str
    data: List[WardSettlements]
    metadata: SettlementMetadata
