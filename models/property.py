# models/property.py

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from .enums import PropertyType, PropertyStatus


class Property(BaseModel):
    """A rentable unit or building managed by a property manager."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    address: str
    type: PropertyType
    units: Optional[int] = None
    size: int = Field(..., description="Floor area in sq ft")
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    rent_amount: float
    status: PropertyStatus
    manager_id: str
    tenant_id: Optional[str] = None
    amenities: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    description: str = ""
    created_at: datetime
