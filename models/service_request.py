# models/service_request.py

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from .enums import ServiceRequestStatus, ServiceRequestPriority


class ServiceRequest(BaseModel):
    """
    Maintenance request raised by a tenant.
    Once assigned to a provider it doubles as that provider's work order.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    category: str
    priority: ServiceRequestPriority
    status: ServiceRequestStatus
    property_id: str
    tenant_id: str
    assigned_provider_id: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    estimated_cost: Optional[float] = None
    actual_cost: Optional[float] = None
    created_at: datetime
    updated_at: datetime
    completed_at: Optional[datetime] = None
    notes: List[str] = Field(default_factory=list)

    @property
    def billable_amount(self) -> float:
        """Actual cost when known, otherwise the estimate."""
        return self.actual_cost or self.estimated_cost or 0
