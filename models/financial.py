# models/financial.py

from typing import List
from datetime import date as date_type, datetime
from pydantic import BaseModel, ConfigDict

from .enums import FinancialRecordType


class FinancialRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: FinancialRecordType
    category: str
    amount: float
    description: str
    property_id: str
    date: date_type
    created_at: datetime


class PropertyFinancials(BaseModel):
    model_config = ConfigDict(frozen=True)

    property_id: str
    monthly_income: float
    monthly_expenses: float
    net_income: float
    occupancy_rate: float
    year_to_date_income: float
    year_to_date_expenses: float


class ServiceRequestTrend(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: str
    count: int
    avg_resolution_time: float


class AnalyticsData(BaseModel):
    """Portfolio-wide aggregate shown on the manager analytics page."""
    model_config = ConfigDict(frozen=True)

    total_properties: int
    total_tenants: int
    total_service_requests: int
    monthly_revenue: float
    occupancy_rate: float
    average_rent: float
    maintenance_costs: float
    property_performance: List[PropertyFinancials]
    service_request_trends: List[ServiceRequestTrend]
