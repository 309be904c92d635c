# models/bundle.py

"""
Role-shaped data bundles.

A bundle is a read-only projection over the fixtures, tagged with the role
it was built for. `DataBundle` is a discriminated union on `role`, so a
stored snapshot always parses back into the right shape.
"""

from typing import Optional, List, Literal, Union, Annotated
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .user import User, PropertyManagerProfile, TenantProfile, ServiceProviderProfile
from .property import Property
from .service_request import ServiceRequest
from .document import Document
from .financial import AnalyticsData


class ManagerBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["property_manager"] = "property_manager"
    user: PropertyManagerProfile
    properties: List[Property]
    service_requests: List[ServiceRequest]
    tenants: List[User]
    service_providers: List[ServiceProviderProfile]
    analytics: AnalyticsData


class TenantBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["tenant"] = "tenant"
    user: TenantProfile
    property: Optional[Property] = None
    service_requests: List[ServiceRequest]
    documents: List[Document]


class ProviderBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["service_provider"] = "service_provider"
    user: ServiceProviderProfile
    work_orders: List[ServiceRequest]
    completed_jobs: List[ServiceRequest]
    properties: List[Property]


AnyBundle = Union[ManagerBundle, TenantBundle, ProviderBundle]

DataBundle = Annotated[
    AnyBundle,
    Field(discriminator="role"),
]

data_bundle_adapter = TypeAdapter(DataBundle)


class DashboardStats(BaseModel):
    """
    Headline numbers for the dashboard stat cards.
    Only the fields relevant to the bundle's role are populated.
    """
    role: str

    # manager
    total_properties: Optional[int] = None
    occupied_properties: Optional[int] = None
    vacant_properties: Optional[int] = None
    maintenance_properties: Optional[int] = None
    total_tenants: Optional[int] = None
    occupancy_rate: Optional[float] = None
    monthly_revenue: Optional[float] = None

    # shared
    total_service_requests: Optional[int] = None
    pending_requests: Optional[int] = None
    completed_requests: Optional[int] = None

    # tenant
    rent_amount: Optional[float] = None
    lease_end_date: Optional[str] = None

    # provider
    assigned_orders: Optional[int] = None
    in_progress_orders: Optional[int] = None
    total_earnings: Optional[float] = None
    average_rating: Optional[float] = None
