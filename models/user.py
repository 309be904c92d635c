# models/user.py

from typing import Optional, List, Literal
from datetime import datetime, date
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from .enums import UserRole, Availability


# ===============================================================
# DEMO USER MODELS
# ===============================================================

class User(BaseModel):
    """
    Identity record shared by every role.
    Frozen: a user's role never changes after creation.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: EmailStr
    role: UserRole
    avatar: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime


class EmergencyContact(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    phone: str
    relationship: str


class PropertyManagerProfile(User):
    role: Literal["property_manager"] = "property_manager"
    company_name: Optional[str] = None
    managed_properties: List[str] = Field(default_factory=list)
    is_business_manager: bool = False


class TenantProfile(User):
    role: Literal["tenant"] = "tenant"
    property_id: str
    lease_start_date: date
    lease_end_date: date
    rent_amount: float
    emergency_contact: Optional[EmergencyContact] = None


class ServiceProviderProfile(User):
    role: Literal["service_provider"] = "service_provider"
    company_name: str
    services: List[str] = Field(default_factory=list)
    rating: float
    completed_jobs: int
    availability: Availability = Availability.available


class DemoAccount(BaseModel):
    """
    One of the quick-login accounts advertised on the login screen.
    """
    email: str
    role: UserRole
    label: str
    description: str
