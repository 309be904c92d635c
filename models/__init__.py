# -------------------------
# Enums
# -------------------------
from .enums import (
    UserRole,
    Availability,
    PropertyType,
    PropertyStatus,
    ServiceRequestStatus,
    ServiceRequestPriority,
    DocumentType,
    FinancialRecordType,
    NotificationType,
)

# -------------------------
# User Models
# -------------------------
from .user import (
    User,
    EmergencyContact,
    PropertyManagerProfile,
    TenantProfile,
    ServiceProviderProfile,
    DemoAccount,
)

# -------------------------
# Domain Records
# -------------------------
from .property import Property
from .service_request import ServiceRequest
from .document import Document
from .financial import (
    FinancialRecord,
    PropertyFinancials,
    ServiceRequestTrend,
    AnalyticsData,
)
from .message import Message, Notification

# -------------------------
# Bundles / Session
# -------------------------
from .bundle import (
    ManagerBundle,
    TenantBundle,
    ProviderBundle,
    AnyBundle,
    DataBundle,
    DashboardStats,
    data_bundle_adapter,
)
from .session import LoginRequest, SessionState

__all__ = [
    # enums
    "UserRole",
    "Availability",
    "PropertyType",
    "PropertyStatus",
    "ServiceRequestStatus",
    "ServiceRequestPriority",
    "DocumentType",
    "FinancialRecordType",
    "NotificationType",

    # users
    "User",
    "EmergencyContact",
    "PropertyManagerProfile",
    "TenantProfile",
    "ServiceProviderProfile",
    "DemoAccount",

    # records
    "Property",
    "ServiceRequest",
    "Document",
    "FinancialRecord",
    "PropertyFinancials",
    "ServiceRequestTrend",
    "AnalyticsData",
    "Message",
    "Notification",

    # bundles / session
    "ManagerBundle",
    "TenantBundle",
    "ProviderBundle",
    "AnyBundle",
    "DataBundle",
    "DashboardStats",
    "data_bundle_adapter",
    "LoginRequest",
    "SessionState",
]
