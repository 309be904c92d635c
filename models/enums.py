from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# USER ROLE
# -----------------------------------------------------
class UserRole(BaseStrEnum):
    """Determines which dashboard and data bundle a user gets."""

    property_manager = "property_manager"
    tenant = "tenant"
    service_provider = "service_provider"


# -----------------------------------------------------
# PROVIDER AVAILABILITY
# -----------------------------------------------------
class Availability(BaseStrEnum):
    available = "available"
    busy = "busy"
    unavailable = "unavailable"


# -----------------------------------------------------
# PROPERTY TYPE / STATUS
# -----------------------------------------------------
class PropertyType(BaseStrEnum):
    apartment = "apartment"
    house = "house"
    commercial = "commercial"
    condo = "condo"


class PropertyStatus(BaseStrEnum):
    occupied = "occupied"
    vacant = "vacant"
    maintenance = "maintenance"


# -----------------------------------------------------
# SERVICE REQUEST STATUS
# -----------------------------------------------------
class ServiceRequestStatus(BaseStrEnum):
    """Workflow state for a service request / work order."""

    pending = "pending"
    assigned = "assigned"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"


# -----------------------------------------------------
# SERVICE REQUEST PRIORITY
# -----------------------------------------------------
class ServiceRequestPriority(BaseStrEnum):
    """Indicates importance/priority of the request."""

    low = "low"
    medium = "medium"
    high = "high"
    emergency = "emergency"


# -----------------------------------------------------
# DOCUMENT TYPE
# -----------------------------------------------------
class DocumentType(BaseStrEnum):
    lease = "lease"
    invoice = "invoice"
    receipt = "receipt"
    inspection = "inspection"
    insurance = "insurance"
    permit = "permit"
    other = "other"


# -----------------------------------------------------
# FINANCIAL RECORD TYPE
# -----------------------------------------------------
class FinancialRecordType(BaseStrEnum):
    income = "income"
    expense = "expense"


# -----------------------------------------------------
# NOTIFICATION TYPE
# -----------------------------------------------------
class NotificationType(BaseStrEnum):
    service_request = "service_request"
    payment = "payment"
    maintenance = "maintenance"
    lease = "lease"
    general = "general"
