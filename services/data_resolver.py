# services/data_resolver.py

"""
Resolves the role-shaped data bundle for a demo user.

Lookups are by user id. An id with no matching profile falls back to the
default demo fixture for that role; an unknown role yields None. Nothing
here raises.
"""

from typing import Optional, Union, List

from core.logging_config import logger
from models.enums import UserRole, PropertyStatus, ServiceRequestStatus
from models.user import (
    User,
    PropertyManagerProfile,
    TenantProfile,
    ServiceProviderProfile,
)
from models.message import Message, Notification
from models.bundle import (
    DataBundle,
    ManagerBundle,
    TenantBundle,
    ProviderBundle,
    DashboardStats,
)
from mock_data import (
    MOCK_USERS,
    MOCK_PROPERTY_MANAGERS,
    MOCK_TENANTS,
    MOCK_SERVICE_PROVIDERS,
    DEFAULT_PROPERTY_MANAGER,
    DEFAULT_TENANT,
    DEFAULT_SERVICE_PROVIDER,
    MOCK_PROPERTIES,
    MOCK_SERVICE_REQUESTS,
    MOCK_DOCUMENTS,
    MOCK_MESSAGES,
    MOCK_NOTIFICATIONS,
    MOCK_ANALYTICS,
)


# -----------------------------------------------------
# User lookups
# -----------------------------------------------------
def get_user_by_email(email: str) -> Optional[User]:
    if not email:
        return None
    # Looser than an exact match: "  Sarah@PropertyManagement.com " finds user 1
    email = email.strip().lower()
    return next((u for u in MOCK_USERS if u.email.lower() == email), None)


def get_user_by_id(user_id: str) -> Optional[User]:
    return next((u for u in MOCK_USERS if u.id == user_id), None)


def _find_profile(profiles: list, user_id: str, default):
    profile = next((p for p in profiles if p.id == user_id), None)
    if profile is None:
        logger.debug(f"No profile for user {user_id}, using default fixture {default.id}")
        return default
    return profile


# -----------------------------------------------------
# Per-role bundles
# -----------------------------------------------------
def _manager_bundle(user_id: str) -> ManagerBundle:
    manager: PropertyManagerProfile = _find_profile(
        MOCK_PROPERTY_MANAGERS, user_id, DEFAULT_PROPERTY_MANAGER
    )
    properties = [p for p in MOCK_PROPERTIES if p.manager_id == manager.id]
    property_ids = {p.id for p in properties}

    return ManagerBundle(
        user=manager,
        properties=properties,
        service_requests=[r for r in MOCK_SERVICE_REQUESTS if r.property_id in property_ids],
        tenants=[u for u in MOCK_USERS if u.role == UserRole.tenant],
        service_providers=list(MOCK_SERVICE_PROVIDERS),
        analytics=MOCK_ANALYTICS,
    )


def _tenant_bundle(user_id: str) -> TenantBundle:
    tenant: TenantProfile = _find_profile(MOCK_TENANTS, user_id, DEFAULT_TENANT)

    tenant_property = next(
        (p for p in MOCK_PROPERTIES if p.tenant_id == tenant.id),
        None,
    )
    if tenant_property is None:
        tenant_property = next(
            (p for p in MOCK_PROPERTIES if p.id == tenant.property_id),
            None,
        )

    return TenantBundle(
        user=tenant,
        property=tenant_property,
        service_requests=[r for r in MOCK_SERVICE_REQUESTS if r.tenant_id == tenant.id],
        documents=[d for d in MOCK_DOCUMENTS if d.tenant_id == tenant.id],
    )


def _provider_bundle(user_id: str) -> ProviderBundle:
    provider: ServiceProviderProfile = _find_profile(
        MOCK_SERVICE_PROVIDERS, user_id, DEFAULT_SERVICE_PROVIDER
    )
    work_orders = [r for r in MOCK_SERVICE_REQUESTS if r.assigned_provider_id == provider.id]

    return ProviderBundle(
        user=provider,
        work_orders=work_orders,
        completed_jobs=[r for r in work_orders if r.status == ServiceRequestStatus.completed],
        properties=list(MOCK_PROPERTIES),
    )


_BUNDLE_BUILDERS = {
    UserRole.property_manager.value: _manager_bundle,
    UserRole.tenant.value: _tenant_bundle,
    UserRole.service_provider.value: _provider_bundle,
}


def get_data_for_user(user_id: str, role: Union[UserRole, str]) -> Optional[DataBundle]:
    """
    Build the data bundle for a user.

    Args:
        user_id: Demo user id
        role: One of the UserRole values

    Returns:
        ManagerBundle / TenantBundle / ProviderBundle, or None for an unknown role
    """
    role_value = role.value if isinstance(role, UserRole) else str(role)
    builder = _BUNDLE_BUILDERS.get(role_value)
    if builder is None:
        logger.warning(f"No data bundle for role '{role_value}' (user {user_id})")
        return None
    return builder(user_id)


# -----------------------------------------------------
# Inbox helpers
# -----------------------------------------------------
def get_notifications_for_user(user_id: str) -> List[Notification]:
    notifications = [n for n in MOCK_NOTIFICATIONS if n.user_id == user_id]
    return sorted(notifications, key=lambda n: n.created_at, reverse=True)


def get_messages_for_user(user_id: str) -> List[Message]:
    messages = [
        m for m in MOCK_MESSAGES
        if m.sender_id == user_id or m.receiver_id == user_id
    ]
    return sorted(messages, key=lambda m: m.created_at, reverse=True)


# -----------------------------------------------------
# Dashboard stat cards
# -----------------------------------------------------
def compute_dashboard_stats(bundle: DataBundle) -> DashboardStats:
    """
    Derive the headline numbers each role's dashboard shows.
    """
    if isinstance(bundle, ManagerBundle):
        properties = bundle.properties
        occupied = [p for p in properties if p.status == PropertyStatus.occupied]
        vacant = [p for p in properties if p.status == PropertyStatus.vacant]
        maintenance = [p for p in properties if p.status == PropertyStatus.maintenance]
        occupancy = round(len(occupied) / len(properties) * 100) if properties else 0

        return DashboardStats(
            role=bundle.role,
            total_properties=len(properties),
            occupied_properties=len(occupied),
            vacant_properties=len(vacant),
            maintenance_properties=len(maintenance),
            total_tenants=len(bundle.tenants),
            occupancy_rate=occupancy,
            monthly_revenue=sum(p.rent_amount for p in occupied),
            total_service_requests=len(bundle.service_requests),
            pending_requests=sum(
                1 for r in bundle.service_requests if r.status == ServiceRequestStatus.pending
            ),
        )

    if isinstance(bundle, TenantBundle):
        requests = bundle.service_requests
        rent = bundle.user.rent_amount or (bundle.property.rent_amount if bundle.property else 0)

        return DashboardStats(
            role=bundle.role,
            total_service_requests=len(requests),
            pending_requests=sum(1 for r in requests if r.status == ServiceRequestStatus.pending),
            completed_requests=sum(1 for r in requests if r.status == ServiceRequestStatus.completed),
            rent_amount=rent,
            lease_end_date=bundle.user.lease_end_date.isoformat(),
        )

    if isinstance(bundle, ProviderBundle):
        orders = bundle.work_orders

        return DashboardStats(
            role=bundle.role,
            total_service_requests=len(orders),
            assigned_orders=sum(1 for r in orders if r.status == ServiceRequestStatus.assigned),
            in_progress_orders=sum(1 for r in orders if r.status == ServiceRequestStatus.in_progress),
            completed_requests=len(bundle.completed_jobs),
            total_earnings=sum(job.billable_amount for job in bundle.completed_jobs),
            average_rating=bundle.user.rating,
        )

    raise TypeError(f"Unsupported bundle type: {type(bundle).__name__}")
