from typing import List
from fastapi import APIRouter, Depends

from dependencies.session import (
    get_current_user,
    get_current_bundle,
    requires_permission,
)
from models.bundle import AnyBundle, DataBundle, DashboardStats, ManagerBundle, ProviderBundle
from models.financial import AnalyticsData
from models.message import Message, Notification
from models.property import Property
from models.service_request import ServiceRequest
from models.user import User
from services.data_resolver import (
    compute_dashboard_stats,
    get_messages_for_user,
    get_notifications_for_user,
)


router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
)


# -----------------------------------------------------
# GET /dashboard
# Full bundle for the logged-in role
# -----------------------------------------------------
@router.get("", response_model=DataBundle, summary="Data bundle for the current user")
def read_dashboard(bundle: AnyBundle = Depends(get_current_bundle)):
    return bundle


@router.get("/stats", response_model=DashboardStats, summary="Dashboard stat cards")
def read_stats(bundle: AnyBundle = Depends(get_current_bundle)):
    return compute_dashboard_stats(bundle)


# -----------------------------------------------------
# Inbox
# -----------------------------------------------------
@router.get(
    "/notifications",
    response_model=List[Notification],
    dependencies=[Depends(requires_permission("notifications:read"))],
)
def read_notifications(current_user: User = Depends(get_current_user)):
    return get_notifications_for_user(current_user.id)


@router.get(
    "/messages",
    response_model=List[Message],
    dependencies=[Depends(requires_permission("messages:read"))],
)
def read_messages(current_user: User = Depends(get_current_user)):
    return get_messages_for_user(current_user.id)


# -----------------------------------------------------
# Role-specific slices of the bundle
# -----------------------------------------------------
@router.get(
    "/properties",
    response_model=List[Property],
    dependencies=[Depends(requires_permission("properties:read"))],
)
def read_properties(bundle: AnyBundle = Depends(get_current_bundle)):
    if isinstance(bundle, (ManagerBundle, ProviderBundle)):
        return bundle.properties
    return []


@router.get(
    "/work-orders",
    response_model=List[ServiceRequest],
    dependencies=[Depends(requires_permission("work_orders:read"))],
)
def read_work_orders(bundle: AnyBundle = Depends(get_current_bundle)):
    if isinstance(bundle, ProviderBundle):
        return bundle.work_orders
    return []


@router.get(
    "/analytics",
    response_model=AnalyticsData,
    dependencies=[Depends(requires_permission("analytics:read"))],
)
def read_analytics(bundle: AnyBundle = Depends(get_current_bundle)):
    return bundle.analytics


@router.get(
    "/service-requests",
    response_model=List[ServiceRequest],
    dependencies=[Depends(requires_permission("service_requests:read"))],
)
def read_service_requests(bundle: AnyBundle = Depends(get_current_bundle)):
    return getattr(bundle, "service_requests", [])
