# tests/test_data_resolver.py

"""
Tests for role bundle resolution and dashboard stats.
"""

import pytest

from mock_data import (
    MOCK_USERS,
    MOCK_TENANTS,
    MOCK_SERVICE_PROVIDERS,
    MOCK_SERVICE_REQUESTS,
    DEFAULT_TENANT,
    DEFAULT_SERVICE_PROVIDER,
    DEFAULT_PROPERTY_MANAGER,
)
from models.bundle import ManagerBundle, TenantBundle, ProviderBundle, data_bundle_adapter
from models.enums import UserRole
from services.data_resolver import (
    get_data_for_user,
    get_user_by_email,
    get_user_by_id,
    get_messages_for_user,
    get_notifications_for_user,
    compute_dashboard_stats,
)


# -----------------------------------------------------
# Lookups
# -----------------------------------------------------
def test_user_lookups():
    assert get_user_by_email("mike.chen@email.com").id == "2"
    assert get_user_by_email("MIKE.CHEN@EMAIL.COM ").id == "2"
    assert get_user_by_email("ghost@email.com") is None
    assert get_user_by_email("") is None

    assert get_user_by_id("5").name == "Elite Electrical Services"
    assert get_user_by_id("42") is None


# -----------------------------------------------------
# Manager
# -----------------------------------------------------
def test_manager_bundle():
    bundle = get_data_for_user("1", "property_manager")

    assert isinstance(bundle, ManagerBundle)
    assert bundle.user == DEFAULT_PROPERTY_MANAGER
    assert len(bundle.properties) == 5
    assert bundle.service_requests == MOCK_SERVICE_REQUESTS
    assert {u.id for u in bundle.tenants} == {"2", "4"}
    assert all(u.role == UserRole.tenant for u in bundle.tenants)
    assert bundle.service_providers == MOCK_SERVICE_PROVIDERS
    assert bundle.analytics.total_properties == 5


def test_manager_bundle_unknown_id_uses_default_manager():
    bundle = get_data_for_user("does-not-exist", UserRole.property_manager)
    assert bundle.user.id == "1"


# -----------------------------------------------------
# Tenant
# -----------------------------------------------------
@pytest.mark.parametrize("tenant", MOCK_TENANTS, ids=lambda t: t.name)
def test_tenant_bundle_only_contains_own_records(tenant):
    bundle = get_data_for_user(tenant.id, "tenant")

    assert isinstance(bundle, TenantBundle)
    assert bundle.user == tenant
    assert bundle.property is not None
    assert bundle.property.tenant_id == tenant.id
    assert bundle.service_requests
    assert all(r.tenant_id == tenant.id for r in bundle.service_requests)
    assert bundle.documents
    assert all(d.tenant_id == tenant.id for d in bundle.documents)


def test_tenant_bundle_for_mike():
    bundle = get_data_for_user("2", "tenant")

    assert bundle.property.id == "1"
    assert [r.id for r in bundle.service_requests] == ["1", "2", "4"]
    assert [d.id for d in bundle.documents] == ["1"]


def test_tenant_bundle_for_lisa_is_not_mikes():
    bundle = get_data_for_user("4", "tenant")

    assert bundle.user.name == "Lisa Rodriguez"
    assert bundle.property.id == "3"
    assert [r.id for r in bundle.service_requests] == ["3"]
    assert [d.id for d in bundle.documents] == ["5"]


def test_tenant_bundle_unknown_id_uses_default_tenant():
    bundle = get_data_for_user("999", "tenant")
    assert bundle.user == DEFAULT_TENANT


# -----------------------------------------------------
# Service provider
# -----------------------------------------------------
@pytest.mark.parametrize("provider", MOCK_SERVICE_PROVIDERS, ids=lambda p: p.name)
def test_provider_bundle_only_contains_assigned_work(provider):
    bundle = get_data_for_user(provider.id, "service_provider")

    assert isinstance(bundle, ProviderBundle)
    assert bundle.user == provider
    assert all(r.assigned_provider_id == provider.id for r in bundle.work_orders)
    assert all(r.status == "completed" for r in bundle.completed_jobs)
    assert set(r.id for r in bundle.completed_jobs) <= set(r.id for r in bundle.work_orders)


def test_abc_plumbing_work_orders():
    bundle = get_data_for_user("3", "service_provider")

    assert bundle.work_orders == [r for r in MOCK_SERVICE_REQUESTS if r.assigned_provider_id == "3"]
    assert [r.id for r in bundle.work_orders] == ["1"]
    assert bundle.completed_jobs == []
    assert len(bundle.properties) == 5


def test_elite_electrical_completed_jobs():
    bundle = get_data_for_user("5", "service_provider")
    assert [r.id for r in bundle.completed_jobs] == ["3"]


def test_provider_bundle_unknown_id_uses_default_provider():
    bundle = get_data_for_user("nope", "service_provider")
    assert bundle.user == DEFAULT_SERVICE_PROVIDER


# -----------------------------------------------------
# Unknown role
# -----------------------------------------------------
@pytest.mark.parametrize("role", ["admin", "", "TENANT", "owner"])
def test_unknown_role_returns_none(role):
    assert get_data_for_user("1", role) is None


def test_every_demo_user_bundle_matches_role():
    for user in MOCK_USERS:
        bundle = get_data_for_user(user.id, user.role)
        assert bundle.role == user.role


def test_bundle_json_parses_back_to_same_variant():
    for user in MOCK_USERS:
        bundle = get_data_for_user(user.id, user.role)
        parsed = data_bundle_adapter.validate_json(bundle.model_dump_json())
        assert parsed == bundle


# -----------------------------------------------------
# Inbox
# -----------------------------------------------------
def test_notifications_for_user():
    assert [n.id for n in get_notifications_for_user("1")] == ["1"]
    assert [n.id for n in get_notifications_for_user("3")] == ["3"]
    assert get_notifications_for_user("6") == []


def test_messages_for_user_newest_first():
    assert [m.id for m in get_messages_for_user("1")] == ["2", "1", "3"]
    assert [m.id for m in get_messages_for_user("2")] == ["2", "1"]
    assert get_messages_for_user("5") == []


# -----------------------------------------------------
# Dashboard stats
# -----------------------------------------------------
def test_manager_stats():
    stats = compute_dashboard_stats(get_data_for_user("1", "property_manager"))

    assert stats.role == "property_manager"
    assert stats.total_properties == 5
    assert stats.occupied_properties == 2
    assert stats.vacant_properties == 2
    assert stats.maintenance_properties == 1
    assert stats.occupancy_rate == 40
    assert stats.monthly_revenue == 8000
    assert stats.total_service_requests == 4
    assert stats.pending_requests == 1


def test_tenant_stats():
    stats = compute_dashboard_stats(get_data_for_user("2", "tenant"))

    assert stats.total_service_requests == 3
    assert stats.pending_requests == 1
    assert stats.completed_requests == 0
    assert stats.rent_amount == 2500
    assert stats.lease_end_date == "2025-01-31"


def test_provider_stats():
    stats = compute_dashboard_stats(get_data_for_user("5", "service_provider"))

    assert stats.total_service_requests == 1
    assert stats.completed_requests == 1
    assert stats.total_earnings == 185
    assert stats.average_rating == 4.9


def test_stats_rejects_non_bundle():
    with pytest.raises(TypeError):
        compute_dashboard_stats({"role": "tenant"})
