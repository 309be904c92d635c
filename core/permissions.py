# ============================================
# CENTRALIZED ROLE → PERMISSIONS MAP
# ============================================
ROLE_PERMISSIONS = {

    # =====================================================
    # PROPERTY MANAGER: whole portfolio
    # =====================================================
    "property_manager": [
        "properties:read",
        "tenants:read",
        "service_requests:read",
        "providers:read",
        "analytics:read",
        "messages:read",
        "notifications:read",
    ],


    # =====================================================
    # TENANT: own residence only
    # =====================================================
    "tenant": [
        "property:read",
        "service_requests:read",
        "documents:read",
        "messages:read",
        "notifications:read",
    ],


    # =====================================================
    # SERVICE PROVIDER: assigned work only
    # =====================================================
    "service_provider": [
        "work_orders:read",
        "properties:read",
        "messages:read",
        "notifications:read",
    ],
}
