from .fixtures import (
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
    MOCK_FINANCIAL_RECORDS,
    MOCK_MESSAGES,
    MOCK_NOTIFICATIONS,
    MOCK_PROPERTY_FINANCIALS,
    MOCK_ANALYTICS,
    DEMO_ACCOUNTS,
    DEMO_PASSWORD,
)

__all__ = [
    "MOCK_USERS",
    "MOCK_PROPERTY_MANAGERS",
    "MOCK_TENANTS",
    "MOCK_SERVICE_PROVIDERS",
    "DEFAULT_PROPERTY_MANAGER",
    "DEFAULT_TENANT",
    "DEFAULT_SERVICE_PROVIDER",
    "MOCK_PROPERTIES",
    "MOCK_SERVICE_REQUESTS",
    "MOCK_DOCUMENTS",
    "MOCK_FINANCIAL_RECORDS",
    "MOCK_MESSAGES",
    "MOCK_NOTIFICATIONS",
    "MOCK_PROPERTY_FINANCIALS",
    "MOCK_ANALYTICS",
    "DEMO_ACCOUNTS",
    "DEMO_PASSWORD",
]
