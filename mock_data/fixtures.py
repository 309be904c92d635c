# mock_data/fixtures.py

"""
Static demo fixtures, seeded once at import time.

Every record here stands in for a database row. Nothing in the app writes
back to these lists; bundles are projections built from them on demand.
"""

from models.user import (
    User,
    DemoAccount,
    EmergencyContact,
    PropertyManagerProfile,
    TenantProfile,
    ServiceProviderProfile,
)
from models.property import Property
from models.service_request import ServiceRequest
from models.document import Document
from models.financial import (
    FinancialRecord,
    PropertyFinancials,
    ServiceRequestTrend,
    AnalyticsData,
)
from models.message import Message, Notification


# Any password is accepted; this is what the login screen pre-fills
DEMO_PASSWORD = "demo123"


# ============================================================
# USERS (the login list)
# ============================================================
MOCK_USERS = [
    User(
        id="1",
        name="Sarah Johnson",
        email="sarah@propertymanagement.com",
        role="property_manager",
        avatar="/avatars/sarah.jpg",
        phone="(555) 123-4567",
        created_at="2024-01-15T10:00:00Z",
    ),
    User(
        id="2",
        name="Mike Chen",
        email="mike.chen@email.com",
        role="tenant",
        avatar="/avatars/mike.jpg",
        phone="(555) 234-5678",
        created_at="2024-02-01T10:00:00Z",
    ),
    User(
        id="3",
        name="ABC Plumbing Services",
        email="contact@abcplumbing.com",
        role="service_provider",
        avatar="/avatars/abc-plumbing.jpg",
        phone="(555) 345-6789",
        created_at="2024-01-10T10:00:00Z",
    ),
    User(
        id="4",
        name="Lisa Rodriguez",
        email="lisa.rodriguez@email.com",
        role="tenant",
        avatar="/avatars/lisa.jpg",
        phone="(555) 456-7890",
        created_at="2024-03-01T10:00:00Z",
    ),
    User(
        id="5",
        name="Elite Electrical Services",
        email="info@eliteelectrical.com",
        role="service_provider",
        avatar="/avatars/elite-electrical.jpg",
        phone="(555) 567-8901",
        created_at="2024-01-20T10:00:00Z",
    ),
    User(
        id="6",
        name="ProFix HVAC",
        email="service@profixhvac.com",
        role="service_provider",
        avatar="/avatars/profix-hvac.jpg",
        phone="(555) 678-9012",
        created_at="2024-01-25T10:00:00Z",
    ),
]


# ============================================================
# ROLE PROFILES
# ============================================================
DEFAULT_PROPERTY_MANAGER = PropertyManagerProfile(
    id="1",
    name="Sarah Johnson",
    email="sarah@propertymanagement.com",
    avatar="/avatars/sarah.jpg",
    phone="(555) 123-4567",
    created_at="2024-01-15T10:00:00Z",
    company_name="Johnson Property Management",
    managed_properties=["1", "2", "3", "4", "5"],
    is_business_manager=True,
)

MOCK_PROPERTY_MANAGERS = [DEFAULT_PROPERTY_MANAGER]

DEFAULT_TENANT = TenantProfile(
    id="2",
    name="Mike Chen",
    email="mike.chen@email.com",
    avatar="/avatars/mike.jpg",
    phone="(555) 234-5678",
    created_at="2024-02-01T10:00:00Z",
    property_id="1",
    lease_start_date="2024-02-01",
    lease_end_date="2025-01-31",
    rent_amount=2500,
    emergency_contact=EmergencyContact(
        name="Lisa Chen",
        phone="(555) 987-6543",
        relationship="Sister",
    ),
)

MOCK_TENANTS = [
    DEFAULT_TENANT,
    TenantProfile(
        id="4",
        name="Lisa Rodriguez",
        email="lisa.rodriguez@email.com",
        avatar="/avatars/lisa.jpg",
        phone="(555) 456-7890",
        created_at="2024-03-01T10:00:00Z",
        property_id="3",
        lease_start_date="2024-03-01",
        lease_end_date="2025-02-28",
        rent_amount=5500,
    ),
]

DEFAULT_SERVICE_PROVIDER = ServiceProviderProfile(
    id="3",
    name="ABC Plumbing Services",
    email="contact@abcplumbing.com",
    avatar="/avatars/abc-plumbing.jpg",
    phone="(555) 345-6789",
    created_at="2024-01-10T10:00:00Z",
    company_name="ABC Plumbing Services",
    services=["Plumbing", "Emergency Repairs", "Pipe Installation", "Drain Cleaning"],
    rating=4.8,
    completed_jobs=247,
    availability="available",
)

MOCK_SERVICE_PROVIDERS = [
    DEFAULT_SERVICE_PROVIDER,
    ServiceProviderProfile(
        id="5",
        name="Elite Electrical Services",
        email="info@eliteelectrical.com",
        avatar="/avatars/elite-electrical.jpg",
        phone="(555) 567-8901",
        created_at="2024-01-20T10:00:00Z",
        company_name="Elite Electrical Services",
        services=["Electrical Repairs", "Wiring", "Lighting Installation", "Panel Upgrades"],
        rating=4.9,
        completed_jobs=189,
        availability="available",
    ),
    ServiceProviderProfile(
        id="6",
        name="ProFix HVAC",
        email="service@profixhvac.com",
        avatar="/avatars/profix-hvac.jpg",
        phone="(555) 678-9012",
        created_at="2024-01-25T10:00:00Z",
        company_name="ProFix HVAC",
        services=["HVAC Maintenance", "Air Conditioning", "Heating Repairs", "Duct Cleaning"],
        rating=4.7,
        completed_jobs=156,
        availability="busy",
    ),
]


# ============================================================
# PROPERTIES
# ============================================================
MOCK_PROPERTIES = [
    Property(
        id="1",
        name="Sunset Apartments - Unit 3B",
        address="123 Sunset Boulevard, Los Angeles, CA 90028",
        type="apartment",
        size=1200,
        bedrooms=2,
        bathrooms=2,
        rent_amount=2500,
        status="occupied",
        manager_id="1",
        tenant_id="2",
        amenities=["Pool", "Gym", "Parking", "Laundry", "Air Conditioning"],
        images=["/properties/sunset-apt-1.jpg", "/properties/sunset-apt-2.jpg"],
        description="Modern 2-bedroom apartment with city views and premium amenities.",
        created_at="2024-01-15T10:00:00Z",
    ),
    Property(
        id="2",
        name="Downtown Office Complex - Suite 401",
        address="456 Business Drive, Los Angeles, CA 90013",
        type="commercial",
        size=2500,
        rent_amount=4500,
        status="vacant",
        manager_id="1",
        amenities=["Elevator", "Parking", "Security", "Conference Rooms"],
        images=["/properties/office-1.jpg", "/properties/office-2.jpg"],
        description="Professional office space in the heart of downtown.",
        created_at="2024-01-20T10:00:00Z",
    ),
    Property(
        id="3",
        name="Maple Street House",
        address="789 Maple Street, Beverly Hills, CA 90210",
        type="house",
        size=2800,
        bedrooms=4,
        bathrooms=3,
        rent_amount=5500,
        status="occupied",
        manager_id="1",
        tenant_id="4",
        amenities=["Garden", "Garage", "Fireplace", "Hardwood Floors"],
        images=["/properties/house-1.jpg", "/properties/house-2.jpg"],
        description="Beautiful family home with spacious rooms and private garden.",
        created_at="2024-01-25T10:00:00Z",
    ),
    Property(
        id="4",
        name="Ocean View Condos - Unit 12A",
        address="321 Ocean Drive, Santa Monica, CA 90401",
        type="condo",
        size=1800,
        bedrooms=3,
        bathrooms=2,
        rent_amount=3800,
        status="maintenance",
        manager_id="1",
        amenities=["Ocean View", "Balcony", "Pool", "Concierge", "Gym"],
        images=["/properties/condo-1.jpg", "/properties/condo-2.jpg"],
        description="Luxury condo with stunning ocean views and resort-style amenities.",
        created_at="2024-02-01T10:00:00Z",
    ),
    Property(
        id="5",
        name="Garden Apartments - Unit 2C",
        address="654 Garden Lane, Pasadena, CA 91101",
        type="apartment",
        size=950,
        bedrooms=1,
        bathrooms=1,
        rent_amount=1800,
        status="vacant",
        manager_id="1",
        amenities=["Garden", "Parking", "Laundry", "Pet-Friendly"],
        images=["/properties/garden-apt-1.jpg", "/properties/garden-apt-2.jpg"],
        description="Cozy apartment surrounded by beautiful gardens.",
        created_at="2024-02-05T10:00:00Z",
    ),
]


# ============================================================
# SERVICE REQUESTS / WORK ORDERS
# ============================================================
MOCK_SERVICE_REQUESTS = [
    ServiceRequest(
        id="1",
        title="Kitchen Faucet Leak",
        description="The kitchen faucet has been dripping constantly for the past week. It seems to be getting worse.",
        category="Plumbing",
        priority="high",
        status="assigned",
        property_id="1",
        tenant_id="2",
        assigned_provider_id="3",
        images=["/service-requests/faucet-leak.jpg"],
        estimated_cost=150,
        created_at="2024-10-20T14:30:00Z",
        updated_at="2024-10-21T09:15:00Z",
        notes=[
            "Tenant reports leak started after recent cold weather",
            "Provider scheduled for inspection tomorrow",
        ],
    ),
    ServiceRequest(
        id="2",
        title="Air Conditioning Not Working",
        description="The AC unit in the living room stopped working yesterday. No cold air coming out.",
        category="HVAC",
        priority="emergency",
        status="pending",
        property_id="1",
        tenant_id="2",
        images=["/service-requests/ac-unit.jpg"],
        created_at="2024-10-22T16:45:00Z",
        updated_at="2024-10-22T16:45:00Z",
        notes=["Urgent due to current heat wave"],
    ),
    ServiceRequest(
        id="3",
        title="Bathroom Tile Repair",
        description="Several tiles in the master bathroom are loose and need to be re-secured.",
        category="General Maintenance",
        priority="medium",
        status="completed",
        property_id="3",
        tenant_id="4",
        assigned_provider_id="5",
        estimated_cost=200,
        actual_cost=185,
        created_at="2024-10-15T11:20:00Z",
        updated_at="2024-10-18T15:30:00Z",
        completed_at="2024-10-18T15:30:00Z",
        notes=["Work completed successfully", "Tenant satisfied with repair quality"],
    ),
    ServiceRequest(
        id="4",
        title="Electrical Outlet Not Working",
        description="The outlet in the bedroom stopped working. Tried resetting the breaker but no luck.",
        category="Electrical",
        priority="medium",
        status="in_progress",
        property_id="1",
        tenant_id="2",
        assigned_provider_id="6",
        estimated_cost=120,
        created_at="2024-10-19T09:15:00Z",
        updated_at="2024-10-21T14:20:00Z",
        notes=["Electrician identified faulty wiring", "Parts ordered, work to continue tomorrow"],
    ),
]


# ============================================================
# DOCUMENTS
# ============================================================
MOCK_DOCUMENTS = [
    Document(
        id="1",
        name="Lease Agreement - Mike Chen",
        type="lease",
        url="/documents/lease-mike-chen.pdf",
        size=245760,
        uploaded_by="1",
        property_id="1",
        tenant_id="2",
        created_at="2024-02-01T10:00:00Z",
        tags=["lease", "contract", "active"],
    ),
    Document(
        id="2",
        name="Property Insurance - Sunset Apartments",
        type="insurance",
        url="/documents/insurance-sunset-apartments.pdf",
        size=156780,
        uploaded_by="1",
        property_id="1",
        created_at="2024-01-15T10:00:00Z",
        tags=["insurance", "policy", "active"],
    ),
    Document(
        id="3",
        name="Inspection Report - Unit 3B",
        type="inspection",
        url="/documents/inspection-unit-3b.pdf",
        size=89340,
        uploaded_by="1",
        property_id="1",
        created_at="2024-09-15T10:00:00Z",
        tags=["inspection", "maintenance", "report"],
    ),
    Document(
        id="4",
        name="Plumbing Repair Invoice",
        type="invoice",
        url="/documents/plumbing-invoice-001.pdf",
        size=67890,
        uploaded_by="3",
        service_request_id="1",
        created_at="2024-10-21T16:30:00Z",
        tags=["invoice", "plumbing", "repair"],
    ),
    Document(
        id="5",
        name="Lease Agreement - Lisa Rodriguez",
        type="lease",
        url="/documents/lease-lisa-rodriguez.pdf",
        size=231424,
        uploaded_by="1",
        property_id="3",
        tenant_id="4",
        created_at="2024-03-01T10:00:00Z",
        tags=["lease", "contract", "active"],
    ),
]


# ============================================================
# FINANCIALS
# ============================================================
MOCK_FINANCIAL_RECORDS = [
    FinancialRecord(
        id="1",
        type="income",
        category="Rent",
        amount=2500,
        description="Monthly rent - Unit 3B",
        property_id="1",
        date="2024-10-01",
        created_at="2024-10-01T10:00:00Z",
    ),
    FinancialRecord(
        id="2",
        type="expense",
        category="Maintenance",
        amount=150,
        description="Plumbing repair - Kitchen faucet",
        property_id="1",
        date="2024-10-21",
        created_at="2024-10-21T16:30:00Z",
    ),
    FinancialRecord(
        id="3",
        type="income",
        category="Rent",
        amount=5500,
        description="Monthly rent - Maple Street House",
        property_id="3",
        date="2024-10-01",
        created_at="2024-10-01T10:00:00Z",
    ),
    FinancialRecord(
        id="4",
        type="expense",
        category="Utilities",
        amount=180,
        description="Electricity bill - Common areas",
        property_id="1",
        date="2024-10-15",
        created_at="2024-10-15T10:00:00Z",
    ),
]

MOCK_PROPERTY_FINANCIALS = [
    PropertyFinancials(
        property_id="1",
        monthly_income=2500,
        monthly_expenses=430,
        net_income=2070,
        occupancy_rate=100,
        year_to_date_income=25000,
        year_to_date_expenses=4300,
    ),
    PropertyFinancials(
        property_id="2",
        monthly_income=0,
        monthly_expenses=200,
        net_income=-200,
        occupancy_rate=0,
        year_to_date_income=36000,
        year_to_date_expenses=2400,
    ),
    PropertyFinancials(
        property_id="3",
        monthly_income=5500,
        monthly_expenses=650,
        net_income=4850,
        occupancy_rate=100,
        year_to_date_income=55000,
        year_to_date_expenses=6500,
    ),
]

MOCK_ANALYTICS = AnalyticsData(
    total_properties=5,
    total_tenants=3,
    total_service_requests=4,
    monthly_revenue=8000,
    occupancy_rate=60,
    average_rent=3200,
    maintenance_costs=780,
    property_performance=MOCK_PROPERTY_FINANCIALS,
    service_request_trends=[
        ServiceRequestTrend(month="Jul", count=8, avg_resolution_time=2.5),
        ServiceRequestTrend(month="Aug", count=12, avg_resolution_time=3.1),
        ServiceRequestTrend(month="Sep", count=6, avg_resolution_time=1.8),
        ServiceRequestTrend(month="Oct", count=4, avg_resolution_time=2.2),
    ],
)


# ============================================================
# MESSAGES / NOTIFICATIONS
# ============================================================
MOCK_MESSAGES = [
    Message(
        id="1",
        sender_id="2",
        receiver_id="1",
        subject="Noise Complaint",
        content=(
            "Hi Sarah, I wanted to report excessive noise from the upstairs unit during "
            "late hours. Could you please address this with the tenant?"
        ),
        is_read=False,
        created_at="2024-10-22T20:15:00Z",
    ),
    Message(
        id="2",
        sender_id="1",
        receiver_id="2",
        subject="Re: Noise Complaint",
        content=(
            "Hi Mike, Thank you for bringing this to my attention. I will speak with the "
            "upstairs tenant and ensure this issue is resolved promptly."
        ),
        is_read=True,
        created_at="2024-10-23T09:30:00Z",
    ),
    Message(
        id="3",
        sender_id="3",
        receiver_id="1",
        subject="Service Request Update",
        content=(
            "The kitchen faucet repair has been completed. Please find the invoice attached. "
            "The tenant was very satisfied with our work."
        ),
        is_read=False,
        created_at="2024-10-21T16:45:00Z",
        attachments=["/documents/plumbing-invoice-001.pdf"],
    ),
]

MOCK_NOTIFICATIONS = [
    Notification(
        id="1",
        user_id="1",
        type="service_request",
        title="New Service Request",
        message="Mike Chen submitted a new service request for AC repair",
        is_read=False,
        action_url="/dashboard/service-requests/2",
        created_at="2024-10-22T16:45:00Z",
    ),
    Notification(
        id="2",
        user_id="2",
        type="maintenance",
        title="Service Request Assigned",
        message="Your kitchen faucet repair has been assigned to ABC Plumbing Services",
        is_read=True,
        action_url="/dashboard/service-requests/1",
        created_at="2024-10-21T09:15:00Z",
    ),
    Notification(
        id="3",
        user_id="3",
        type="service_request",
        title="New Work Order",
        message="You have been assigned a new plumbing repair job at Sunset Apartments",
        is_read=False,
        action_url="/dashboard/work-orders/1",
        created_at="2024-10-21T09:15:00Z",
    ),
]


# ============================================================
# LOGIN SCREEN QUICK ACCOUNTS
# ============================================================
DEMO_ACCOUNTS = [
    DemoAccount(
        email="sarah@propertymanagement.com",
        role="property_manager",
        label="Property Manager",
        description="Manage properties, tenants, and service requests",
    ),
    DemoAccount(
        email="mike.chen@email.com",
        role="tenant",
        label="Tenant",
        description="Submit requests and manage your residence",
    ),
    DemoAccount(
        email="contact@abcplumbing.com",
        role="service_provider",
        label="Service Provider",
        description="Manage work orders and track earnings",
    ),
]
