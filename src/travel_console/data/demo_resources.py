"""Seed records for DemoResourceService, keyed by resource key."""

DEMO_APPROVALS: list[dict] = [
    {
        "id": "ap-1",
        "request_id": "req-501",
        "request_code": "FIN-0042",
        "request_type": "Financial",
        "status": "Pending",
        "required_role": "Financial",
        "step_name": "Finance review",
        "step_level": 1,
        "creator_name": "Sara Hamid",
        "request_notes": "Advance payment for Istanbul group tour hotel block.",
        "created_at": "2026-10-18T08:10:00Z",
    },
    {
        "id": "ap-2",
        "request_id": "req-502",
        "request_code": "CLI-0107",
        "request_type": "Clients",
        "status": "Pending",
        "required_role": "Contracts",
        "step_name": "Contract check",
        "step_level": 2,
        "creator_name": "Omar Khalil",
        "request_notes": "New corporate client onboarding.",
        "created_at": "2026-10-17T13:22:00Z",
    },
    {
        "id": "ap-3",
        "request_id": "req-503",
        "request_code": "TSK-0310",
        "request_type": "Tasks",
        "status": "Approved",
        "required_role": "General",
        "step_name": "Manager sign-off",
        "step_level": 3,
        "creator_name": "Lina Aziz",
        "request_notes": "Airport transfer vendor change.",
        "created_at": "2026-10-12T09:45:00Z",
    },
    {
        "id": "ap-4",
        "request_id": "req-504",
        "request_code": "EMP-0021",
        "request_type": "Employment",
        "status": "Rejected",
        "required_role": "General",
        "step_name": "HR review",
        "step_level": 1,
        "creator_name": "Yusuf Ali",
        "request_notes": "Seasonal ticketing agent hire.",
        "created_at": "2026-10-10T15:00:00Z",
    },
    {
        "id": "ap-5",
        "request_id": "req-505",
        "request_code": "PRJ-0009",
        "request_type": "Projects",
        "status": "Pending",
        "required_role": "General",
        "step_name": "Director approval",
        "step_level": 2,
        "creator_name": "Sara Hamid",
        "request_notes": "Umrah package 2027 launch.",
        "created_at": "2026-10-09T10:30:00Z",
    },
]

DEMO_CONTRACTS: list[dict] = [
    {
        "id": "cc-17",
        "contract_number": "CC-2025-017",
        "client_name": "Babylon Oil Services",
        "start_date": "2025-11-01",
        "end_date": "2026-11-01",
        "value": 185000.0,
        "currency": "USD",
        "status": "Active",
    },
    {
        "id": "cc-18",
        "contract_number": "CC-2025-018",
        "client_name": "Erbil Medical Group",
        "start_date": "2026-01-15",
        "end_date": "2027-01-15",
        "value": 64000.0,
        "currency": "USD",
        "status": "Active",
    },
    {
        "id": "cc-19",
        "contract_number": "CC-2026-003",
        "client_name": "Tigris University",
        "start_date": "2026-03-01",
        "end_date": "2026-09-01",
        "value": 22500.0,
        "currency": "USD",
        "status": "Expired",
    },
    {
        "id": "cc-20",
        "contract_number": "CC-2026-011",
        "client_name": "Al Noor Telecom",
        "start_date": "2026-08-20",
        "end_date": "2027-08-20",
        "value": 310000000.0,
        "currency": "IQD",
        "status": "Draft",
    },
]

DEMO_BANK_BALANCES: list[dict] = [
    {
        "id": "bb-1",
        "bank_name": "Rafidain Bank",
        "account_number": "IQ12-0001-7781",
        "currency": "USD",
        "balance": 482310.55,
        "updated_at": "2026-10-16T11:30:00Z",
    },
    {
        "id": "bb-2",
        "bank_name": "Trade Bank of Iraq",
        "account_number": "IQ40-0045-1022",
        "currency": "IQD",
        "balance": 913450000.0,
        "updated_at": "2026-10-15T08:00:00Z",
    },
    {
        "id": "bb-3",
        "bank_name": "Kurdistan International Bank",
        "account_number": "IQ77-0301-5590",
        "currency": "USD",
        "balance": 75120.0,
        "updated_at": "2026-10-14T17:45:00Z",
    },
]

DEMO_DOCUMENTS: list[dict] = [
    {
        "id": "doc-1",
        "title": "IATA accreditation certificate",
        "document_type": "License",
        "owner": "Head office",
        "expiry_date": "2027-02-28",
        "created_at": "2026-02-28T09:00:00Z",
    },
    {
        "id": "doc-2",
        "title": "Passport scan - BK-88213",
        "document_type": "Passport",
        "owner": "Customer service",
        "expiry_date": "2031-05-10",
        "created_at": "2026-10-15T09:00:00Z",
    },
    {
        "id": "doc-3",
        "title": "Hotel allotment agreement - Antalya",
        "document_type": "Contract",
        "owner": "Contracts",
        "expiry_date": "2026-12-31",
        "created_at": "2026-04-01T12:00:00Z",
    },
]

DEMO_BUDGETS: list[dict] = [
    {
        "id": "bg-1",
        "department": "Marketing",
        "fiscal_year": 2026,
        "allocated": 120000.0,
        "spent": 96000.0,
        "currency": "USD",
    },
    {
        "id": "bg-2",
        "department": "Operations",
        "fiscal_year": 2026,
        "allocated": 340000.0,
        "spent": 158500.0,
        "currency": "USD",
    },
    {
        "id": "bg-3",
        "department": "IT",
        "fiscal_year": 2026,
        "allocated": 80000.0,
        "spent": 81250.0,
        "currency": "USD",
    },
]

DEMO_RESOURCES: dict[str, list[dict]] = {
    "approvals": DEMO_APPROVALS,
    "contracts": DEMO_CONTRACTS,
    "bank-balances": DEMO_BANK_BALANCES,
    "documents": DEMO_DOCUMENTS,
    "budgets": DEMO_BUDGETS,
}
