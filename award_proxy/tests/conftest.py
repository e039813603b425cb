"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from award_proxy.config import Config


@pytest.fixture
def config():
    """Default settings, independent of any local .env file."""
    return Config(_env_file=None)


@pytest.fixture
def today():
    """Fixed reference date for the current-year fallback."""
    return date(2025, 3, 14)


@pytest.fixture
def sample_spending_by_award_response():
    """Sample USAspending spending_by_award response."""
    return {
        "limit": 50,
        "results": [
            {
                "internal_id": 123456789,
                "Award ID": "75N93023C00012",
                "Recipient Name": "ACME CORP",
                "Award Amount": 4250000.0,
                "Action Date": "2023-02-17",
                "Description": "IT MODERNIZATION SUPPORT SERVICES",
                "Award Type": "DEFINITIVE CONTRACT",
                "Period of Performance Start Date": "2023-03-01",
                "Period of Performance End Date": "2025-02-28",
                "NAICS": {"code": "541512", "description": "COMPUTER SYSTEMS DESIGN SERVICES"},
                "PSC": {"code": "DA01", "description": "IT AND TELECOM - BUSINESS APPLICATION"},
                "generated_internal_id": "CONT_AWD_75N93023C00012_7529_-NONE-_-NONE-",
            },
            {
                "internal_id": 987654321,
                "Award ID": "7200AA23C00045",
                "Recipient Name": "ACME CORP",
                "Award Amount": 1100000.0,
                "Action Date": "2023-06-02",
                "Description": "PROGRAM MANAGEMENT CONSULTING",
                "Award Type": "DEFINITIVE CONTRACT",
                "Period of Performance Start Date": "2023-07-01",
                "Period of Performance End Date": "2024-06-30",
                "NAICS": {"code": "541611", "description": "ADMINISTRATIVE MANAGEMENT CONSULTING"},
                "PSC": {"code": "R408", "description": "SUPPORT- PROFESSIONAL: PROGRAM MANAGEMENT/SUPPORT"},
                "generated_internal_id": "CONT_AWD_7200AA23C00045_7200_-NONE-_-NONE-",
            },
        ],
        "page_metadata": {"page": 1, "hasNext": False},
        "messages": [],
    }
