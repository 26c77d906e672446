"""Pytest fixtures for the supply request builder, clients and API."""

import os
import sys

import pytest

# Ensure project root is on sys.path so `src` imports resolve
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from src.wizard.steps import contact_step, demand_step, summary_step  # noqa: E402


@pytest.fixture
def contact_data():
    return {
        "name": "Szpital Miejski",
        "city": "Warszawa",
        "street": "Lipowa",
        "building": "12",
        "apartment": "3",
        "postalCode": "00-950",
        "email": "zaopatrzenie@szpital.example",
        "phone": "+48221234567",
    }


@pytest.fixture
def contact(contact_data):
    return contact_step(contact_data)


@pytest.fixture
def empty_demand():
    return demand_step({"supplies": {}})


@pytest.fixture
def empty_summary():
    return summary_step({})


@pytest.fixture
def make_steps(contact, empty_demand, empty_summary):
    """Complete StepDict; pass supplies/comment to override the defaults."""

    def _make(supplies=None, comment=None):
        return {
            "contact": contact,
            "demand": demand_step({"supplies": supplies}) if supplies is not None else empty_demand,
            "summary": summary_step({"comment": comment}) if comment is not None else empty_summary,
        }

    return _make
