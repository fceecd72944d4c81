"""Shared fixtures for the letter studio tests."""

from datetime import datetime, timezone

import pytest

from letter_studio.models import UserDetails


@pytest.fixture
def jane():
    """Minimal valid details record."""
    return UserDetails(
        full_name="Jane Doe",
        email="jane@x.com",
        phone="555-1234",
        job_title="Engineer",
        company_name="Acme",
        skills=["Go", "Rust"],
    )


@pytest.fixture
def full_details():
    """Details record with every optional field filled in."""
    return UserDetails(
        full_name="Sam Rivera",
        email="sam.rivera@example.com",
        phone="+1 415 555 0199",
        job_title="Data Engineer",
        company_name="Northwind",
        skills=["Python", "SQL", "Airflow", "Spark"],
        achievements=["Cut pipeline runtime by 40%", "Led migration to dbt"],
        experience="Four years building batch and streaming pipelines.",
        education="B.Sc. Computer Science",
        linkedin="https://www.linkedin.com/in/samrivera",
        portfolio="https://samrivera.dev",
        custom_signature="",
        salutation="",
        recipient_name="Alex Morgan",
        recipient_title="Head of Data",
        company_address="1 Harbor Way, Seattle, WA",
    )


@pytest.fixture
def fixed_clock():
    """Clock pinned to midday UTC on 5 March 2025."""
    moment = datetime(2025, 3, 5, 12, 0, tzinfo=timezone.utc)
    return lambda: moment


@pytest.fixture(autouse=True)
def outputs_in_tmp(tmp_path, monkeypatch):
    """Keep exported files out of the working tree."""
    monkeypatch.setenv("OUTPUTS_DIR", str(tmp_path / "outputs"))
