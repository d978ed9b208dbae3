"""Shared builders for person records used across the test modules."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the contacts package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from contacts.core import config as core_config  # noqa: E402
from contacts.domain import (  # noqa: E402
    Email,
    Gender,
    GithubUsername,
    Location,
    ModuleCode,
    Name,
    OfficeHour,
    Phone,
    Professor,
    Rating,
    Specialisation,
    Student,
    TeachingAssistant,
    tag_set,
)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Every test starts from default settings, whatever the shell exports."""
    for var in ("CONTACTS_IDENTITY_POLICY", "CONTACTS_DATA_FILE", "DATABASE_URL"):
        monkeypatch.delenv(var, raising=False)
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def student():
    return Student(
        Name("Alex Yeoh"),
        Phone("87438807"),
        Email("alexyeoh@example.com"),
        Gender("M"),
        Location("Chess club room"),
        tag_set("friends", "chess"),
    )


@pytest.fixture()
def professor():
    return Professor(
        Name("Wong Tin Lok"),
        Phone("91031282"),
        Email("wongtk@example.com"),
        Gender("M"),
        Location("COM2 LT4"),
        tag_set("family"),
        module_code=ModuleCode("CS1231S"),
        rating=Rating("5"),
    )


@pytest.fixture()
def full_professor():
    return Professor(
        Name("Aaron Tan"),
        Phone("65161234"),
        Email("aaron.tan@comp.nus.edu.sg"),
        Gender("M"),
        Location("COM1 0203"),
        tag_set("mentor"),
        module_code=ModuleCode("CS1101S"),
        rating=Rating("4"),
        specialisation=Specialisation("Discrete Mathematics"),
        office_hour=OfficeHour("MON 14:00-16:00"),
        username=GithubUsername("aarontan-nus"),
    )


@pytest.fixture()
def teaching_assistant():
    return TeachingAssistant(
        Name("Irfan Ibrahim"),
        Phone("92492021"),
        Email("irfan@example.com"),
        Gender("M"),
        Location("COM2-0210"),
        tag_set("testing"),
        module_code=ModuleCode("CS2100"),
        rating=Rating("4"),
        username=GithubUsername("irfan-i"),
    )
