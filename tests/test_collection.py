from __future__ import annotations

import dataclasses

import pytest

from contacts.core import config as core_config
from contacts.domain import Phone, Professor, Student, TeachingAssistant
from contacts.storage.collection import JsonSerializableContactBook
from contacts.storage.errors import (
    DuplicateIdentityError,
    InvalidFormatError,
    MissingFieldError,
    UnknownTypeError,
)


def test_dispatches_each_variant_in_order(student, professor, teaching_assistant):
    data = JsonSerializableContactBook.from_model([professor, student, teaching_assistant]).to_dict()
    assert [record["type"] for record in data["persons"]] == ["professor", "student", "teachingAssistant"]

    persons = JsonSerializableContactBook.from_dict(data).to_model()
    assert [type(p) for p in persons] == [Professor, Student, TeachingAssistant]
    assert persons == [professor, student, teaching_assistant]


def test_unknown_type_is_rejected(student):
    record = JsonSerializableContactBook.from_model([student]).persons[0]
    record["type"] = "alien"
    with pytest.raises(UnknownTypeError) as excinfo:
        JsonSerializableContactBook([record]).to_model()
    assert excinfo.value.discriminator == "alien"


def test_missing_type_is_unknown(student):
    record = JsonSerializableContactBook.from_model([student]).persons[0]
    del record["type"]
    with pytest.raises(UnknownTypeError) as excinfo:
        JsonSerializableContactBook([record]).to_model()
    assert excinfo.value.discriminator is None


def test_stops_at_first_invalid_record(student, professor):
    records = JsonSerializableContactBook.from_model([student, professor]).persons
    del records[0]["email"]
    records[1]["type"] = "alien"
    with pytest.raises(MissingFieldError) as excinfo:
        JsonSerializableContactBook(records).to_model()
    assert excinfo.value.field_name == "email"


def test_full_policy_only_rejects_identical_records(student):
    other_phone = dataclasses.replace(student, phone=Phone("99999999"))
    book = JsonSerializableContactBook.from_model([student, other_phone])
    assert len(book.to_model("full")) == 2

    twice = JsonSerializableContactBook.from_model([student, student])
    with pytest.raises(DuplicateIdentityError) as excinfo:
        twice.to_model("full")
    assert excinfo.value.identity_key == "Alex Yeoh"
    assert excinfo.value.message == "Persons list contains duplicate person(s)."


def test_name_policy_rejects_same_name(student):
    other_phone = dataclasses.replace(student, phone=Phone("99999999"))
    book = JsonSerializableContactBook.from_model([student, other_phone])
    with pytest.raises(DuplicateIdentityError):
        book.to_model("name")


def test_policy_defaults_to_settings(student, monkeypatch):
    other_phone = dataclasses.replace(student, phone=Phone("99999999"))
    book = JsonSerializableContactBook.from_model([student, other_phone])
    assert len(book.to_model()) == 2

    monkeypatch.setenv("CONTACTS_IDENTITY_POLICY", "name")
    core_config.get_settings.cache_clear()
    with pytest.raises(DuplicateIdentityError):
        book.to_model()


def test_unknown_policy_is_a_programming_error(student):
    with pytest.raises(ValueError):
        JsonSerializableContactBook.from_model([student]).to_model("email")


@pytest.mark.parametrize("data", [[], {"persons": "nope"}, {"persons": ["nope"]}])
def test_malformed_container(data):
    with pytest.raises(InvalidFormatError):
        JsonSerializableContactBook.from_dict(data).to_model()


def test_empty_book():
    assert JsonSerializableContactBook.from_dict({}).to_model() == []
    assert JsonSerializableContactBook.from_model([]).to_dict() == {"persons": []}
