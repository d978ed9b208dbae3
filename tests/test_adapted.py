from __future__ import annotations

import dataclasses

import pytest

from contacts.domain import ModuleCode, Phone, Professor, Rating, Tag
from contacts.storage.adapted import (
    EMPTY_OFFICE_HOUR,
    EMPTY_RATING,
    EMPTY_SPECIALISATION,
    EMPTY_USERNAME,
    JsonAdaptedProfessor,
    JsonAdaptedStudent,
    JsonAdaptedTag,
    JsonAdaptedTeachingAssistant,
    adapt_person,
)
from contacts.storage.errors import InvalidFormatError, MissingFieldError


def _professor_dict(**overrides):
    data = {
        "type": "professor",
        "name": "Wong Tin Lok",
        "moduleCode": "CS1231S",
        "phone": "91031282",
        "email": "wongtk@example.com",
        "gender": "M",
        "location": "COM2 LT4",
        "rating": "5",
        "specialisation": EMPTY_SPECIALISATION,
        "officeHour": EMPTY_OFFICE_HOUR,
        "username": EMPTY_USERNAME,
        "tagged": ["family"],
    }
    data.update(overrides)
    return data


def test_student_round_trip(student):
    data = JsonAdaptedStudent.from_model(student).to_dict()
    assert data["type"] == "student"
    assert sorted(data["tagged"]) == ["chess", "friends"]
    assert "moduleCode" not in data and "rating" not in data
    assert JsonAdaptedStudent.from_dict(data).to_model() == student


def test_professor_round_trip_with_every_optional(full_professor):
    data = adapt_person(full_professor).to_dict()
    assert data["specialisation"] == "Discrete Mathematics"
    assert data["officeHour"] == "MON 14:00-16:00"
    assert JsonAdaptedProfessor.from_dict(data).to_model() == full_professor


def test_teaching_assistant_round_trip(teaching_assistant):
    data = adapt_person(teaching_assistant).to_dict()
    assert data["type"] == "teachingAssistant"
    assert set(data) == {"type", "name", "moduleCode", "phone", "email", "gender", "location", "rating", "username", "tagged"}
    assert JsonAdaptedTeachingAssistant.from_dict(data).to_model() == teaching_assistant


def test_professor_example_writes_sentinels_and_reloads_absent(professor):
    data = adapt_person(professor).to_dict()
    assert data == _professor_dict()

    reloaded = JsonAdaptedProfessor.from_dict(data).to_model()
    assert isinstance(reloaded, Professor)
    assert reloaded.specialisation.present is False
    assert reloaded.office_hour.present is False
    assert reloaded.rating.present is True
    assert reloaded == professor


def test_sentinel_survives_repeated_round_trips(teaching_assistant):
    no_rating = dataclasses.replace(teaching_assistant, rating=Rating.absent())
    once = JsonAdaptedTeachingAssistant.from_dict(adapt_person(no_rating).to_dict()).to_model()
    twice = JsonAdaptedTeachingAssistant.from_dict(adapt_person(once).to_dict()).to_model()
    assert adapt_person(twice).to_dict()["rating"] == EMPTY_RATING
    assert twice.rating.present is False


def test_missing_mandatory_field_reports_type_name():
    data = _professor_dict()
    del data["name"]
    with pytest.raises(MissingFieldError) as excinfo:
        JsonAdaptedProfessor.from_dict(data).to_model()
    assert excinfo.value.field_name == "name"
    assert excinfo.value.message == "Name's field is missing!"


def test_missing_module_code():
    with pytest.raises(MissingFieldError) as excinfo:
        JsonAdaptedProfessor.from_dict(_professor_dict(moduleCode=None)).to_model()
    assert excinfo.value.message == "ModuleCode's field is missing!"


def test_invalid_module_code_carries_its_own_message():
    with pytest.raises(InvalidFormatError) as excinfo:
        JsonAdaptedProfessor.from_dict(_professor_dict(moduleCode="cs1231")).to_model()
    assert excinfo.value.field_name == "moduleCode"
    assert excinfo.value.message == ModuleCode.MESSAGE_CONSTRAINTS


def test_first_invalid_field_wins():
    data = _professor_dict(phone="phone?", email="not-an-email", rating="9")
    with pytest.raises(InvalidFormatError) as excinfo:
        JsonAdaptedProfessor.from_dict(data).to_model()
    assert excinfo.value.field_name == "phone"
    assert excinfo.value.message == Phone.MESSAGE_CONSTRAINTS


def test_validation_order_for_teaching_assistant():
    data = {
        "type": "teachingAssistant",
        "name": "Irfan Ibrahim",
        "moduleCode": "CS2100",
        "phone": "92492021",
        "email": "irfan@example.com",
        "gender": "M",
        "location": " ",
        "rating": "7",
        "username": "-bad",
        "tagged": [],
    }
    fixes = [("location", "COM2-0210"), ("rating", "4"), ("username", "irfan-i")]
    for field_name, good_value in fixes:
        with pytest.raises(InvalidFormatError) as excinfo:
            JsonAdaptedTeachingAssistant.from_dict(data).to_model()
        assert excinfo.value.field_name == field_name
        data[field_name] = good_value
    assert JsonAdaptedTeachingAssistant.from_dict(data).to_model().username.value == "irfan-i"


def test_optional_field_missing_is_not_absent():
    data = _professor_dict()
    del data["officeHour"]
    with pytest.raises(MissingFieldError) as excinfo:
        JsonAdaptedProfessor.from_dict(data).to_model()
    assert excinfo.value.field_name == "officeHour"


@pytest.mark.parametrize("blank", ["", " "])
def test_blank_optional_is_invalid_not_absent(blank):
    with pytest.raises(InvalidFormatError) as excinfo:
        JsonAdaptedProfessor.from_dict(_professor_dict(specialisation=blank)).to_model()
    assert excinfo.value.field_name == "specialisation"


def test_invalid_tag_is_rejected():
    with pytest.raises(InvalidFormatError) as excinfo:
        JsonAdaptedProfessor.from_dict(_professor_dict(tagged=["best friend"])).to_model()
    assert excinfo.value.field_name == "tagged"
    assert excinfo.value.message == Tag.MESSAGE_CONSTRAINTS


def test_tags_must_be_a_list():
    with pytest.raises(InvalidFormatError):
        JsonAdaptedStudent.from_dict({"type": "student", "tagged": "friends"})


def test_duplicate_tags_collapse_on_load():
    person = JsonAdaptedProfessor.from_dict(_professor_dict(tagged=["family", "family"])).to_model()
    assert person.tags == frozenset({Tag("family")})


def test_tag_adapter_is_identity_copy():
    adapted = JsonAdaptedTag.from_model(Tag("friends"))
    assert adapted.to_json() == "friends"
    assert adapted.to_model() == Tag("friends")
    with pytest.raises(InvalidFormatError):
        JsonAdaptedTag("").to_model()


def test_adapt_person_rejects_unknown_model():
    with pytest.raises(TypeError):
        adapt_person(object())
