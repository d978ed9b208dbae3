"""Sample contacts used to populate an empty contact book."""
from __future__ import annotations

from .persons import Person, Professor, Student, TeachingAssistant, tag_set
from .values import Email, Gender, Location, ModuleCode, Name, Phone, Rating


def get_sample_persons() -> list[Person]:
    return [
        Student(Name("Alex Yeoh"), Phone("87438807"), Email("alexyeoh@example.com"), Gender("M"),
                Location("Chess club room"), tag_set("friends")),
        Student(Name("Bernice Yu"), Phone("99272758"), Email("berniceyu@example.com"), Gender("M"),
                Location("UTown"), tag_set("colleagues", "friends")),
        Student(Name("Charlotte Oliveiro"), Phone("93210283"), Email("charlotte@example.com"), Gender("F"),
                Location("NUS"), tag_set("neighbours")),
        Professor(Name("Wong Tin Lok"), Phone("91031282"), Email("wongtk@example.com"), Gender("M"),
                  Location("COM2 LT4"), tag_set("family"),
                  module_code=ModuleCode("CS1231S"), rating=Rating("5")),
        TeachingAssistant(Name("Irfan Ibrahim"), Phone("92492021"), Email("irfan@example.com"), Gender("M"),
                          Location("COM2-0210"), tag_set("testing"),
                          module_code=ModuleCode("CS2100"), rating=Rating("4")),
        Student(Name("Roy Balakrishnan"), Phone("92624417"), Email("royb@example.com"), Gender("M"),
                Location("Research Lab"), tag_set("colleagues")),
    ]
