import dataclasses

import pytest

from optionals.option import Option


EMAIL_NOT_AVAILABLE = "EMAIL_NOT_AVAILABLE"


@dataclasses.dataclass(frozen=True)
class Person:
    name: str
    _email: str | None = None

    @property
    def email(self) -> Option[str]:
        # callers decide what a missing email means, not us
        return Option.of_nullable(self._email)


@pytest.mark.parametrize(
    "person, expected",
    [
        (Person("james"), EMAIL_NOT_AVAILABLE),
        (Person("jakson", "JAKSON@OUTLOOK.COM"), "jakson@outlook.com"),
    ],
)
def test_person_email_lowercased(person: Person, expected: str):
    assert person.email.map(str.lower).or_else(EMAIL_NOT_AVAILABLE) == expected


def test_person_email_checked_then_got():
    person = Person("John Cena", "cena@wwe.com")
    assert person.email.is_present()
    assert person.email.get() == "cena@wwe.com"


def test_person_email_missing():
    person = Person("John Cena")
    assert person.email.is_empty()

    seen = []
    person.email.if_present_or_else(seen.append, lambda: seen.append(EMAIL_NOT_AVAILABLE))
    assert seen == [EMAIL_NOT_AVAILABLE]
