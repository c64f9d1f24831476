"""Console line formats shared by the entry point and the API."""

from models.person import Person

AGE_LINE_FORMAT = "{name} is {age} years old !"
GREETING = "Hello World !!"


def describe(person: Person) -> str:
    """Render the ``<name> is <age> years old !`` line for a person."""
    return AGE_LINE_FORMAT.format(name=person.get_name(), age=person.get_age())
