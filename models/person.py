"""Person model for the demo application."""

from dataclasses import dataclass
from typing import Dict, Any

from core.exceptions import ModelError


@dataclass
class Person:
    """Represents a named individual with an age."""

    name: str
    age: int

    def get_name(self) -> str:
        return self.name

    def set_name(self, name: str) -> None:
        self.name = name

    def get_age(self) -> int:
        return self.age

    def set_age(self, age: int) -> None:
        self.age = age

    def to_dict(self) -> Dict[str, Any]:
        """Convert person to dictionary representation."""
        return {
            'name': self.name,
            'age': self.age
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Person':
        """
        Create Person instance from dictionary.

        Raises:
            ModelError: If ``name`` or ``age`` is missing
        """
        try:
            return cls(
                name=data['name'],
                age=data['age']
            )
        except KeyError as e:
            raise ModelError(f"Missing person field: {e.args[0]}") from e

    def __repr__(self) -> str:
        return f"Person(name={self.name!r}, age={self.age!r})"
