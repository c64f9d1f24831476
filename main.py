"""Entry point: build a person, change it, and print what happened."""

import logging
import sys
from typing import Optional, TextIO

from models.person import Person
from core.formatting import GREETING, describe

logger = logging.getLogger(__name__)


def run(out: Optional[TextIO] = None) -> None:
    """Write the demo lines to ``out``, or the current ``sys.stdout``."""
    out = out if out is not None else sys.stdout
    person = Person("John", 42)
    logger.debug(f"Created {person!r}")
    print(describe(person), file=out)

    person.set_name("Jane")
    person.set_age(43)
    logger.debug(f"Updated to {person!r}")
    print(describe(person), file=out)

    print(GREETING, file=out)


def main() -> int:
    run()
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    raise SystemExit(main())
