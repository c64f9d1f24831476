"""FastAPI application exposing a single in-process person."""

import logging
from typing import Optional

from fastapi import FastAPI
from pydantic import BaseModel, StrictInt

from models.person import Person
from core.formatting import GREETING, describe

logger = logging.getLogger(__name__)

INITIAL_NAME = "John"
INITIAL_AGE = 42

app = FastAPI(title="Person Demo API", version="1.0.0")

person = Person(INITIAL_NAME, INITIAL_AGE)


class PersonUpdate(BaseModel):
    """Fields to change on the person; omitted fields are left alone."""

    name: Optional[str] = None
    age: Optional[StrictInt] = None


def person_state() -> dict:
    state = person.to_dict()
    state["description"] = describe(person)
    return state


@app.get("/")
async def root():
    """Root endpoint returning API information."""
    return {
        "message": "Person Demo API",
        "version": "1.0.0",
        "endpoints": {
            "person": "/person",
            "reset": "/person/reset",
            "greeting": "/greeting"
        }
    }


@app.get("/person")
async def get_person():
    return person_state()


@app.patch("/person")
async def update_person(update: PersonUpdate):
    """Apply a name and/or age change, name first."""
    if update.name is not None:
        person.set_name(update.name)
    if update.age is not None:
        person.set_age(update.age)
    logger.info(f"Person updated: {person!r}")
    return person_state()


@app.post("/person/reset")
async def reset_person():
    person.set_name(INITIAL_NAME)
    person.set_age(INITIAL_AGE)
    logger.info("Person reset")
    return person_state()


@app.get("/greeting")
async def greeting():
    return {"message": GREETING}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "api:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
