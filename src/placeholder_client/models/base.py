"""Base class for immutable record shapes."""

from pydantic import BaseModel


class Record(BaseModel):
    """
    Immutable, strictly typed value object with a fixed field set.

    Wire keys are declared as field aliases; direct construction uses the
    Python attribute names. Strict mode means ``Record(id="1")`` is rejected
    rather than coerced.
    """

    model_config = {
        "frozen": True,
        "strict": True,
        "populate_by_name": True,
        "extra": "forbid",
    }
