"""Base models shared by every container in the package."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    A base model that serializes field names in camel case.

    The field `previous_hash` is exported as `previousHash`, which keeps the
    JSON rendering of blocks and validators consistent with other chain tooling.
    Python code can still populate models by their snake_case names.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
    )

    def to_json(self) -> dict[str, Any]:
        """Dump the model as a JSON-compatible dict with camel case keys."""
        return self.model_dump(mode="json", by_alias=True)


class StrictBaseModel(CamelModel):
    """A strict, immutable model. Changes go through `copy`."""

    model_config = CamelModel.model_config | {
        "extra": "forbid",
        "frozen": True,
        "strict": True,
    }

    def copy(self: Self, **kwargs: Any) -> Self:
        """Create a validated copy of the model with some fields replaced."""
        return self.__class__(**(self.model_dump() | kwargs))


class MutableModel(CamelModel):
    """A strict model whose fields may be reassigned, with validation on assignment."""

    model_config = CamelModel.model_config | {
        "extra": "forbid",
        "strict": True,
        "validate_assignment": True,
    }
