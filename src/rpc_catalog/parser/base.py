"""Unified data models for extracted RPC methods.

The method record builder converts each method block of the reference
page into these models for aggregation and output.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Closed set of method groupings. MISC is the catch-all."""

    PROGRAM = "Program"
    TOKEN = "Token"
    ACCOUNTS = "Accounts"
    TRANSACTION = "Transaction"
    BLOCK = "Block"
    EPOCH = "Epoch"
    FEE = "Fee"
    INFLATION = "Inflation"
    SLOT = "Slot"
    STAKE = "Stake"
    MISC = "Miscellaneous"


class FieldSpec(BaseModel):
    """A named field of an object-typed parameter."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    required: bool


class ParamSpec(BaseModel):
    """A single positional RPC parameter."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(min_length=1)
    required: bool
    fields: tuple[FieldSpec, ...] = ()  # only populated when type == "object"


class SampleBody(BaseModel):
    """Request sample body. A params key absent from the sample stays unset."""

    model_config = ConfigDict(frozen=True)

    params: Any = None


class MethodRecord(BaseModel):
    """A single RPC method with all its extracted metadata."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    description: str | None = None
    category: Category
    deprecated: bool
    params: tuple[ParamSpec, ...]
    sample_body: SampleBody = Field(alias="sampleBody")
    sample_response: Any = Field(default=None, alias="sampleResponse")

    def to_json_dict(self) -> dict:
        """Serialize with output key names, dropping absent optional keys."""
        data: dict[str, Any] = {"name": self.name}
        if self.description is not None:
            data["description"] = self.description
        data["category"] = self.category.value
        data["deprecated"] = self.deprecated
        data["params"] = [p.model_dump(mode="json") for p in self.params]
        body: dict[str, Any] = {}
        if "params" in self.sample_body.model_fields_set:
            body["params"] = self.sample_body.params
        data["sampleBody"] = body
        if self.sample_response is not None:
            data["sampleResponse"] = self.sample_response
        return data
