"""
Pydantic Models

Field descriptors and validation outcomes exchanged with callers.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class FieldDescriptor(BaseModel):
    """A single field: where its value lives, its type and its rule string."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    key: str = Field(..., min_length=1, description="Unique field key")
    type: str = Field(..., description="Base validator type, e.g. string or number")
    label: str = Field("", description="Display name used in messages")
    validation: Optional[str] = Field(None, description="Rule string, e.g. required||max:255")

    @property
    def display_name(self) -> str:
        return self.label or self.key


class ValidationOutcome(BaseModel):
    """The first rule a value violated."""
    model_config = ConfigDict(frozen=True)

    message: str
    kind: str
    key: str
    label: str
