from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import NonNegativeInt


class FrozenModel(BaseModel):
    """Base class for immutable pydantic models that prevent attribute mutation after construction."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=False,
    )


class JournalModel(FrozenModel):
    """Base class for everything decoded from the game's JSON output.

    Unlike FrozenModel, unknown keys are dropped rather than rejected: the game adds
    fields with every update, and a field the model does not declare is not needed
    by anything downstream. Wire names are declared per field with an explicit alias,
    and populate_by_name lets code and tests construct values with the Python names.

    Validation is strict: "7" is not an int and 1 is not a bool. Decode from JSON
    text (model_validate_json) so that timestamps and enums are still read from
    their JSON strings.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        strict=True,
        arbitrary_types_allowed=False,
    )


class LineLocation(FrozenModel):
    """Where a decoded (or undecodable) line came from."""

    path: Path | None = Field(default=None, description="File the line was read from, if any")
    line_number: NonNegativeInt | None = Field(default=None, description="1-based line number within the file")

    def __str__(self) -> str:
        source = str(self.path) if self.path is not None else "<string>"
        if self.line_number is None:
            return source
        return f"{source}:{self.line_number}"
