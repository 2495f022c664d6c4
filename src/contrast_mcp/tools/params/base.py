"""Base model shared by all tool parameter objects."""

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict

from ..validation import ValidationContext


class ToolParams(BaseModel):
    """
    Immutable, already-validated tool parameters.

    Subclasses add their typed fields and expose a classmethod `of(...)` that parses raw
    arguments with a fresh ValidationContext and hands the outcome to `_from_context`.

    Attributes:
        errors: Validation errors; non-empty means the tool must not run.
        warnings: Non-fatal notices (applied defaults, ignored filters).
    """

    model_config = ConfigDict(frozen=True)

    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def _from_context(cls, ctx: ValidationContext, **fields: Any) -> Any:
        return cls(errors=tuple(ctx.errors()), warnings=tuple(ctx.warnings()), **fields)
