from pydantic import BaseModel, ConfigDict


class LightModel(BaseModel):
    """Base for response DTOs: immutable, and equal when their fields are equal."""

    model_config = ConfigDict(frozen=True)
