import inspect
from typing import Annotated, Any, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field
from pydantic.fields import FieldInfo

from ..exceptions import ToolValidationError
from ..logger import get_logger

logger = get_logger(__name__)


class FieldTuple(BaseModel):
    """An (annotation, FieldInfo) pair as accepted by pydantic's create_model."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    annotation: Any
    field: FieldInfo


class ToolParameterFactory:
    """Turns one tool method parameter into a pydantic field definition."""

    @classmethod
    def build_field_tuple(cls, param_name: str, param: inspect.Parameter, tool_name: str) -> FieldTuple:
        """Build the field for a single parameter, carrying its description and default.

        Raises:
            ToolValidationError: If the parameter has no `Field(description=...)` annotation.
        """
        annotation = param.annotation
        description = cls._extract_description(annotation, param_name, tool_name)
        default = param.default if param.default is not inspect.Parameter.empty else ...
        return FieldTuple(annotation=annotation, field=Field(default=default, description=description))

    @staticmethod
    def _extract_description(annotation: Any, param_name: str, tool_name: str) -> str:
        # Agents pick arguments from these descriptions, so every parameter needs one
        if get_origin(annotation) is Annotated:
            for metadata in get_args(annotation)[1:]:
                if isinstance(metadata, FieldInfo) and metadata.description:
                    return metadata.description

        msg = (
            f"Parameter '{param_name}' in tool '{tool_name}' is missing a description.\n"
            f"Usage: {param_name}: Annotated[Type, Field(description='...')] = None"
        )
        logger.error(msg)
        raise ToolValidationError(msg)
