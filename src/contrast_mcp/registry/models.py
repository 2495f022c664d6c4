from typing import Any, Callable, Dict, Type

from pydantic import BaseModel, ConfigDict


class ToolDefinition(BaseModel):
    """
    A tool ready to be exposed over MCP.

    Attributes:
        name: Unique tool name, as seen by the agent.
        description: What the tool does; taken from the implementing method's docstring.
        func: The bound method implementing the tool.
        input_schema: JSON schema of the tool's arguments, with refs resolved.
        args_model: Pydantic model generated from the method signature; validates incoming calls.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    description: str
    func: Callable[..., Any]
    input_schema: Dict[str, Any]
    args_model: Type[BaseModel]
