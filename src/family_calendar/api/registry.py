from __future__ import annotations

import inspect
import types
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Type, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, ValidationError, create_model

from ..core import EventStore
from ..errors import ToolArgumentError

JsonSchema = Dict[str, Any]


def _json_type(annotation: Any) -> str:
    origin = get_origin(annotation)
    if origin is None:
        mapping = {
            str: "string",
            int: "integer",
            float: "number",
            bool: "boolean",
            dict: "object",
            list: "array",
        }
        return mapping.get(annotation, "string")
    if origin in (list, List):
        return "array"
    if origin in (dict, Dict):
        return "object"
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return _json_type(args[0]) if args else "string"
    return "string"


def _arguments_model(name: str, signature: inspect.Signature) -> Type[BaseModel]:
    fields: Dict[str, Any] = {}
    for param in list(signature.parameters.values())[1:]:
        default = ... if param.default is inspect.Parameter.empty else param.default
        fields[param.name] = (param.annotation, default)
    return create_model(f"{name}Arguments", __config__=ConfigDict(extra="forbid"), **fields)


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'arguments'}: {error['msg']}" for error in exc.errors()
    )


@dataclass(frozen=True)
class ApiFunction:
    """Declaration of a tool the model may request.

    The wrapped function receives the :class:`EventStore` as its first
    positional argument; every following parameter is part of the tool's
    argument schema.
    """

    name: str
    func: Callable[..., Any]
    description: str
    category: str
    tags: tuple[str, ...]
    signature: inspect.Signature
    arguments_model: Type[BaseModel]
    parameter_descriptions: Mapping[str, str] = field(default_factory=dict)

    @property
    def arguments(self) -> List[inspect.Parameter]:
        return list(self.signature.parameters.values())[1:]

    @property
    def required(self) -> List[str]:
        return [param.name for param in self.arguments if param.default is inspect.Parameter.empty]

    @property
    def parameter_schema(self) -> JsonSchema:
        schema: JsonSchema = {"type": "object", "properties": {}, "required": self.required}
        for param in self.arguments:
            prop: JsonSchema = {"type": _json_type(param.annotation)}
            if param.name in self.parameter_descriptions:
                prop["description"] = self.parameter_descriptions[param.name]
            schema["properties"][param.name] = prop
        if not schema["required"]:
            schema.pop("required")
        return schema

    def as_tool(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameter_schema,
            },
        }

    def invoke(self, store: EventStore, arguments: Mapping[str, Any]) -> Any:
        try:
            validated = self.arguments_model.model_validate(dict(arguments))
        except ValidationError as exc:
            raise ToolArgumentError(f"Invalid arguments for {self.name}: {_describe(exc)}") from exc
        values = {param.name: getattr(validated, param.name) for param in self.arguments}
        return self.func(store, **values)


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    category: str = "calendar",
    tags: Optional[Iterable[str]] = None,
    parameters: Optional[Mapping[str, str]] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"API function '{name}' is already registered.")
        signature = inspect.signature(func, eval_str=True)
        REGISTRY[name] = ApiFunction(
            name=name,
            func=func,
            description=description,
            category=category,
            tags=tuple(tags or ()),
            signature=signature,
            arguments_model=_arguments_model(name, signature),
            parameter_descriptions=dict(parameters or {}),
        )
        return func

    return decorator


def get_api_functions() -> List[ApiFunction]:
    return list(REGISTRY.values())


def get_api_function(name: str) -> Optional[ApiFunction]:
    return REGISTRY.get(name)


def call_api(name: str, store: EventStore, **kwargs: Any) -> Any:
    if name not in REGISTRY:
        raise KeyError(f"API function '{name}' is not registered.")
    return REGISTRY[name].invoke(store, kwargs)
