# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Field validation of remote projections against pydantic payload schemas."""
import typing
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError


@dataclass
class ValidationResult:
    errors: Dict[str, List[str]] = field(default_factory=dict)
    # converted values, the body that goes to Mailchimp
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def fails(self) -> bool:
        return bool(self.errors)


def _model_type(annotation: Any) -> Optional[Type[BaseModel]]:
    for candidate in (annotation,) + typing.get_args(annotation):
        if isinstance(candidate, type) and issubclass(candidate, BaseModel):
            return candidate
    return None


def _model_at(schema: Type[BaseModel], loc: Tuple[Any, ...]) -> Optional[Type[BaseModel]]:
    """Resolve the nested model declared at ``loc``, if the path ends on one."""
    model = schema
    for part in loc:
        info = model.model_fields.get(part) if isinstance(part, str) else None
        if info is None:
            return None
        model = _model_type(info.annotation)
        if model is None:
            return None
    return model


def _required_message(key: str) -> str:
    return f"The {key} field is required."


def validate(view: Dict[str, Any], schema: Type[BaseModel]) -> ValidationResult:
    """Validate ``view`` and collect messages per dotted field path.

    A missing nested object also reports each of its required subfields,
    so clients learn the full shape from a single response. On success
    ``data`` holds the converted values ("yes" -> True, "52.3" -> 52.3).
    """
    try:
        model = schema.model_validate(view)
    except PydanticValidationError as exc:
        result = ValidationResult()
        for error in exc.errors():
            loc = tuple(error["loc"])
            key = ".".join(str(part) for part in loc)
            if error["type"] != "missing":
                result.errors.setdefault(key, []).append(error["msg"])
                continue
            result.errors.setdefault(key, []).append(_required_message(key))
            nested = _model_at(schema, loc)
            if nested is None:
                continue
            for name, info in nested.model_fields.items():
                if info.is_required():
                    sub_key = f"{key}.{name}"
                    result.errors.setdefault(sub_key, []).append(_required_message(sub_key))
        return result
    return ValidationResult(data=model.model_dump(mode="json", exclude_none=True))
