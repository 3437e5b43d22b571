"""
Binding of submitted HTML forms to pydantic models.

A failed binding does not raise: the caller gets back a best-effort,
unvalidated instance (so the form can be re-rendered with what the
operator typed) together with a ``{field: message}`` map of errors.
"""

from typing import Any, Dict, Iterable, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError
from starlette.datastructures import FormData, UploadFile

from . import messages

ModelT = TypeVar("ModelT", bound=BaseModel)

_REQUIRED_TYPES = {"missing", "string_too_short"}
_NUMBER_TYPES = {"int_parsing", "float_parsing", "int_from_float"}


def form_data(
    form: FormData,
    exclude: Iterable[str] = (),
    blank_as_none: Iterable[str] = (),
) -> Dict[str, Any]:
    """Flatten ``form`` into a dict of its text fields.

    File parts and the fields named in ``exclude`` are left out.  Fields
    named in ``blank_as_none`` become ``None`` when submitted empty, so
    optional selects and numbers can be left blank.
    """
    skipped = set(exclude)
    nullable = set(blank_as_none)
    data: Dict[str, Any] = {}
    for key, value in form.multi_items():
        if key in skipped or isinstance(value, UploadFile):
            continue
        data[key] = value
    for key in nullable:
        if data.get(key, "") == "":
            data[key] = None
    return data


def _error_message(error: Dict[str, Any]) -> str:
    if error["type"] in _REQUIRED_TYPES:
        return messages.REQUIRED
    if error["type"] in _NUMBER_TYPES:
        return messages.NUMBER_REQUIRED
    if error["type"] == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    return error["msg"]


def bind_form(model: Type[ModelT], data: Dict[str, Any]) -> Tuple[ModelT, Dict[str, str]]:
    """Validate ``data`` into ``model``; return the instance and field errors."""
    try:
        return model.model_validate(data), {}
    except ValidationError as exc:
        errors: Dict[str, str] = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "__root__"
            errors.setdefault(field, _error_message(error))
        known = {key: value for key, value in data.items() if key in model.model_fields}
        return model.model_construct(**known), errors
