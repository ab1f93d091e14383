"""Uniform JSON responses.

Every failure is rendered as `{"status": "Error", "error": "<message>"}`.
"""

from typing import Any, Dict, Iterable, List

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

STATUS_ERROR = "Error"

_REQUIRED_INPUTS = (None, "")
_LOC_SOURCES = ("body", "path", "query")


def write_json(status_code: int, data: Any) -> JSONResponse:
    """Serialize `data` with the given status and `application/json`."""
    return JSONResponse(status_code=status_code, content=jsonable_encoder(data))


def common_error(err: Any) -> Dict[str, str]:
    """Wrap a single error's message verbatim."""
    message = getattr(err, "message", None) or str(err)
    return {"status": STATUS_ERROR, "error": message}


def _field_name(error: Dict[str, Any]) -> str:
    loc = [str(part) for part in error.get("loc", ()) if part not in _LOC_SOURCES]
    if not loc:
        return "Body"
    return loc[0].capitalize()


def _is_required_violation(error: Dict[str, Any]) -> bool:
    if error.get("type") == "missing":
        return True
    value = error.get("input")
    return isinstance(value, (str, type(None))) and value in _REQUIRED_INPUTS


def validation_messages(errors: Iterable[Dict[str, Any]]) -> List[str]:
    messages = []
    for error in errors:
        field = _field_name(error)
        if _is_required_violation(error):
            messages.append(f"{field} is required")
        else:
            messages.append(f"{field}: {error.get('msg', 'invalid value')}")
    return messages


def validation_error(errors: Iterable[Dict[str, Any]]) -> Dict[str, str]:
    """Join one message per violated field with ", "."""
    return {"status": STATUS_ERROR, "error": ", ".join(validation_messages(errors))}
