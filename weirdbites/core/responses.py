from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def api_success(data: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(data))


def api_error(message: str, status_code: int = 500, details: Optional[Any] = None, **extra: Any) -> JSONResponse:
    """Error body: {"error": message} plus "details" and any extra keys when given."""
    content = {"error": message}
    if details:
        content["details"] = jsonable_encoder(details)
    content.update(jsonable_encoder(extra))
    return JSONResponse(status_code=status_code, content=content)
