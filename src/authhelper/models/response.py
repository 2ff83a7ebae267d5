import json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class ResponseResult(str, Enum):
    """Outcome of a request as seen by the caller."""

    OK = "OK"
    ERROR = "ERROR"


class ContentType(str, Enum):
    """Body encodings supported by body requests."""

    JSON = "json"
    FORM = "form"

    @property
    def header_value(self) -> str:
        if self is ContentType.JSON:
            return "application/json"
        return "application/x-www-form-urlencoded"


class GenericResponse(BaseModel):
    """Uniform result of every request made through the helper.

    ``status`` is ``OK`` only when the server answered with a 2xx status.
    ``code`` holds the HTTP status, or 0 when no response was received or the
    request was never sent. ``message`` is a human-readable summary: a success
    notice, the server's error body, or the transport error description.
    """

    status: ResponseResult
    code: int = 0
    message: str = ""
    data: Optional[bytes] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ResponseResult.OK

    def json_data(self) -> Any:
        """Decode the response payload as JSON.

        Raises:
            ValueError: If there is no payload or it is not valid JSON.
        """
        if not self.data:
            raise ValueError("Response has no data")
        return json.loads(self.data)

    @classmethod
    def error(
        cls, message: str, code: int = 0, error_message: Optional[str] = None
    ) -> "GenericResponse":
        return cls(
            status=ResponseResult.ERROR,
            code=code,
            message=message,
            error_message=error_message,
        )
