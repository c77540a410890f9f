# =============================================================================
# Request / Response Channel
# =============================================================================
# The raw request/response pair a registered function is invoked with.
# The surrounding HTTP layer is responsible for parsing the body; the
# registry only reads and writes through these objects.
# =============================================================================

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def _normalize_headers(headers: Optional[Dict[str, Any]]) -> Dict[str, str]:
    return {str(k).lower(): str(v) for k, v in (headers or {}).items()}


@dataclass
class Request:
    """
    Incoming request as handed over by the HTTP layer.

    Attributes:
        body: Already parsed body (dict/list for JSON, str/bytes otherwise)
        headers: Request headers, looked up case-insensitively
        method: HTTP method
        path: Request path
        query: Query string parameters
    """
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
    method: str = "POST"
    path: str = "/"
    query: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.headers = _normalize_headers(self.headers)

    def get_header(self, name: str, default: Any = None) -> Any:
        return self.headers.get(name.lower(), default)

    @property
    def content_type(self) -> str:
        """Content-Type header without parameters."""
        value = self.get_header("content-type", "")
        return value.split(";")[0].strip().lower()


@dataclass
class Response:
    """
    Outgoing response written by a registered function.

    Attributes:
        status_code: HTTP status code (200 until set)
        headers: Response headers, keys stored lowercase
        body: Body passed to end()
        finished: True once end() has been called
    """
    status_code: int = 200
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None
    finished: bool = False

    def __post_init__(self):
        self.headers = _normalize_headers(self.headers)

    def status(self, code: int) -> "Response":
        """Set the status code. Returns self so calls can be chained."""
        self.status_code = int(code)
        return self

    def set_header(self, name: str, value: Any) -> "Response":
        self.headers[name.lower()] = str(value)
        return self

    def get_header(self, name: str, default: Any = None) -> Any:
        return self.headers.get(name.lower(), default)

    def end(self, body: Any = None) -> None:
        """Terminate the response, optionally writing a final body."""
        if self.finished:
            logger.warning("Response.end() called on a finished response, ignoring")
            return
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        self.body = body
        self.finished = True

    def to_api_gateway(self) -> Dict[str, Any]:
        """Format as an API Gateway proxy result."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body or "",
        }

    def json(self) -> Any:
        """Parse the body as JSON."""
        return json.loads(self.body)
