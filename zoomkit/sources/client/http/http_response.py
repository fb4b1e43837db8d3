from dataclasses import dataclass
from typing import Any, Optional, Tuple

import httpx  # type: ignore


@dataclass(frozen=True)
class HTTPResponse:
    """Raw outcome of executing an HTTPRequest.

    Exactly one of three shapes:
    - rejected before sending: `errors` is non-empty and `status` is 0
    - transport failure: `transport_error` is set and `status` is 0
    - received: `status` is the HTTP status code and `body` the parsed JSON
      (None when the response was empty or not valid JSON)
    """
    status: int = 0
    body: Any = None
    errors: Tuple[str, ...] = ()
    transport_error: Optional[str] = None
    text: str = ""

    @property
    def rejected(self) -> bool:
        return bool(self.errors)

    @property
    def sent(self) -> bool:
        return not self.errors and self.transport_error is None

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "HTTPResponse":
        body = None
        if response.content:
            try:
                body = response.json()
            except ValueError:
                body = None
        return cls(status=response.status_code, body=body, text=response.text)
