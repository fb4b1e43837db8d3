import json
import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import quote

import httpx  # type: ignore

from zoomkit.sources.client.http.http_request import HTTPRequest
from zoomkit.sources.client.http.http_response import HTTPResponse
from zoomkit.sources.client.iclient import IClient

PATH_PARAM_PATTERN = re.compile(r"\{(.*?)\}")
# Only these verbs may carry a payload; GET and DELETE never do
BODY_METHODS = frozenset({"PATCH", "POST", "PUT"})


def _to_bool_str(v: Any) -> str:
    if isinstance(v, bool):
        return "true" if v else "false"
    return str(v)


def _serialize_value(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, (list, tuple, set)):
        return ",".join(_to_bool_str(x) for x in v)
    return _to_bool_str(v)


def substitute_path_params(template: str, params: Mapping[str, Any]) -> Tuple[str, List[str]]:
    """Fill `{name}` placeholders with percent-encoded values.

    Every placeholder is visited even after one is found missing, so the
    returned error list names all missing parameters, each once. Missing
    placeholders are replaced with an empty string.
    """
    errors: List[str] = []

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        value = params.get(name)
        if value is None:
            error = f"Required path parameter was not specified: {name}"
            if error not in errors:
                errors.append(error)
            return ""
        return quote(_serialize_value(value), safe="")

    return PATH_PARAM_PATTERN.sub(_replace, template), errors


def encode_query_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Serialize query values to strings, dropping None and empty values."""
    encoded: Dict[str, str] = {}
    for key, value in (params or {}).items():
        serialized = _serialize_value(value)
        if serialized == "":
            continue
        encoded[str(key)] = serialized
    return encoded


def encode_body(body: Any) -> Optional[bytes]:
    """Encode a request body; an empty mapping or string counts as no body."""
    if body is None:
        return None
    if isinstance(body, Mapping):
        if not body:
            return None
        return json.dumps(body).encode("utf-8")
    if isinstance(body, str):
        return body.encode("utf-8") or None
    if isinstance(body, bytes):
        return body or None
    raise TypeError(f"Unsupported request body type: {type(body).__name__}")


class HTTPClient(IClient):
    """
    HTTP client with authentication.

    Features:
    - Authorization header injection, recomputed for every request
    - Path template substitution with pre-flight validation
    - Transport failures captured into the returned HTTPResponse

    No retries are performed; a failed request is reported once.

    Args:
        token: Authentication token
        token_type: Token type for Authorization header (default: "Bearer")
        base_url: URL prefixed to every relative request path
        timeout: Request timeout in seconds (default: 30.0)
        follow_redirects: Whether to follow HTTP redirects (default: True)
        transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        logger: Optional logger instance
    """
    def __init__(
        self,
        token: str = "",
        token_type: str = "Bearer",
        base_url: str = "",
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ) -> None:
        self.token = token
        self.token_type = token_type
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.client: Optional[httpx.AsyncClient] = None

    def get_client(self) -> "HTTPClient":
        """Get the client"""
        return self

    def get_base_url(self) -> str:
        return self.base_url

    def get_auth_headers(self) -> Dict[str, str]:
        """Headers that authenticate a single request"""
        return {"Authorization": f"{self.token_type} {self.token}"}

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure client is created and available."""
        if self.client is None:
            self.client = httpx.AsyncClient(
                transport=self.transport,
                timeout=self.timeout,
                follow_redirects=self.follow_redirects
            )
        return self.client

    def build_url(self, path: str, query_params: Optional[Mapping[str, Any]] = None) -> str:
        """Join base URL, an already substituted path, and non-empty query params"""
        url = path if path.startswith(("http://", "https://")) else f"{self.base_url}{path}"
        query = encode_query_params(query_params)
        if query:
            url = str(httpx.URL(url, params=query))
        return url

    async def execute(self, request: HTTPRequest, **kwargs) -> HTTPResponse:
        """Execute an HTTP request
        Args:
            request: The HTTP request to execute
            kwargs: Additional keyword arguments to pass to the request
        Returns:
            A HTTPResponse describing what happened. Missing path parameters
            yield a response carrying `errors` without any network call.
        """
        path, errors = substitute_path_params(request.url, request.path_params)
        if errors:
            self.logger.warning(
                "Rejected %s %s before sending: %s", request.method, request.url, "; ".join(errors)
            )
            return HTTPResponse(errors=tuple(errors))

        method = request.method
        url = self.build_url(path, request.query_params)
        content = encode_body(request.body)

        # Request headers take precedence over client headers
        merged_headers = {**self.headers, **self.get_auth_headers(), **request.headers}
        request_kwargs = {
            "headers": merged_headers,
            **kwargs
        }
        if method in BODY_METHODS and content:
            request_kwargs["content"] = content

        client = await self._ensure_client()
        self.logger.debug("%s %s", method, url)
        outgoing = client.build_request(method, url, **request_kwargs)
        try:
            response = await client.send(outgoing, stream=True)
        except httpx.RequestError as exc:
            self.logger.error("Request error for %s %s: %r", method, url, exc)
            return HTTPResponse(transport_error=str(exc) or type(exc).__name__)

        try:
            await response.aread()
        except httpx.DecodingError as exc:
            self.logger.warning("Undecodable body for %s %s: %r", method, url, exc)
            return HTTPResponse(status=response.status_code)
        except httpx.RequestError as exc:
            self.logger.error("Request error for %s %s: %r", method, url, exc)
            return HTTPResponse(transport_error=str(exc) or type(exc).__name__)
        finally:
            await response.aclose()

        self.logger.debug("%s %s -> %s", method, url, response.status_code)
        return HTTPResponse.from_httpx(response)

    async def close(self) -> None:
        """Close the client"""
        if self.client:
            await self.client.aclose()
            self.client = None

    async def __aenter__(self) -> "HTTPClient":
        """Async context manager entry"""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit"""
        await self.close()
