import json
import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, Union

import httpx  # type: ignore
from jose import jwt  # type: ignore

from zoomkit.config.settings import DEFAULT_TIMEOUT, ZOOM_BASE_URL, ZoomSettings
from zoomkit.exceptions.zoom_exceptions import ZoomAPIError, ZoomConfigurationError
from zoomkit.sources.client.http.http_client import HTTPClient
from zoomkit.sources.client.http.http_request import HTTPRequest
from zoomkit.sources.client.http.http_response import HTTPResponse
from zoomkit.sources.client.iclient import IClient
from zoomkit.utils.logger import create_logger

# Zoom rejects JWTs older than this
TOKEN_TTL_SECONDS = 60

EMPTY_BODY_SUCCESS = {"status": 204, "message": "Action successful."}


# ======================================================================
# CREDENTIALS AND TOKEN SIGNING
# ======================================================================

@dataclass(frozen=True)
class ZoomCredentials:
    api_key: str
    api_secret: str = field(repr=False)


def generate_jwt(credentials: ZoomCredentials, now: float) -> str:
    """
    Sign a short-lived HS256 token for the Zoom API.

    Args:
        credentials: API key (issuer) and secret (HMAC key)
        now: Current UNIX time in seconds

    Returns:
        str: `header.claims.signature`, each part base64url-encoded without padding
    """
    claims = {
        "iss": credentials.api_key,
        "exp": int(now) + TOKEN_TTL_SECONDS,
    }
    return jwt.encode(
        claims,
        credentials.api_secret,
        algorithm="HS256",
        headers={"typ": "JWT"},
    )


def build_auth_header(credentials: ZoomCredentials, now: float) -> Dict[str, str]:
    return {"Authorization": f"Bearer {generate_jwt(credentials, now)}"}


# ======================================================================
# RESPONSE NORMALIZATION
# ======================================================================

@dataclass(frozen=True)
class ResponsePolicy:
    """Which statuses count as success, and what an empty success body becomes.

    Statuses in `empty_body_statuses` that arrive without a body produce a
    copy of `empty_body_value`; any other empty success yields `data=None`.
    """
    success_statuses: FrozenSet[int]
    empty_body_statuses: FrozenSet[int] = frozenset()
    empty_body_value: Optional[Mapping[str, Any]] = None


# Zoom answers updates and deletes with 204 (or 202) and no JSON
BROAD_POLICY = ResponsePolicy(
    success_statuses=frozenset({200, 201, 202, 204}),
    empty_body_statuses=frozenset({202, 204}),
    empty_body_value=EMPTY_BODY_SUCCESS,
)

STRICT_POLICY = ResponsePolicy(success_statuses=frozenset({200}))


@dataclass
class ZoomResponse:
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    message: Optional[str] = None
    status_code: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def raise_for_error(self) -> Any:
        """Return `data` on success, raise ZoomAPIError otherwise."""
        if not self.success:
            raise ZoomAPIError(self.error or "", status_code=self.status_code)
        return self.data

    @classmethod
    def from_outcome(cls, outcome: HTTPResponse, policy: ResponsePolicy) -> "ZoomResponse":
        """Interpret a raw outcome under the given status policy."""
        if outcome.errors:
            return cls(success=False, error="Errors: " + "\n".join(outcome.errors))

        if outcome.transport_error is not None:
            return cls(success=False, error=f"Transport error: {outcome.transport_error}")

        status = outcome.status
        if status in policy.success_statuses:
            # {} and [] count as empty only where the policy substitutes empty bodies
            empty = outcome.body is None or (not outcome.body and status in policy.empty_body_statuses)
            if not empty:
                return cls(success=True, data=outcome.body, status_code=status)
            if status in policy.empty_body_statuses and policy.empty_body_value is not None:
                data = dict(policy.empty_body_value)
                return cls(success=True, data=data, message=data.get("message"), status_code=status)
            return cls(success=True, status_code=status)

        vendor_message = ""
        if isinstance(outcome.body, dict):
            vendor_message = outcome.body.get("message") or ""
        return cls(
            success=False,
            data=outcome.body,
            error=f"{vendor_message} (Status Code {status})",
            message=vendor_message or None,
            status_code=status,
        )


# ======================================================================
# JWT CLIENT
# ======================================================================

class ZoomRESTClientViaJWT(HTTPClient):
    """
    Zoom REST client signing every request with a fresh JWT.
    Tokens expire after 60 seconds, so none is ever reused.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        base_url: str = ZOOM_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.time,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(
            token_type="Bearer",
            base_url=base_url,
            timeout=timeout,
            follow_redirects=False,
            transport=transport,
            logger=logger,
        )
        self.credentials = ZoomCredentials(api_key, api_secret)
        self._clock = clock

    def get_auth_headers(self) -> Dict[str, str]:
        return build_auth_header(self.credentials, self._clock())


# ======================================================================
# CONFIG CLASSES
# ======================================================================

@dataclass
class ZoomJWTConfig:
    api_key: str
    api_secret: str = field(repr=False)
    base_url: str = ZOOM_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    transport: Optional[httpx.AsyncBaseTransport] = None

    def create_client(self, logger: Optional[logging.Logger] = None) -> ZoomRESTClientViaJWT:
        return ZoomRESTClientViaJWT(
            self.api_key,
            self.api_secret,
            self.base_url,
            self.timeout,
            transport=self.transport,
            logger=logger,
        )


# ======================================================================
# TOP-LEVEL CLIENT WRAPPER
# ======================================================================

class ZoomClient(IClient):
    def __init__(self, client: ZoomRESTClientViaJWT) -> None:
        self.client = client

    def get_client(self) -> ZoomRESTClientViaJWT:
        return self.client

    @classmethod
    def build_with_config(cls, config: ZoomJWTConfig, logger: Optional[logging.Logger] = None) -> "ZoomClient":
        return cls(config.create_client(logger))

    @classmethod
    def build_from_env(
        cls,
        settings: Optional[ZoomSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "ZoomClient":
        settings = settings or ZoomSettings.from_env()
        if not settings.has_credentials:
            raise ZoomConfigurationError("ZOOM_KEY and ZOOM_SECRET must be set")
        config = ZoomJWTConfig(
            api_key=settings.api_key,
            api_secret=settings.api_secret,
            base_url=settings.base_url,
            timeout=settings.timeout,
            transport=transport,
        )
        return cls.build_with_config(config, logger or create_logger("zoomkit", settings.log_level))

    async def return_response(
        self,
        method: str,
        path: str,
        query_params: Optional[Dict[str, Any]] = None,
        path_params: Optional[Dict[str, Any]] = None,
        body: Union[Dict[str, Any], str, None] = None,
        policy: ResponsePolicy = STRICT_POLICY,
    ) -> ZoomResponse:
        """Send one request and normalize its outcome.

        Args:
            method: HTTP verb
            path: Path template relative to the base URL, e.g. `/meetings/{meetingId}`
            query_params: Query string values; None and "" are dropped
            path_params: Values for the path placeholders
            body: JSON mapping or pre-encoded string
            policy: Status policy used to interpret the response

        Returns:
            ZoomResponse
        """
        request = HTTPRequest(
            method=method,
            url=path,
            path_params=path_params or {},
            query_params=query_params or {},
            body=body,
        )
        outcome = await self.client.execute(request)
        return ZoomResponse.from_outcome(outcome, policy)

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> "ZoomClient":
        await self.client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
