import json
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator  # type: ignore

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


class HTTPRequest(BaseModel):
    """HTTP request
    Args:
        url: Path template relative to the client's base URL (or an absolute URL).
            May contain `{name}` placeholders filled from path_params.
        method: The HTTP method to use
        headers: Extra headers to send with the request
        body: A mapping serialized as JSON, a pre-encoded string/bytes, or None
        path_params: Values substituted into the url placeholders
        query_params: The query parameters to use; None and empty values are dropped
    """
    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(alias="uri")
    method: str = Field(default="GET")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Union[Dict[str, Any], str, bytes, None] = None
    path_params: Dict[str, Any] = Field(default_factory=dict, alias="path")
    query_params: Dict[str, Any] = Field(default_factory=dict, alias="query")

    @field_validator("method")
    @classmethod
    def validate_method(cls, v: str) -> str:
        method = v.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {v}")
        return method

    def to_json(self) -> str:
        """
        Convert request to a JSON string.
        Bytes are decoded as UTF-8.
        """
        data = self.model_dump()

        if isinstance(self.body, bytes):
            data["body"] = self.body.decode("utf-8", errors="replace")

        return json.dumps(data, indent=2, default=str)
