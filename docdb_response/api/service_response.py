"""
Service response module.

DocumentServiceResponse is the already-received transport response a
ResourceResponse is built from: status code, headers and the raw body.
"""

import json
import logging
from typing import Any, Mapping, Optional, Type, TypeVar, Union

import httpx

from ..exceptions import ResourceDeserializationError
from ..models.resource import ResourceLike

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=ResourceLike)

# Encoding of header values supplied as str
HEADER_ENCODING = "utf-8"


class DocumentServiceResponse:
    """
    A completed response from the document service.

    Headers are held case-insensitively; str values may hold any Unicode
    text and are kept as UTF-8. The body can be consumed until
    the response is closed.
    """

    def __init__(
        self,
        status_code: int,
        headers: Optional[Union[Mapping[str, str], httpx.Headers]] = None,
        body: Union[bytes, str, None] = None,
    ):
        self.status_code = int(status_code)
        if isinstance(headers, httpx.Headers):
            self.headers = httpx.Headers(headers, encoding=headers.encoding)
        else:
            self.headers = httpx.Headers(headers or {}, encoding=HEADER_ENCODING)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self._body: Optional[bytes] = body or b""
        self.closed = False

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "DocumentServiceResponse":
        """Adapt an httpx response whose body has already been read."""
        return cls(status_code=response.status_code, headers=response.headers, body=response.content)

    def get_resource(self, cls: Type[R]) -> Optional[R]:
        """
        Deserialize the body into ``cls``.

        Returns:
            The resource, or None when the body is empty

        Raises:
            ResourceDeserializationError: If the body is not a JSON object
                or the response was already closed
        """
        if self.closed:
            raise ResourceDeserializationError("Response body already released", self.status_code)
        if not self._body or not self._body.strip():
            return None

        try:
            data: Any = json.loads(self._body)
        except (ValueError, UnicodeDecodeError) as e:
            raise ResourceDeserializationError(
                f"Invalid JSON in response body: {e}", self.status_code
            ) from e

        if not isinstance(data, dict):
            raise ResourceDeserializationError(
                f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}", self.status_code
            )
        factory = getattr(cls, "from_dict", cls)
        return factory(data)

    def close(self) -> None:
        """Release the body."""
        self._body = None
        self.closed = True
        logger.debug(f"Released body of {self.status_code} response")
