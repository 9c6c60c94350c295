"""HTTP request handling: incoming requests and outgoing ones to replay."""

from __future__ import annotations

import logging
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import BinaryIO, Mapping, Optional
from urllib.parse import unquote

logger = logging.getLogger(__name__)

USER_AGENT = "ROK4 server"
TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class RawDataStream:
    """A response body held in memory, with its MIME type and encoding."""

    data: bytes
    mime_type: str
    encoding: str = ""

    def __len__(self) -> int:
        return len(self.data)


def parse_query(query: str) -> dict[str, str]:
    """Decode a query string into a dict.

    The whole string is percent-decoded before it is split on ``&`` and
    ``=``. A parameter without ``=`` gets an empty value; empty pieces are
    skipped. The first occurrence of a key wins.
    """
    params: dict[str, str] = {}
    for piece in unquote(query).split("&"):
        if not piece:
            continue
        key, _, value = piece.partition("=")
        params.setdefault(key, value)
    return params


def _join_params(params: Mapping[str, str]) -> str:
    return "&".join(f"{key}={params[key]}" for key in sorted(params))


@dataclass
class Request:
    """An HTTP request, either received by the server or to be sent."""

    method: str
    url: str = ""
    query_params: dict[str, str] = field(default_factory=dict)
    path: str = ""
    body: str = ""
    path_params: list[str] = field(default_factory=list)
    incoming: bool = False
    ssl_verify: bool = True

    @classmethod
    def from_environ(cls, environ: Mapping[str, str], stream: Optional[BinaryIO]) -> "Request":
        """Build a received request from CGI variables and its input stream."""
        method = environ.get("REQUEST_METHOD", "")

        body = ""
        if method in ("POST", "PUT"):
            raw = stream.read() if stream is not None else b""
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8", errors="replace")
            body = raw + "\n"
            logger.debug("Request content:\n%s", body)

        path = environ.get("SCRIPT_NAME", "")
        if path.endswith("/"):
            path = path[:-1]
        logger.debug("Request: %s %s", method, path)

        query = environ.get("QUERY_STRING", "")
        logger.debug("Query parameters: %s", query)
        params: dict[str, str] = {}
        for key, value in parse_query(query).items():
            params.setdefault(key.lower(), value)

        return cls(
            method=method,
            query_params=params,
            path=path,
            body=body,
            incoming=True,
        )

    def has_query_param(self, name: str) -> bool:
        """Tell whether the query holds the parameter ``name``."""
        return name in self.query_params

    def get_query_param(self, name: str) -> str:
        """Return the value of ``name``, or an empty string when absent."""
        return self.query_params.get(name, "")

    def to_string(self) -> str:
        """Return a one-line text form of the request."""
        return f"{self.method} {self.path}?{_join_params(self.query_params)}"

    def is_inspire(self, inspire_default: bool = False) -> bool:
        """Tell whether the request asks for INSPIRE behaviour."""
        inspire = self.get_query_param("inspire")
        if inspire_default:
            return inspire not in ("false", "0")
        return inspire in ("true", "1")

    def send(self) -> RawDataStream:
        """Send the request and return the response body.

        Raises RuntimeError for a received request, and ConnectionError when
        the transfer fails or the answer is not a 2xx status.
        """
        if self.incoming:
            raise RuntimeError("Input request cannot be sent")

        full_url = f"{self.url}?{_join_params(self.query_params)}"
        logger.info("Send request %s %s", self.method, full_url)

        http_request = urllib.request.Request(
            full_url,
            method=self.method or "GET",
            headers={"User-Agent": USER_AGENT, "Accept-Encoding": "identity"},
        )
        context = None
        if not self.ssl_verify:
            context = ssl.create_default_context()
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE

        try:
            with urllib.request.urlopen(http_request, timeout=TIMEOUT_SECONDS, context=context) as response:
                data = response.read()
                status = response.status
                content_type = response.headers.get("Content-Type", "") or ""
        except urllib.error.HTTPError as error:
            logger.error("%s %s failed, HTTP code %s", self.method, self.url, error.code)
            raise ConnectionError(f"{self.method} {self.url} failed: HTTP code {error.code}") from error
        except (urllib.error.URLError, OSError) as error:
            logger.error("%s %s failed: %s", self.method, self.url, error)
            raise ConnectionError(f"{self.method} {self.url} failed: {error}") from error

        if not 200 <= status <= 299:
            logger.error("%s %s failed, HTTP code %s", self.method, self.url, status)
            raise ConnectionError(f"{self.method} {self.url} failed: HTTP code {status}")

        return RawDataStream(data, content_type, "")