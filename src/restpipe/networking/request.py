"""Mutable request descriptor handed to request options."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Callable
from urllib.parse import urlsplit, urlunsplit

from requests.auth import HTTPBasicAuth
from requests.structures import CaseInsensitiveDict

from .context import CallContext, background


@dataclass
class Request:
    """One outbound request, built fresh for every pipeline call.

    ``body`` is always held as bytes so that :meth:`get_body` can hand out an
    independent stream each time the transport needs to (re)send it.
    """

    method: str
    url: str
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    body: bytes | None = None
    content_length: int = 0
    context: CallContext = field(default_factory=background)

    @property
    def query(self) -> str:
        """Raw (already encoded) query string of the URL."""
        return urlsplit(self.url).query

    @query.setter
    def query(self, raw_query: str) -> None:
        parts = urlsplit(self.url)
        self.url = urlunsplit(parts._replace(query=raw_query))

    def set_body(self, data: bytes) -> None:
        self.body = data
        self.content_length = len(data)

    def get_body(self) -> io.BytesIO | None:
        """Return a new stream over the body, or None if there is no body."""
        if self.body is None:
            return None
        return io.BytesIO(self.body)

    def set_basic_auth(self, username: str, password: str) -> None:
        HTTPBasicAuth(username, password)(self)


RequestOption = Callable[[Request], None]
