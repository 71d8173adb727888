"""The session interface a form needs in order to submit itself."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from werkzeug.datastructures import MultiDict


@runtime_checkable
class Browsable(Protocol):
    """A browsing session which can resolve URLs and send form data.

    ``values`` map each field name to its ordered list of values.
    """

    @property
    def url(self) -> str | None:
        """Absolute URL of the current document."""
        ...

    def resolve_url(self, url: str) -> str:
        """Resolve a possibly relative URL against the current document."""
        ...

    def open_form(self, url: str, values: MultiDict[str, str]) -> Any:
        """GET ``url`` with ``values`` encoded as the query string."""
        ...

    def post_form(self, url: str, values: MultiDict[str, str]) -> Any:
        """POST ``values`` url-encoded to ``url``."""
        ...

    def post_multipart(self, url: str, values: MultiDict[str, str]) -> Any:
        """POST ``values`` as multipart/form-data to ``url``."""
        ...
