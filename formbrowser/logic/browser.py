"""A stateful browsing session on top of the HTTP client."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any

from anystore.logging import get_logger
from furl import furl
from requests import Response
from requests.structures import CaseInsensitiveDict
from urllib3.filepost import encode_multipart_formdata
from werkzeug.datastructures import MultiDict

from formbrowser.core import settings
from formbrowser.exc import ElementNotFound, PageNotLoaded
from formbrowser.helpers.dom import HtmlSelection, parse_html
from formbrowser.logic.form import Form
from formbrowser.logic.http import BrowserHttp
from formbrowser.model.session import SessionModel

if TYPE_CHECKING:
    from lxml.html import HtmlElement

log = get_logger(__name__)

NON_HTML = ("json", "javascript", "image/", "audio/", "video/", "font/", "pdf")
URLENCODED = "application/x-www-form-urlencoded"


class Browser:
    """Browse pages and submit their forms.

    The browser keeps the most recent response as its current page. Opening a
    page or submitting a form replaces the current page and pushes the
    previous one onto the history, from where ``back()`` restores it.

    Example:
        >>> browser = Browser()
        >>> browser.open("https://example.com/search")
        >>> form = browser.form('.//form[@id="search"]')
        >>> form.input("q", "court records")
        >>> form.submit()
        >>> browser.title
        'Search results'
    """

    def __init__(
        self, http: BrowserHttp | None = None, max_history: int | None = None
    ) -> None:
        if max_history is None:
            max_history = settings.max_history
        self.http = http or BrowserHttp()
        self.response: Response | None = None
        self.history: deque[Response] = deque(maxlen=max_history)
        self._dom: HtmlElement | None = None

    @property
    def url(self) -> str | None:
        if self.response is None:
            return None
        return self.response.url

    @property
    def status_code(self) -> int | None:
        if self.response is None:
            return None
        return self.response.status_code

    @property
    def headers(self) -> CaseInsensitiveDict:
        if self.response is None:
            return CaseInsensitiveDict()
        return self.response.headers

    @property
    def body(self) -> str:
        if self.response is None:
            return ""
        return self.response.text

    @property
    def json(self) -> Any:
        if self.response is None:
            raise PageNotLoaded("No page has been opened.")
        return self.response.json()

    @property
    def dom(self) -> HtmlElement | None:
        """Parsed HTML of the current page."""
        if self._dom is None and self.response is not None:
            content_type = self.headers.get("content-type", "").lower()
            if any(t in content_type for t in NON_HTML):
                return None
            self._dom = parse_html(self.response.content)
        return self._dom

    @property
    def title(self) -> str | None:
        if self.dom is None:
            return None
        title = self.dom.findtext(".//title")
        if title is None:
            return None
        return title.strip()

    def resolve_url(self, url: str) -> str:
        """Make a URL absolute relative to the current page.

        A ``<base href>`` in the current page takes precedence over the page
        URL.
        """
        if furl(url).scheme:
            return url
        if self.url is None:
            raise PageNotLoaded("Cannot resolve '%s' without a current page." % url)
        base = furl(self.url)
        if self.dom is not None:
            hrefs = self.dom.xpath(".//base/@href")
            if hrefs:
                base = base.join(hrefs[0])
        return base.join(url).url

    def open(self, url: str) -> Response:
        """Load a page with a GET request."""
        if self.url is not None:
            url = self.resolve_url(url)
        return self._load(self.http.get(url))

    def open_form(self, url: str, values: MultiDict[str, str]) -> Response:
        """GET ``url`` with the form values as its query string.

        Any query already present on ``url`` is replaced.
        """
        url = furl(url).remove(query=True, fragment=True).url
        params = list(values.items(multi=True))
        return self._load(self.http.get(url, params=params))

    def post_form(self, url: str, values: MultiDict[str, str]) -> Response:
        """POST the form values url-encoded."""
        data = list(values.items(multi=True))
        headers = {"Content-Type": URLENCODED}
        return self._load(self.http.post(url, data=data, headers=headers))

    def post_multipart(self, url: str, values: MultiDict[str, str]) -> Response:
        """POST the form values as multipart/form-data parts.

        The body is always a boundary-terminated multipart document, also
        when there are no values to send.
        """
        fields = list(values.items(multi=True))
        body, content_type = encode_multipart_formdata(fields)
        headers = {"Content-Type": content_type}
        return self._load(self.http.post(url, data=body, headers=headers))

    def form(self, xpath: str = ".//form") -> Form:
        """Get the first form of the current page matching ``xpath``."""
        for selection in self._find(xpath):
            if selection.tag == "form":
                return Form(self, selection)
        raise ElementNotFound("No form found matching '%s'." % xpath, name=xpath)

    def forms(self) -> list[Form]:
        """Get all forms of the current page."""
        return [Form(self, selection) for selection in self._find(".//form")]

    def back(self) -> bool:
        """Return to the previous page. Returns False if there is none."""
        if not self.history:
            return False
        self.response = self.history.pop()
        self._dom = None
        return True

    def save_session(self) -> dict[str, Any]:
        """Serialize cookies and headers of the HTTP session."""
        return SessionModel.from_session(self.http.session).model_dump()

    def restore_session(self, data: dict[str, Any]) -> None:
        SessionModel.model_validate(data).apply_to_session(self.http.session)

    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def _find(self, xpath: str) -> list[HtmlSelection]:
        if self.dom is None:
            raise PageNotLoaded("No HTML page has been opened.")
        return HtmlSelection(self.dom).find(xpath)

    def _load(self, response: Response) -> Response:
        log.info(
            "Load page",
            method=response.request.method,
            url=response.url,
            status=response.status_code,
        )
        if self.response is not None:
            self.history.append(self.response)
        self.response = response
        self._dom = None
        return response

    def __repr__(self) -> str:
        return "<Browser(%s)>" % self.url
