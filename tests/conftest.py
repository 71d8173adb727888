import os

import pytest
from furl import furl
from lxml import html
from requests import Request, Response

from formbrowser.helpers.dom import HtmlSelection
from formbrowser.logic.browser import Browser

PAGE_URL = "http://example.org/forms/index.html?page=1"


def get_testdata_dir():
    file_path = os.path.realpath(__file__)
    return os.path.normpath(os.path.join(file_path, "../testdata"))


def read_testdata(name):
    with open(os.path.join(get_testdata_dir(), name), encoding="utf-8") as fh:
        return fh.read()


def get_form(name, xpath=".//form"):
    """Parse a test page and select the first form matching ``xpath``."""
    doc = html.fromstring(read_testdata(name))
    return HtmlSelection(doc.xpath(xpath)[0])


def make_response(url, content, content_type="text/html; charset=utf-8"):
    """Build a requests Response as if ``url`` had served ``content``."""
    response = Response()
    response.url = url
    response.status_code = 200
    response.encoding = "utf-8"
    response.headers["Content-Type"] = content_type
    response._content = content.encode("utf-8")
    response.request = Request("GET", url).prepare()
    return response


class RecordingBrowsable:
    """Stands in for a browser session and records form submissions."""

    def __init__(self, url=PAGE_URL):
        self.url = url
        self.calls = []

    def resolve_url(self, url):
        return furl(self.url).join(url).url

    def open_form(self, url, values):
        self.calls.append(("open_form", url, values))

    def post_form(self, url, values):
        self.calls.append(("post_form", url, values))

    def post_multipart(self, url, values):
        self.calls.append(("post_multipart", url, values))

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture(scope="function")
def browsable():
    return RecordingBrowsable()


@pytest.fixture(scope="function")
def browser():
    """Fresh browser for each test function."""
    with Browser() as browser:
        yield browser


@pytest.fixture(scope="function")
def serve_page(browser, mocker):
    """Open a test page in ``browser`` as if it had been served from ``url``.

    Later GET requests to other URLs still go over the network.
    """

    def serve(name, url):
        page = make_response(url, read_testdata(name))
        original = browser.http.get

        def get(target, **kwargs):
            if target == url:
                return page
            return original(target, **kwargs)

        mocker.patch.object(browser.http, "get", side_effect=get)
        browser.open(url)
        return browser

    return serve


@pytest.fixture(scope="session")
def httpbin_url(httpbin):
    """Provide httpbin URL from pytest-httpbin fixture.

    pytest-httpbin automatically starts a local httpbin server in a separate
    thread - no Docker required.
    """
    return httpbin.url


@pytest.fixture(scope="session")
def load_form():
    return get_form
