"""HTTP client used by the browser."""

from __future__ import annotations

from typing import Any

from requests import Request, Response, Session

from formbrowser.core import settings


class BrowserHttp:
    """HTTP client with session management."""

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float | None = None,
        verify: bool | None = None,
    ) -> None:
        self.user_agent = user_agent or settings.user_agent
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self.verify = verify if verify is not None else settings.verify_ssl
        self.reset()

    def reset(self) -> Session:
        self.session = Session()
        self.session.headers["User-Agent"] = self.user_agent
        return self.session

    def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: list[tuple[str, Any]] | None = None,
        data: list[tuple[str, Any]] | bytes | None = None,
        files: list[tuple[str, Any]] | None = None,
        allow_redirects: bool = True,
    ) -> Response:
        method = method.upper().strip()
        request = Request(
            method,
            url,
            headers=headers or {},
            params=params,
            data=data,
            files=files,
        )
        prepared = self.session.prepare_request(request)
        return self.session.send(
            prepared,
            verify=self.verify,
            timeout=self.timeout,
            allow_redirects=allow_redirects,
        )

    def get(self, url: str, **kwargs: Any) -> Response:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> Response:
        return self.request("POST", url, **kwargs)

    def close(self) -> None:
        self.session.close()
