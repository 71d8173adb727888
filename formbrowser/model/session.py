"""Browser session state model for serialization."""

from __future__ import annotations

from pydantic import BaseModel
from requests import Session


class CookieModel(BaseModel):
    """Serializable cookie with domain/path info."""

    name: str
    value: str | None = None
    domain: str = ""
    path: str = "/"
    secure: bool = False


class SessionModel(BaseModel):
    """Serializable HTTP session state for a requests Session."""

    cookies: list[CookieModel] = []
    headers: dict[str, str] = {}

    @classmethod
    def from_session(cls, session: Session) -> SessionModel:
        """Extract session state from a requests Session."""
        # Keep domain/path so that same-named cookies don't collide
        cookies = []
        for cookie in session.cookies:
            cookies.append(
                CookieModel(
                    name=cookie.name,
                    value=cookie.value,
                    domain=cookie.domain or "",
                    path=cookie.path or "/",
                    secure=bool(cookie.secure),
                )
            )
        return cls(cookies=cookies, headers=dict(session.headers))

    def apply_to_session(self, session: Session) -> None:
        """Apply session state to a requests Session."""
        for cookie in self.cookies:
            session.cookies.set(
                cookie.name,
                cookie.value,
                domain=cookie.domain,
                path=cookie.path,
                secure=cookie.secure,
            )
        session.headers.update(self.headers)
