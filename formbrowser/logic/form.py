"""Mutable form state and submission."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from anystore.logging import get_logger
from werkzeug.datastructures import MultiDict

from formbrowser.exc import ElementNotFound, InvalidFormValue
from formbrowser.helpers.forms import (
    MULTIPART,
    form_action,
    form_enctype,
    form_method,
    serialize_form,
)

if TYPE_CHECKING:
    from formbrowser.helpers.dom import Selection
    from formbrowser.logic.browsable import Browsable

log = get_logger(__name__)


class Form:
    """An HTML form whose fields can be edited and submitted.

    The form's controls are read once, when the form is created. After that
    the field values live only in this object; the DOM is consulted again
    only for ``method``, ``action`` and ``enctype`` at submission time.

    Submission is delegated to the owning ``Browsable`` session, which sends
    the request and loads the response as its new current page.

    Example:
        >>> form = browser.form('.//form[@name="search"]')
        >>> form.input("q", "court records")
        >>> form.check_box("lang", ["en", "de"])
        >>> form.click("go")
    """

    def __init__(self, browsable: Browsable, selection: Selection) -> None:
        self.browsable = browsable
        self.selection = selection
        self._action: str | None = None
        self.defined_fields, self.fields, self.buttons = serialize_form(selection)

    @property
    def dom(self) -> Selection:
        return self.selection

    @property
    def method(self) -> str:
        """The form method, e.g. ``GET`` or ``POST``."""
        return form_method(self.selection)

    @property
    def action(self) -> str:
        """The absolute URL the form submits to."""
        action = self._action
        if not action:
            action = form_action(self.selection)
        if action is None:
            action = self.browsable.url or ""
        return self.browsable.resolve_url(action)

    def set_action(self, url: str | None) -> None:
        """Override the form's action URL. An empty value clears the override."""
        self._action = url

    def __contains__(self, name: object) -> bool:
        return name in self.defined_fields

    def field(self, name: str) -> str | None:
        """Get the first value of a field.

        Returns an empty string for a defined field without a value, and
        ``None`` if the form has no such field.
        """
        if name not in self.defined_fields:
            return None
        return self.fields.get(name, "")

    def field_values(self, name: str) -> list[str]:
        self._ensure_defined(name)
        return self.fields.getlist(name)

    def input(self, name: str, value: str) -> None:
        """Set the value of a field, replacing all of its current values."""
        self._ensure_defined(name)
        self.fields.setlist(name, [value])

    def input_slice(self, name: str, values: Iterable[str]) -> None:
        """Set all values of a multi-valued field, in the given order."""
        self._ensure_defined(name)
        values = list(values)
        if values:
            self.fields.setlist(name, values)
        else:
            self.fields.poplist(name)

    def check_box(self, name: str, values: Iterable[str]) -> None:
        """Select exactly the given checkbox values of a field."""
        self.input_slice(name, values)

    def delete_field(self, name: str) -> None:
        """Remove all values of a field; the field remains defined."""
        self._ensure_defined(name)
        self.fields.poplist(name)

    def values(self) -> MultiDict[str, str]:
        """Get a copy of the values that a submission would send."""
        return self.fields.copy()

    def submit(self) -> Any:
        """Submit the form.

        Clicks the first button of the form in document order, or submits the
        plain field values if the form has no buttons.
        """
        if self.buttons:
            return self.click(next(iter(self.buttons)))
        return self._send()

    def click(self, button: str) -> Any:
        """Submit the form by clicking the named button."""
        if button not in self.buttons:
            raise InvalidFormValue(
                "Form does not contain a button with the name '%s'." % button,
                name=button,
            )
        return self._send(button, self.buttons.get(button))

    def _ensure_defined(self, name: str) -> None:
        if name not in self.defined_fields:
            raise ElementNotFound("No input found with name '%s'." % name, name=name)

    def _send(self, button: str | None = None, value: str | None = None) -> Any:
        method = self.method
        url = self.action
        values = self.values()
        if button is not None:
            values.setlist(button, [value or ""])

        if method == "GET":
            log.info("Submit form", method=method, url=url)
            return self.browsable.open_form(url, values)
        if form_enctype(self.selection) == MULTIPART:
            log.info("Submit form", method=method, url=url, enctype=MULTIPART)
            return self.browsable.post_multipart(url, values)
        log.info("Submit form", method=method, url=url)
        return self.browsable.post_form(url, values)

    def __repr__(self) -> str:
        action = self._action or form_action(self.selection)
        return "<Form(%s,%s)>" % (self.method, action)
