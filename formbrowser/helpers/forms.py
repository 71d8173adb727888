"""HTML form extraction utilities.

This module reads a ``<form>`` element once and turns its controls into the
value model used for submission: the set of defined field names, the current
(multi-valued) field values and the available submit buttons.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from werkzeug.datastructures import MultiDict

if TYPE_CHECKING:
    from formbrowser.helpers.dom import Selection

MULTIPART = "multipart/form-data"


def _is_submit(el: Selection, typ: str | None) -> bool:
    if typ == "submit":
        return True
    return el.tag == "button" and typ is None


def serialize_form(
    selection: Selection,
) -> tuple[set[str], MultiDict[str, str], MultiDict[str, str]]:
    """Extract defined field names, field values and buttons from a form.

    Args:
        selection: The ``<form>`` element.

    Returns:
        Tuple of (defined_fields, fields, buttons). ``fields`` and
        ``buttons`` keep the values of each name in document order.

    Example:
        >>> defined, fields, buttons = serialize_form(form)
        >>> sorted(defined)
        ['age', 'music']
        >>> fields.getlist('music')
        ['jazz', 'fusion']
        >>> buttons.getlist('submit2')
        ['submitted2']
    """
    defined: set[str] = set()
    fields: MultiDict[str, str] = MultiDict()
    buttons: MultiDict[str, str] = MultiDict()

    for el in selection.find(".//input | .//button"):
        name = el.attr("name")
        if name is None:
            continue
        typ = el.attr("type")
        if typ is not None:
            typ = typ.strip().lower()
        if _is_submit(el, typ):
            buttons.add(name, el.attr("value") or "")
        elif typ in ("radio", "checkbox"):
            defined.add(name)
            value = el.attr("value")
            if el.attr("checked") is not None and value is not None:
                fields.add(name, value)
        else:
            defined.add(name)
            value = el.attr("value")
            if value is not None:
                fields.add(name, value)

    for el in selection.find(".//select"):
        name = el.attr("name")
        if name is None:
            continue
        defined.add(name)
        for option in el.find(".//option[@selected]"):
            value = option.attr("value")
            if value is None:
                value = option.text().strip()
            fields.add(name, value)

    for el in selection.find(".//textarea"):
        name = el.attr("name")
        if name is None:
            continue
        defined.add(name)
        text = el.text()
        # a newline right after the start tag is not part of the value
        if text.startswith("\n"):
            text = text[1:]
        fields.add(name, text)

    return defined, fields, buttons


def form_method(selection: Selection) -> str:
    """Get the upper-cased form method, ``GET`` when not declared."""
    method = (selection.attr("method") or "").strip()
    if not method:
        return "GET"
    return method.upper()


def form_action(selection: Selection) -> str | None:
    return selection.attr("action")


def form_enctype(selection: Selection) -> str | None:
    return selection.attr("enctype")
