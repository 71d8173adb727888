class FormBrowserException(Exception):
    """Base exception class."""

    pass


class ElementNotFound(FormBrowserException):
    """A form, field or other element could not be found."""

    def __init__(self, message: str, name: str | None = None):
        self.name = name
        super().__init__(message)


class InvalidFormValue(FormBrowserException):
    """A form was asked to use a value it does not offer, e.g. a button."""

    def __init__(self, message: str, name: str | None = None):
        self.name = name
        super().__init__(message)


class PageNotLoaded(FormBrowserException):
    """An operation needs a current page but none has been opened."""

    pass
