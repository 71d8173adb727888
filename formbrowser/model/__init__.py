from formbrowser.model.session import CookieModel, SessionModel

__all__ = ["CookieModel", "SessionModel"]
