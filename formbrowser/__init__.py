import logging

import urllib3

from formbrowser.exc import ElementNotFound, InvalidFormValue, PageNotLoaded
from formbrowser.logic.browser import Browser
from formbrowser.logic.form import Form

urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

# Silence noisy third-party loggers
for logger_name in ("urllib3", "chardet", "charset_normalizer"):
    logging.getLogger(logger_name).setLevel(logging.WARNING)

__all__ = ["Browser", "ElementNotFound", "Form", "InvalidFormValue", "PageNotLoaded"]
