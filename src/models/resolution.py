"""
Resolution option and outcome models

Closed variants used to configure class-name transformation and to report
why a definition request ended without a target.
"""

import threading
from enum import Enum
from typing import Any


class CamelCaseMode(Enum):
    """
    How stylesheet class names are transformed before matching

    Mirrors the naming convention the importing code uses to reference
    classes on a CSS-modules object.
    """
    NONE = "none"            # .submit-btn is referenced as css["submit-btn"]
    CAMELCASE = "camelcase"  # whole line camelized, css.submitBtn
    DASHES = "dashes"        # only dashes collapsed, css.submitBtn / css.submit_btn

    @classmethod
    def mode_parse(cls, value: Any) -> "CamelCaseMode":
        """
        Parse a configuration value into a CamelCaseMode

        Accepts enum members, the legacy option values (true, false,
        "dashes") and enum values/names in any case.

        Raises:
            ValueError: If the value names no known mode
        """
        if isinstance(value, cls):
            return value
        if value is None or value is False:
            return cls.NONE
        if value is True:
            return cls.CAMELCASE

        text = str(value).strip().lower()
        if text in ("", "false", "none", "off", "0"):
            return cls.NONE
        if text in ("true", "camelcase", "on", "1"):
            return cls.CAMELCASE
        if text == "dashes":
            return cls.DASHES
        raise ValueError(f"Unknown camelCase mode: {value!r}")


class ResolutionStatus(Enum):
    """
    Outcome of a definition request

    Every status other than RESOLVED answers "no definition" to the host.
    """
    PENDING = "pending"
    RESOLVED = "resolved"
    NO_TOKEN = "no-token"                    # nothing clickable under the cursor
    MALFORMED_TOKEN = "malformed-token"      # token has no obj/field pair
    UNRESOLVED_IMPORT = "unresolved-import"  # specifier missing or not on disk
    TARGET_NOT_FOUND = "target-not-found"    # class absent from the stylesheet
    CANCELLED = "cancelled"


class CancellationToken:
    """
    Host-provided cancellation flag

    The resolver checks it before every awaited step and every file read.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()
