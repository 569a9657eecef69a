"""
URL-safe slug derivation for event titles.
"""

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """
    Lowercase, trim, collapse every run outside [a-z0-9] into a single "-",
    then strip leading/trailing dashes.

    Total and deterministic: a title with no ASCII letters or digits
    produces "" (callers decide whether that is acceptable).
    """
    return _NON_ALNUM.sub("-", title.lower().strip()).strip("-")
