"""Ordered fallback over optional values."""

import math
from typing import Any


def is_present(value: Any) -> bool:
    """A value is present when it is neither None nor a float NaN."""
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return True


def first_present(*values: Any) -> Any:
    """
    Return the first present value, in argument order.

    Used wherever several sources can supply the same field and the
    earlier source takes precedence: merging wearable files into a daily
    snapshot, and preferring manual entries over device data.
    """
    for value in values:
        if is_present(value):
            return value
    return None
