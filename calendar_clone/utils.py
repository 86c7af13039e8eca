"""Utility functions for calendar-clone."""

import random
import string
import time
from typing import Callable

IdGenerator = Callable[[], str]

_BASE36 = string.digits + string.ascii_lowercase


def _epoch_millis() -> str:
    return str(int(time.time() * 1000))


def generate_event_id() -> str:
    """Id for an event created locally: epoch milliseconds."""
    return _epoch_millis()


def generate_import_id() -> str:
    """
    Id for an event created by the ICS decoder.

    Epoch milliseconds followed by nine random base-36 characters, so
    events decoded within the same millisecond stay distinct.

    Returns:
        Fresh id string (e.g., "1760870400000k3j9x0q2a")
    """
    suffix = "".join(random.choices(_BASE36, k=9))
    return _epoch_millis() + suffix
