"""Clock interface.

Domain and service code never call `datetime.now()` directly; they receive a
`Clock` so that time can be pinned in tests.
"""

import abc
from datetime import datetime

# pylint: disable=too-few-public-methods


class Clock(abc.ABC):
    """Contract for a source of the current instant."""

    @abc.abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
