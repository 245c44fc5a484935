"""Database backends the lock history can be stored in."""

from __future__ import annotations

from enum import Enum

from sqlalchemy.engine import URL, make_url


class UnsupportedDialect(ValueError):
    """Raised for a database URL whose backend QAUDIT cannot store into."""

    def __init__(self, backend: str) -> None:
        super().__init__(
            f"Unsupported database backend {backend!r}; "
            f"expected one of {[d.value for d in DialectName]}"
        )
        self.backend = backend


class DialectName(str, Enum):
    """SQLAlchemy backend names with a tested lock history schema."""

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def of(cls, url: str | URL) -> DialectName:
        """Return the backend of a database URL, ignoring the driver.

        `postgresql+psycopg://...` and `sqlite+pysqlite://...` resolve to
        `POSTGRES` and `SQLITE`.

        Raises:
            UnsupportedDialect: For any other backend.
        """
        backend = make_url(url).get_backend_name()
        try:
            return cls(backend)
        except ValueError:
            raise UnsupportedDialect(backend) from None
