"""The `MetaData` every QAUDIT table is declared on.

Its naming convention gives unnamed indexes and named check constraints a
stable database name, so migrations can refer to them without guessing,
e.g. `ix_lock_history_evaluation_id_occurred_at` and
`ck_lock_history_known_action`.
"""

from sqlalchemy import MetaData

metadata = MetaData(
    naming_convention={
        "pk": "pk_%(table_name)s",
        "ix": "ix_%(table_name)s_%(column_0_N_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    }
)
