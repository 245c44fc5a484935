"""QAUDIT

A domain core for quality audits. Clients are evaluated against standards by
authorized supervisors; evaluations follow an audit cadence, can be suspended
or withdrawn, and every locking action is projected into a lock history.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
