"""Outbound ports of QAUDIT.

Framework-free abstract interfaces the domain and service layer depend on.
Adapters in `qaudit.adapters` implement them.
"""
