"""Bootstrap (composition root) for QAUDIT.

Assembles the application at runtime: wires concrete adapters to the
application services and the message bus, and reads configuration.

Import rules:
- This package may import: `qaudit.adapters`, `qaudit.service_layer`,
  `qaudit.interfaces`, `qaudit.domain`, and `qaudit.config`.
- Inner layers must not import `qaudit.bootstrap`.

Public surface:
- `bootstrap()` and `AppContainer`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
