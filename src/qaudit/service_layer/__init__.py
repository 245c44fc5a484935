"""Service layer for QAUDIT: application services, commands and the message bus."""
