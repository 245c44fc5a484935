"""QAUDIT test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with external systems (SQLite, Alembic).
- fixtures/     : Shared pytest fixtures, loaded as plugins (no tests here).
- helpers/      : Assertion helpers shared across tests.

General guidance
- Keep unit fast and deterministic (no real I/O); prefer in-memory adapters
  and a FixedClock over mocks at boundaries.
- Integration hits real dependencies with realistic setup/teardown.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, integration (added by directory), property
"""
