"""ROLLCALL test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with external systems (DB, FS, migrations).
- functional/   : User-visible flows and features tested end-to-end at the boundary.
- contract/     : Shared behavior/invariants enforced across multiple implementations.
- e2e/          : Full CLI invocations exercising logging and wiring.
- fixtures/     : pytest plugins providing shared fixtures.
- helpers/      : Shared utilities and fakes (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- HTTP is never hit for real: stores talk to `helpers.fake_api` through
  `httpx.MockTransport`.
- Property-based tests use hypothesis and @pytest.mark.property.
"""
