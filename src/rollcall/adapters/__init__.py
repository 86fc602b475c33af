"""Adapters (infrastructure) for ROLLCALL.

Concrete `PersonStore` implementations (in-memory, HTTP, SQL database), the
identifier generators they use, and the database plumbing (engine, metadata,
column types, schema, migrations).

Dependency rule: may import `rollcall.domain` and `rollcall.interfaces`; the
inner layers must not import this package.
"""
