"""Bootstrap (composition root) for ROLLCALL.

Assembles the application at runtime: reads configuration, builds the
concrete `PersonStore` for the configured URL, and injects it into a fresh
`PersonListViewModel`.

Import rules:
- Entry points import *this* package (not adapters/viewmodels/interfaces/domain).
- This package may import: `rollcall.adapters`, `rollcall.viewmodels`,
  `rollcall.interfaces`, `rollcall.domain`, and `rollcall.config`.
- Inner layers must not import `rollcall.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_store

__all__ = ["AppContainer", "bootstrap", "build_store"]
