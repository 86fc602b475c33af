"""ROLLCALL

A small MVVM-style client for person records kept by a remote store.
A store is either a JSON HTTP API or a SQL database; a view-model caches the
records in memory and notifies its subscribers after every change.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
