"""
Core utilities shared across the contacts service.

This package hosts configuration helpers (env vars, storage paths, feature
flags) and the logging setup. Repositories, services and routers depend on
these primitives instead of reading the environment themselves.
"""
