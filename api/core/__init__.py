"""
Core utilities shared across the Notes API.

This package hosts:
- configuration helpers (env vars, data paths)
- logging setup
- timestamp helpers used by the domain and the JSON store

Routers and services depend on these primitives instead of reading the
environment or formatting dates themselves.
"""
