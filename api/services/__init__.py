"""
High-level use cases for the Notes API.

Each service module orchestrates repositories to implement business rules
(required fields, not-found handling, list vs. detail views).

Routers (FastAPI endpoints) call these services instead of manipulating the
JSON file directly.
"""
