"""Shared event schemas for the broadcast services.

Each sub-package owns one event family (one queue). Families only share types via
`vcr_schemas.core` and `vcr_schemas.contracts`.
"""
