"""Contracts package.

This package defines the *public* cross-service contracts: queue names, the
tagged-variant codec every family is built on, and the error taxonomy.
"""
