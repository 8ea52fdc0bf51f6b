"""
Incoming Phone Numbers
======================

Data access for the phone numbers provisioned to platform accounts.

This package provides:
- Typed incoming phone number records and search filters
- Row snapshot mapping driven by a single field table
- A named query catalog over SQLAlchemy Core
- An async repository with per-operation units of work
"""

__version__ = "1.0.0"
