"""Perfume catalog service: admin-gated CRUD API over a JSON-backed catalog."""

__version__ = "1.0.0"
