"""Middleware package for FastAPI application."""

from wellness.middleware.cors import add_cors

__all__ = ["add_cors"]
