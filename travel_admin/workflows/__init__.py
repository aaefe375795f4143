"""Multi-step workflows built from the service layer."""

from .bulk_import import run_import  # noqa: F401

__all__ = ["run_import"]
