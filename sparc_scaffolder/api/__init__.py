"""HTTP boundary for the scaffolder."""

from sparc_scaffolder.api.app import create_app

__all__ = ["create_app"]
