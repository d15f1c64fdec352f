"""HTTP server exposing provider runtimes."""

from .app import create_app, cli

__all__ = ["create_app", "cli"]
