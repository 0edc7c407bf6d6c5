"""
UI package for the Subber sideline tracker.

This package contains the Flask web server and its templates.
"""
from .web_app import create_app, run_web_app

__all__ = ["create_app", "run_web_app"]
