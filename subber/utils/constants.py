"""
Constants for the Subber sideline tracker.

This module contains configuration constants used throughout the application.
"""

# Application metadata
APP_TITLE = "Subber"
APP_DESCRIPTION = "Manage team subs"

# Web server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8081
DEFAULT_CONFIG_FILE = "config.json"

# Seconds between page refreshes while a game is in progress or paused
POLL_INTERVAL_SECONDS = 5

# Headers added to every HTTP response
SECURITY_HEADERS = {
    "Content-Security-Policy": "default-src 'self'",
    "X-XSS-Protection": "1; mode=block",
    "X-Frame-Options": "sameorigin",
    "X-Content-Type-Options": "nosniff",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Referrer-Policy": "no-referrer-when-downgrade",
}

# CORS preflight settings
CORS_ALLOWED_METHODS = ["GET", "PUT", "POST", "DELETE", "HEAD"]
CORS_ALLOWED_HEADERS = ["authorization", "content-type", "content-length"]
CORS_MAX_AGE_SECONDS = 86400

# {version} is filled in once at startup
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] version={version} %(message)s"
