"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Optional
from flask import current_app, request


def get_public_origin(request_obj=None) -> str:
    """
    Origin used to build share links.

    PUBLIC_ORIGIN from the app config wins; otherwise the origin the request
    came in on, without a trailing slash.
    """
    configured: Optional[str] = current_app.config.get('PUBLIC_ORIGIN')
    if configured:
        return configured.rstrip('/')

    if request_obj is None:
        request_obj = request
    return request_obj.host_url.rstrip('/')


def parse_bool(value, default: bool = False) -> bool:
    """Reads a JSON boolean, tolerating the strings 'true'/'false' from form-style clients."""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)
