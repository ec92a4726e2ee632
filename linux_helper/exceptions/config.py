#!/usr/bin/env python3
"""
Configuration Exception Definitions for Linux Helper

All configuration-related exceptions inherit from HelperBaseError.
"""

from linux_helper.exceptions.base import HelperBaseError


class ConfigError(HelperBaseError):
    """Raised when configuration validation fails."""

    def __init__(self, message, field_name=None, invalid_value=None):
        super().__init__(message, user_hint="Check your .env file or environment.")
        self.field_name = field_name
        self.invalid_value = invalid_value


class UnknownPageError(HelperBaseError):
    """Raised when a page slug is not in the registry."""

    def __init__(self, slug):
        super().__init__(f"Unknown page: {slug}", details={"slug": slug})
        self.slug = slug
