"""
Version information
Single source of truth for the package version
"""

__version__ = "0.1.0"

APP_NAME = "uk-covid19-client"
APP_DESCRIPTION = "Query builder and client for the UK coronavirus dashboard API"
