"""API module for sigscan.

Functions defined here are the single source of truth for the CLI commands
and for any other front end driving a scan.
"""

__all__ = []
