"""Utility functions for the Vercel deployer."""

from vercel_deployer.utils.content import ephemeral_workspace, resolve_html_content
from vercel_deployer.utils.logging import configure_logging, get_logger
from vercel_deployer.utils.naming import sanitize_project_name

__all__ = [
    "configure_logging",
    "ephemeral_workspace",
    "get_logger",
    "resolve_html_content",
    "sanitize_project_name",
]
