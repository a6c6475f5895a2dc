"""Discourse forum integration."""

from .client import DiscourseClient, DiscourseError, attribution_footer, get_discourse_client

__all__ = ["DiscourseClient", "DiscourseError", "attribution_footer", "get_discourse_client"]
