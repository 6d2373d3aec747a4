"""
Top-level package for the Wedding Planner API.

The REST service lives in ``wedding_planner_api.app``; a small HTTP
client for it is provided by ``wedding_planner_api.client``.
"""

__all__ = []
