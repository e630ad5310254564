# Copyright (c) Syntropy Systems
"""fraudboard web dashboard."""

from fraudboard.dashboard.server import create_app

__all__ = ["create_app"]
