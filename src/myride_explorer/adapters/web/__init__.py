"""Web adapters: the edge relay server and the tap history view models."""

from myride_explorer.adapters.web.app import create_app

__all__ = ["create_app"]
