"""Ports (interfaces) for the ports-and-adapters architecture."""

from myride_explorer.domain.ports.tap_history_repository import TapHistoryRepository

__all__ = ["TapHistoryRepository"]
