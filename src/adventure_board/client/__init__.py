"""
Polling client for the Adventure Board API.

Exposes:
- BoardClient: async HTTP access returning the same records the server builds
- RefreshScheduler: one cancellable repeating refresh task
- BoardController: the screen state machine driven by user actions and the timer
"""

from adventure_board.client.api import BoardClient
from adventure_board.client.scheduler import RefreshScheduler
from adventure_board.client.views import BoardController, Variant, View

__all__ = [
    "BoardClient",
    "RefreshScheduler",
    "BoardController",
    "Variant",
    "View",
]
