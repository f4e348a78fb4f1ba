# src/adventure_board/client/views.py
"""
Screen state machine for the polling client.

Two variants share one API:

- ``board``: adventures list -> party -> character
- ``mini_app``: main menu -> (my character | my party -> character)

User actions and timer ticks go through the same fetch path. The refresh
timer is a single task owned by the controller; it runs only while the
display is visible and the current view has something to refresh.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

from adventure_board.client import render
from adventure_board.client.api import BoardClient
from adventure_board.client.scheduler import RefreshScheduler
from adventure_board.errors import ClientFetchError
from adventure_board.tools.logger import Logger


_LOG, _ = Logger().create(application="client")


class View(str, Enum):
    ADVENTURES = "adventures"
    MAIN_MENU = "main_menu"
    PARTY = "party"
    CHARACTER = "character"


class Variant(str, Enum):
    BOARD = "board"
    MINI_APP = "mini_app"


REFRESHABLE_VIEWS = frozenset({View.ADVENTURES, View.PARTY, View.CHARACTER})

FAILURE_MESSAGES = {
    View.ADVENTURES: "Failed to load adventures",
    View.MAIN_MENU: "Failed to load menu",
    View.PARTY: "Failed to load party members",
    View.CHARACTER: "Failed to load character details",
}


@dataclass(frozen=True)
class ViewState:
    view: View
    adventure_id: Optional[int] = None
    # None on a CHARACTER view means "the user's own character"
    character_id: Optional[int] = None
    parent: Optional[ViewState] = None


class BoardController:
    """Owns the current view, the refresh timer and the display callback."""

    def __init__(
        self,
        client: BoardClient,
        display: Callable[[str], None],
        *,
        variant: Variant | str = Variant.BOARD,
        user_id: Optional[int] = None,
        interval: float = 3.0,
    ):
        self.client = client
        self.display = display
        self.variant = Variant(variant)
        self.user_id = user_id
        self.scheduler = RefreshScheduler(interval, self.refresh)

        self.state = ViewState(self.home_view)
        self.visible = True
        self.error: Optional[str] = None
        self.last_updated: Optional[datetime] = None
        # None until the first fetch completes
        self.connected: Optional[bool] = None
        self._generation = 0

    @property
    def home_view(self) -> View:
        return View.ADVENTURES if self.variant is Variant.BOARD else View.MAIN_MENU

    @property
    def view(self) -> View:
        return self.state.view

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def open(self) -> None:
        await self.show_home()

    async def show_home(self) -> None:
        await self._enter(ViewState(self.home_view))

    async def view_party(self, adventure_id: int) -> None:
        await self._enter(ViewState(View.PARTY, adventure_id=adventure_id, parent=ViewState(self.home_view)))

    async def view_character(self, character_id: int) -> None:
        parent = self.state.parent if self.state.view is View.CHARACTER else self.state
        await self._enter(ViewState(View.CHARACTER, character_id=character_id, parent=parent))

    async def view_my_character(self) -> None:
        if self.user_id is None:
            self._abort("User ID is required")
            return
        parent = self.state.parent if self.state.view is View.CHARACTER else self.state
        await self._enter(ViewState(View.CHARACTER, parent=parent))

    async def view_my_party(self) -> None:
        # TODO: resolve the adventure the user's character joined once the API
        # exposes participation by user; the first active adventure stands in.
        try:
            adventures = await self.client.adventures()
        except ClientFetchError as exc:
            _LOG.error(f"Error fetching adventures: {exc.message}")
            self.connected = False
            self._abort(FAILURE_MESSAGES[View.ADVENTURES])
            return
        self._mark_connected()
        if not adventures:
            self._abort("No active adventures.")
            return
        await self.view_party(adventures[0].adventure_id)

    async def back(self) -> None:
        if self.state.view is View.PARTY:
            await self.show_home()
        elif self.state.view is View.CHARACTER:
            await self.close_character()

    async def close_character(self) -> None:
        if self.state.view is not View.CHARACTER:
            return
        await self._enter(self.state.parent or ViewState(self.home_view))

    # ------------------------------------------------------------------
    # Refresh & visibility
    # ------------------------------------------------------------------

    async def refresh(self) -> None:
        """Re-fetch the current view. Used by both the timer and retry."""
        if self.state.view not in REFRESHABLE_VIEWS and self.error is None:
            return
        await self._load()
        self._sync_timer()

    def set_visible(self, visible: bool) -> None:
        self.visible = visible
        self._sync_timer()

    async def close(self) -> None:
        await self.scheduler.aclose()
        await self.client.close()

    # ------------------------------------------------------------------

    async def _enter(self, state: ViewState) -> None:
        self.state = state
        self._generation += 1
        await self._load()
        self._sync_timer()

    def _sync_timer(self) -> None:
        if self.visible and self.state.view in REFRESHABLE_VIEWS:
            self.scheduler.start()
        else:
            self.scheduler.stop()

    async def _load(self) -> None:
        generation = self._generation
        state = self.state
        try:
            text = await self._fetch_screen(state)
        except ClientFetchError as exc:
            if generation != self._generation:
                return
            _LOG.error(f"Error loading {state.view.value}: {exc.message}")
            self.connected = False
            self._show_error(FAILURE_MESSAGES[state.view])
            return

        if generation != self._generation:
            _LOG.debug(f"Discarding stale {state.view.value} response")
            return
        self.error = None
        if state.view is not View.MAIN_MENU:
            self._mark_connected()
        self._paint(text)

    async def _fetch_screen(self, state: ViewState) -> str:
        if state.view is View.ADVENTURES:
            return render.render_adventures(await self.client.adventures())

        if state.view is View.MAIN_MENU:
            return render.render_main_menu(self.user_id)

        if state.view is View.PARTY:
            return render.render_party(state.adventure_id, await self.client.party(state.adventure_id))

        if state.character_id is None:
            character = await self.client.my_character(self.user_id)
            if character is None:
                return render.render_no_character()
            return render.render_character(character)
        return render.render_character(await self.client.character(state.character_id))

    def _mark_connected(self) -> None:
        self.connected = True
        self.last_updated = datetime.now(timezone.utc)

    def _paint(self, text: str) -> None:
        self.display(f"{text}\n{render.render_status(self.connected, self.last_updated)}")

    def _show_error(self, message: str) -> None:
        self.error = message
        self._paint(render.render_error(message))

    def _abort(self, message: str) -> None:
        # The view did not change; a tick must not paint over the error
        self.scheduler.stop()
        self._show_error(message)


__all__ = [
    "BoardController",
    "FAILURE_MESSAGES",
    "REFRESHABLE_VIEWS",
    "Variant",
    "View",
    "ViewState",
]
