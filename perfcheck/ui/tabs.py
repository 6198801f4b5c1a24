#!/usr/bin/env python3
"""
Tab navigation state for the results viewer.
"""

import curses
from typing import List, NamedTuple, Optional, Sequence

from ..modules.base import CommandResult

STATE_RUNNING = "running"
STATE_QUITTING = "quitting"

ACTION_NEXT = "next"
ACTION_PREVIOUS = "previous"
ACTION_QUIT = "quit"

KEY_ESCAPE = 27
KEY_TAB = 9

KEY_ACTIONS = {
    ord('l'): ACTION_NEXT,
    ord('L'): ACTION_NEXT,
    curses.KEY_RIGHT: ACTION_NEXT,
    KEY_TAB: ACTION_NEXT,
    ord('h'): ACTION_PREVIOUS,
    ord('H'): ACTION_PREVIOUS,
    curses.KEY_LEFT: ACTION_PREVIOUS,
    curses.KEY_BTAB: ACTION_PREVIOUS,
    ord('q'): ACTION_QUIT,
    ord('Q'): ACTION_QUIT,
    KEY_ESCAPE: ACTION_QUIT,
}


def action_for_key(key: int) -> Optional[str]:
    """Map a curses key code to a navigation action, or None to ignore it."""
    return KEY_ACTIONS.get(key)


class RenderModel(NamedTuple):
    """Everything the view needs for one redraw."""

    labels: List[str]
    selected: int
    content: str


class TabNavigation:
    """Selected-tab index over a fixed, non-empty list of results."""

    def __init__(self, results: Sequence[CommandResult]):
        if not results:
            raise ValueError("TabNavigation requires at least one result")
        self.results = list(results)
        self.index = 0
        self.state = STATE_RUNNING

    @property
    def running(self) -> bool:
        return self.state == STATE_RUNNING

    def next(self):
        """Select the next tab, wrapping from last to first."""
        if self.running:
            self.index = (self.index + 1) % len(self.results)

    def previous(self):
        """Select the previous tab, wrapping from first to last."""
        if self.running:
            count = len(self.results)
            self.index = (self.index + count - 1) % count

    def quit(self):
        self.state = STATE_QUITTING

    def apply(self, action: Optional[str]) -> bool:
        """
        Apply a navigation action.

        Returns:
            True if the action was recognised and accepted
        """
        if not self.running or action is None:
            return False
        if action == ACTION_NEXT:
            self.next()
        elif action == ACTION_PREVIOUS:
            self.previous()
        elif action == ACTION_QUIT:
            self.quit()
        else:
            return False
        return True

    def handle_key(self, key: int) -> bool:
        return self.apply(action_for_key(key))

    def current(self) -> CommandResult:
        return self.results[self.index]

    def snapshot(self) -> RenderModel:
        return RenderModel(
            labels=[result.name for result in self.results],
            selected=self.index,
            content=self.current().output
        )
