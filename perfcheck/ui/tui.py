#!/usr/bin/env python3
"""
Curses viewer showing one tab per command result.
"""

import curses
import curses.textpad
import locale
import logging
from typing import List

from ..modules.base import CommandResult
from .tabs import TabNavigation

logger = logging.getLogger("perfcheck.tui")

NOTE_TEXT = "Perf 60s cmds list"
NOTE_WIDTH = 20

PAIR_TAB = 1
PAIR_TAB_SELECTED = 2
PAIR_BORDER = 3
PAIR_FOOTER = 4

SCROLL_KEYS = {
    curses.KEY_UP, ord('k'), ord('K'),
    curses.KEY_DOWN, ord('j'), ord('J'),
    curses.KEY_PPAGE, curses.KEY_NPAGE,
    curses.KEY_HOME, curses.KEY_END,
}


class ResultsTUI:
    """Tabbed viewer over a finished list of command results."""

    def __init__(self, results: List[CommandResult], use_ascii: bool = False):
        self.navigation = TabNavigation(results)
        self.scroll_offset = 0
        self.use_unicode = not use_ascii and self.check_unicode_support()

    def check_unicode_support(self):
        """Check if the terminal supports unicode characters."""
        try:
            locale_encoding = locale.getpreferredencoding()
            return locale_encoding.lower() in ('utf-8', 'utf8')
        except Exception:
            return False

    def footer_text(self):
        if self.use_unicode:
            return "[◄ ► / h l] to change tab | [▲ ▼ / k j] to scroll | Press q to quit"
        return "[<- -> / h l] to change tab | [Up Down / k j] to scroll | Press q to quit"

    def run(self):
        """Run the viewer until the user quits."""
        return curses.wrapper(self._run_ui)

    def _run_ui(self, stdscr):
        """Internal method to run the UI with curses."""
        curses.curs_set(0)  # Hide cursor
        stdscr.timeout(-1)  # Block until a key arrives
        stdscr.keypad(True)
        self.setup_colors()

        while self.navigation.running:
            self.draw(stdscr)
            self.process_input(stdscr)

    def setup_colors(self):
        curses.start_color()
        curses.init_pair(PAIR_TAB, curses.COLOR_WHITE, curses.COLOR_BLACK)
        curses.init_pair(PAIR_TAB_SELECTED, curses.COLOR_BLACK, curses.COLOR_GREEN)
        curses.init_pair(PAIR_BORDER, curses.COLOR_GREEN, curses.COLOR_BLACK)
        curses.init_pair(PAIR_FOOTER, curses.COLOR_CYAN, curses.COLOR_BLACK)

    def process_input(self, stdscr):
        """Read one key and apply it to the scroll position or the tab selection."""
        key = stdscr.getch()

        if key in SCROLL_KEYS:
            h, _ = stdscr.getmaxyx()
            self.scroll(key, self.pane_height(h))
            return

        previous_index = self.navigation.index
        self.navigation.handle_key(key)
        if self.navigation.index != previous_index:
            self.scroll_offset = 0

    def scroll(self, key, page):
        """Move the content pane; the offset is clamped when drawn."""
        total = len(self.navigation.current().output.splitlines())
        last = max(0, total - page)

        if key in (curses.KEY_UP, ord('k'), ord('K')):
            self.scroll_offset = max(0, self.scroll_offset - 1)
        elif key in (curses.KEY_DOWN, ord('j'), ord('J')):
            self.scroll_offset = min(last, self.scroll_offset + 1)
        elif key == curses.KEY_PPAGE:
            self.scroll_offset = max(0, self.scroll_offset - page)
        elif key == curses.KEY_NPAGE:
            self.scroll_offset = min(last, self.scroll_offset + page)
        elif key == curses.KEY_HOME:
            self.scroll_offset = 0
        elif key == curses.KEY_END:
            self.scroll_offset = last

    @staticmethod
    def pane_height(h):
        # Tab bar, footer and the two border rows
        return max(1, h - 4)

    def draw(self, stdscr):
        stdscr.erase()
        h, w = stdscr.getmaxyx()
        model = self.navigation.snapshot()

        self.draw_tab_bar(stdscr, model.labels, model.selected, w - NOTE_WIDTH)
        self.draw_note(stdscr, w)
        self.draw_content(stdscr, model.content, h, w)
        self.draw_footer(stdscr, h, w)
        stdscr.refresh()

    def draw_tab_bar(self, stdscr, labels, selected, width):
        """Draw the tab titles, shifting left so the selected one stays visible."""
        if width <= 0:
            return

        segments = []
        x = 0
        for label in labels:
            text = f" {label} "
            segments.append((x, text))
            x += len(text) + 1  # Divider

        sel_start, sel_text = segments[selected]
        shift = min(sel_start, max(0, sel_start + len(sel_text) - width))

        for i, (start, text) in enumerate(segments):
            col = start - shift
            if col < 0 or col >= width:
                continue
            visible = text[:width - col]
            pair = PAIR_TAB_SELECTED if i == selected else PAIR_TAB
            attrs = curses.color_pair(pair)
            if i == selected:
                attrs |= curses.A_BOLD
            try:
                stdscr.addstr(0, col, visible, attrs)
                if col + len(text) < width:
                    stdscr.addstr(0, col + len(text), "|")
            except curses.error:
                pass

    def draw_note(self, stdscr, w):
        if w <= NOTE_WIDTH:
            return
        try:
            stdscr.addstr(0, w - NOTE_WIDTH, NOTE_TEXT[:NOTE_WIDTH - 1], curses.A_DIM)
        except curses.error:
            pass

    def draw_content(self, stdscr, content, h, w):
        """Draw the bordered pane holding the selected command's output."""
        if h < 4 or w < 4:
            return

        top, bottom = 1, h - 2
        stdscr.attron(curses.color_pair(PAIR_BORDER))
        try:
            curses.textpad.rectangle(stdscr, top, 0, bottom, w - 1)
        except curses.error:
            pass
        stdscr.attroff(curses.color_pair(PAIR_BORDER))

        lines = content.splitlines()
        page = self.pane_height(h)
        self.scroll_offset = min(self.scroll_offset, max(0, len(lines) - page))
        inner_width = max(0, w - 4)  # Border plus one column of padding each side

        for row, line in enumerate(lines[self.scroll_offset:self.scroll_offset + page]):
            try:
                stdscr.addstr(top + 1 + row, 2, line[:inner_width])
            except curses.error:
                # Wide characters can still overflow the last column
                pass

    def draw_footer(self, stdscr, h, w):
        text = self.footer_text()[:max(0, w - 1)]
        try:
            stdscr.addstr(h - 1, max(0, (w - len(text)) // 2), text, curses.color_pair(PAIR_FOOTER))
        except curses.error:
            pass
