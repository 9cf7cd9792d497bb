"""Stack of named screens sharing one content area."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

import customtkinter as ctk

logger = logging.getLogger(__name__)


class ScreenStack(ctk.CTkFrame):
    """
    Every registered screen is gridded into the same cell; :meth:`show`
    raises one of them so exactly one is visible at a time.
    """

    def __init__(self, parent, **kwargs):
        super().__init__(parent, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)
        self._screens: Dict[str, ctk.CTkFrame] = {}
        self.current: Optional[str] = None

    def register(self, name: str, frame: ctk.CTkFrame) -> None:
        if name in self._screens:
            raise ValueError(f"Screen {name!r} is already registered")
        frame.grid(row=0, column=0, sticky="nsew")
        self._screens[name] = frame

    def show(self, name: str) -> None:
        """Raise the screen registered as ``name``."""
        frame = self._screens[name]
        frame.tkraise()
        if name != self.current:
            logger.info("Showing screen %s", name)
        self.current = name

    def names(self) -> List[str]:
        return list(self._screens)
