"""Main LogiSphere window: header, department buttons and swappable screens."""

from __future__ import annotations

import logging
from typing import Callable, Optional

import customtkinter as ctk
import tkinter as tk

from logisphere.config import APP_TITLE, APPEARANCE_MODE, HEADER_IMAGE_PATH
from logisphere.logic.content import DEPARTMENTS, WELCOME_SCREEN
from logisphere.ui.header import HeaderBanner
from logisphere.ui.login import prompt_credentials
from logisphere.ui.panels import build_department_panel, build_welcome_panel
from logisphere.ui.screens import ScreenStack

logger = logging.getLogger(__name__)

# gate(parent, department) -> access granted
Gate = Callable[[tk.Misc, str], bool]


class MainWindow(ctk.CTk):
    def __init__(
        self,
        gate: Gate = prompt_credentials,
        image_path: str = HEADER_IMAGE_PATH,
    ):
        super().__init__()
        self.gate = gate
        self.title(APP_TITLE)
        ctk.set_appearance_mode(APPEARANCE_MODE)

        screen_w = self.winfo_screenwidth()
        screen_h = self.winfo_screenheight()
        self.geometry(f"{screen_w}x{screen_h}")
        if hasattr(self, "state"):
            try:
                self.state("zoomed")
            except tk.TclError:
                # "zoomed" is not supported by every window manager
                pass
        self.protocol("WM_DELETE_WINDOW", self.exit_app)

        self.font_buttons = ctk.CTkFont(size=16, weight="bold")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_menu()

        # --- Top third: header image ---
        self.header = HeaderBanner(self, image_path, width=screen_w, height=screen_h // 3)
        self.header.grid(row=0, column=0, sticky="ew")

        # --- Button row ---
        button_row = ctk.CTkFrame(self, fg_color="transparent")
        button_row.grid(row=1, column=0, padx=10, pady=10)
        self.buttons = {}
        home_btn = ctk.CTkButton(
            button_row, text="Home", font=self.font_buttons, command=self.go_home
        )
        home_btn.pack(side="left", padx=8, pady=5)
        self.buttons["Home"] = home_btn
        for department in DEPARTMENTS:
            btn = ctk.CTkButton(
                button_row,
                text=department,
                font=self.font_buttons,
                command=lambda d=department: self.select_department(d),
            )
            btn.pack(side="left", padx=8, pady=5)
            self.buttons[department] = btn

        # --- Swappable content ---
        self.screens = ScreenStack(self, fg_color="transparent")
        self.screens.grid(row=2, column=0, padx=10, pady=(0, 10), sticky="nsew")
        self.screens.register(WELCOME_SCREEN, build_welcome_panel(self.screens))
        for department in DEPARTMENTS:
            self.screens.register(department, build_department_panel(self.screens, department))

        self.screens.show(WELCOME_SCREEN)

    def _build_menu(self) -> None:
        menubar = tk.Menu(self)

        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label="Exit", command=self.exit_app)
        menubar.add_cascade(label="File", menu=file_menu)

        # Placeholder entries, no behaviour yet
        options_menu = tk.Menu(menubar, tearoff=0)
        options_menu.add_command(label="Settings")
        options_menu.add_command(label="Preferences")
        menubar.add_cascade(label="Options", menu=options_menu)

        self.configure(menu=menubar)
        self.menubar = menubar

    # ------------------------------ Navigation ------------------------------
    @property
    def current_screen(self) -> Optional[str]:
        return self.screens.current

    def select_department(self, department: str) -> bool:
        """Ask for credentials and switch to ``department`` if they are accepted."""
        granted = self.gate(self, department)
        if granted:
            self.screens.show(department)
        else:
            logger.info("Access to %s denied, staying on %s", department, self.current_screen)
        return granted

    def go_home(self) -> None:
        self.screens.show(WELCOME_SCREEN)

    def exit_app(self) -> None:
        logger.info("Exiting application")
        self.destroy()
