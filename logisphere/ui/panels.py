# logisphere/ui/panels.py

import customtkinter as ctk

from logisphere.logic.content import (
    WELCOME_SUBTITLE,
    WELCOME_TIPS,
    WELCOME_TITLE,
    content_for,
    title_for,
)


def _read_only_text(parent, text: str, size: int) -> ctk.CTkTextbox:
    box = ctk.CTkTextbox(parent, font=ctk.CTkFont(family="Courier", size=size), wrap="word")
    box.insert("1.0", text)
    box.configure(state="disabled")
    return box


def build_welcome_panel(parent) -> ctk.CTkFrame:
    """Return the landing screen with the title and usage tips."""
    panel = ctk.CTkFrame(parent)
    panel.grid_columnconfigure(0, weight=1)
    panel.grid_rowconfigure(2, weight=1)

    ctk.CTkLabel(
        panel, text=WELCOME_TITLE, font=ctk.CTkFont(size=36, weight="bold")
    ).grid(row=0, column=0, padx=50, pady=(20, 0))
    ctk.CTkLabel(
        panel, text=WELCOME_SUBTITLE, font=ctk.CTkFont(size=18)
    ).grid(row=1, column=0, padx=50, pady=(0, 10))

    tips = _read_only_text(panel, WELCOME_TIPS, 14)
    tips.grid(row=2, column=0, padx=50, pady=(0, 50), sticky="nsew")
    return panel


def build_department_panel(parent, department: str) -> ctk.CTkFrame:
    """Return the static description screen for ``department``."""
    panel = ctk.CTkFrame(parent)
    panel.grid_columnconfigure(0, weight=1)
    panel.grid_rowconfigure(1, weight=1)

    ctk.CTkLabel(
        panel, text=title_for(department), font=ctk.CTkFont(size=28, weight="bold")
    ).grid(row=0, column=0, padx=40, pady=20)

    features = _read_only_text(panel, content_for(department), 16)
    features.grid(row=1, column=0, padx=40, pady=(0, 40), sticky="nsew")
    return panel
