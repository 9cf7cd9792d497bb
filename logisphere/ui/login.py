# login.py

"""
Modal login dialog shown before a department panel is opened.
The dialog blocks the caller until it is closed and reports whether
the demo credentials were entered.
"""

from __future__ import annotations

import logging

import customtkinter as ctk
from tkinter import messagebox

from logisphere.logic.access import check_credentials

logger = logging.getLogger(__name__)


class LoginDialog(ctk.CTkToplevel):
    """
    Username/password prompt for ``department``.
    After the window closes, ``succeeded`` tells the caller whether access
    was granted.
    """

    def __init__(self, parent, department: str):
        super().__init__(parent)
        self.department = department
        self.succeeded = False
        self.title(f"Login Required - {department}")
        self.resizable(False, False)

        self.username_var = ctk.StringVar()
        self.password_var = ctk.StringVar()

        form = ctk.CTkFrame(self)
        form.pack(padx=20, pady=20)

        ctk.CTkLabel(form, text="Username:").grid(row=0, column=0, padx=5, pady=5, sticky="w")
        self.username_entry = ctk.CTkEntry(form, textvariable=self.username_var, width=220)
        self.username_entry.grid(row=0, column=1, padx=5, pady=5)

        ctk.CTkLabel(form, text="Password:").grid(row=1, column=0, padx=5, pady=5, sticky="w")
        self.password_entry = ctk.CTkEntry(
            form, textvariable=self.password_var, show="*", width=220
        )
        self.password_entry.grid(row=1, column=1, padx=5, pady=5)

        buttons = ctk.CTkFrame(form, fg_color="transparent")
        buttons.grid(row=2, column=0, columnspan=2, pady=(10, 0), sticky="e")
        ctk.CTkButton(buttons, text="Login", width=90, command=self.attempt_login).pack(
            side="left", padx=5
        )
        ctk.CTkButton(buttons, text="Cancel", width=90, command=self.cancel).pack(
            side="left", padx=5
        )

        # Enter submits, Escape and the window close button cancel
        self.bind("<Return>", lambda _: self.attempt_login())
        self.bind("<Escape>", lambda _: self.cancel())
        self.protocol("WM_DELETE_WINDOW", self.cancel)

        self.transient(parent)
        self.username_entry.focus_set()
        self.wait_visibility()
        self.grab_set()  # Keep this window on top
        self.wait_window()  # Wait until this window is closed

    def attempt_login(self) -> None:
        username = self.username_var.get()
        password = self.password_var.get()

        if not check_credentials(username, password):
            self.succeeded = False
            messagebox.showerror(
                "Login Error", "Invalid username or password", parent=self
            )
            return

        logger.info("Access to %s granted", self.department)
        self.succeeded = True
        self.destroy()

    def cancel(self) -> None:
        logger.info("Login for %s cancelled", self.department)
        self.succeeded = False
        self.destroy()


def prompt_credentials(parent, department: str) -> bool:
    """
    Show the login dialog for ``department`` and return ``True`` only
    when it was closed by a successful login.
    """

    dialog = LoginDialog(parent, department)
    return dialog.succeeded
