"""Header banner across the top of the main window."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import customtkinter as ctk
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


def load_header_image(path: str) -> Optional[Image.Image]:
    """Return the image at ``path`` or ``None`` if it cannot be read."""
    try:
        with Image.open(path) as img:
            img.load()
            # full in-memory copy so the file handle can be closed
            return img.copy()
    # ValueError: oversized PNG text chunks
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError, ValueError):
        logger.exception("Failed to load header image %s", path)
        return None


class HeaderBanner(ctk.CTkFrame):
    """Image stretched over the whole banner, or red error text when the image is missing."""

    def __init__(self, parent, image_path: str, width: int, height: int):
        super().__init__(parent, height=height, corner_radius=0)
        self.grid_propagate(False)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        img = load_header_image(image_path)
        self.image_loaded = img is not None

        if img is not None:
            self.image = ctk.CTkImage(light_image=img, dark_image=img, size=(width, height))
            self.label = ctk.CTkLabel(self, image=self.image, text="")
            self.label.grid(row=0, column=0, sticky="nsew")
            self.bind("<Configure>", self._on_resize)
        else:
            self.image = None
            self.label = ctk.CTkLabel(
                self,
                text=f"Error: Image '{Path(image_path).name}' not found.",
                text_color="red",
                font=ctk.CTkFont(size=24, weight="bold"),
                anchor="w",
            )
            self.label.grid(row=0, column=0, padx=50, sticky="nsew")

    def _on_resize(self, event) -> None:
        if event.width > 1 and event.height > 1:
            self.image.configure(size=(event.width, event.height))
