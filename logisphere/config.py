"""Configuration options for the application."""

import os

APP_TITLE = "LogiSphere - Supply Chain Management"

# Banner shown across the top third of the main window
HEADER_IMAGE_PATH = "LogiSphere.png"

# Allow users to control the CustomTkinter theme ("light" or "dark").
APPEARANCE_MODE = os.getenv("APPEARANCE_MODE", "light")

# --- Demo login ---
# Single hardcoded pair accepted by every department gate. Placeholder only.
DEMO_USERNAME = "admin"
DEMO_PASSWORD = "pass123"
