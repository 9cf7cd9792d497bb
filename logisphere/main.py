# main.py
"""
Launcher for LogiSphere.
Opens the main window on the welcome screen.
This file serves as the program entry point.
"""

import logging

from logisphere.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    """Create the main window and run the Tk event loop until it closes."""

    logger.info("Starting LogiSphere")
    window = MainWindow()
    window.mainloop()
    logger.info("LogiSphere closed")


if __name__ == "__main__":
    main()
