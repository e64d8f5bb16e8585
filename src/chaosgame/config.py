"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: Canvas size, iteration limits, timings and colors live in one
   place instead of being scattered through the model and the widgets.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (icons) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    APP_ICON_PATH (str): Absolute path to the window icon.
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/chaosgame/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Paths
ASSETS_PATH: str = get_resource_path("assets")
APP_ICON_PATH: str = os.path.join(ASSETS_PATH, "sierpinski.svg")

# Canvas (pixels)
CANVAS_WIDTH: int = 500
CANVAS_HEIGHT: int = 500

# Step sequence
MAX_ITERATIONS: int = 50_000
DEFAULT_ITERATIONS: int = 50_000

# Playback
TICK_INTERVAL_MS: int = 10
MAX_TICK_INTERVAL_MS: int = 1000

# Render styles
BACKGROUND_COLOR: str = "#ffffff"
OUTLINE_COLOR: str = "red"
OUTLINE_WIDTH: float = 2.0
POINT_COLOR: str = "#000000"
POINT_RADIUS: float = 1.0
PIXEL_RADIUS: float = 0.5
ACTIVE_ORIGIN_COLOR: str = "#1f77b4"
ACTIVE_ORIGIN_RADIUS: float = 5.0
ACTIVE_LINE_COLOR: str = "#1f77b4"
ACTIVE_LINE_WIDTH: float = 1.0
ACTIVE_TARGET_COLOR: str = "#d62728"
ACTIVE_TARGET_RADIUS: float = 4.0

# Logging
LOG_FORMAT: str = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
LOG_DATE_FORMAT: str = "%H:%M:%S"
