"""
Configuration & Path Management
===============================
Central registry for file paths and the layout/style constants of the map.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_MAP_PATH (str): Absolute path to the bundled skill map document.
"""
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/skillmap/
    project_root: Path = Path(__file__).parent.parent.parent
    return os.path.join(str(project_root), relative_path)


ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_MAP_PATH: str = os.path.join(ASSETS_PATH, "skill_map.json")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")

# ---- Layout ----
NODE_RADIUS: float = 55.0
TOPIC_ROW_Y: float = 100.0
SECTION_SPACING: float = 150.0

# ---- Node style ----
ACTIVE_COLOR: str = "#518ab2"
AVAILABLE_COLOR: str = "#99bcd6"
LOCKED_COLOR: str = "#D3D3D3"
HOVER_COLOR: str = "#FFFF00"
BORDER_COLOR: str = "black"
BORDER_WIDTH: float = 1.0
LABEL_COLOR: str = "black"
LABEL_FONT_PX: int = 20
HOVER_LABEL_FONT_PX: int = 16

# ---- Edge style ----
SOLID_EDGE_COLOR: str = "black"
ONE_WAY_EDGE_COLOR: str = "red"
ONE_WAY_EDGE_DASH: tuple[float, ...] = (5.0, 5.0)
ARROW_TIP_OFFSET: float = 15.0
ARROW_LENGTH: float = 20.0
ARROW_SPREAD_DEG: float = 36.0
