"""
Icon helpers for SR2 Interactive Map.

All icons come from qtawesome so no image assets need to be packaged.
"""

import logging
from functools import lru_cache
from typing import Dict, Optional

import qtawesome as qta  # type: ignore
from PySide6.QtGui import QColor, QIcon

logger = logging.getLogger(__name__)

# Pin icon name (persisted in PinRecord.icon) -> (label, qtawesome glyph, color)
PIN_ICONS: Dict[str, tuple[str, str, str]] = {
    "marker": ("Marker", "fa5s.map-marker-alt", "#e0474c"),
    "star": ("Favorite", "fa5s.star", "#f2c14e"),
    "flag": ("Flag", "fa5s.flag", "#4e9af2"),
    "home": ("Base", "fa5s.home", "#5cb85c"),
    "resource": ("Resource", "fa5s.gem", "#b05cf2"),
    "danger": ("Danger", "fa5s.skull", "#555555"),
    "question": ("Unknown", "fa5s.question-circle", "#f28c4e"),
}

FALLBACK_PIN_COLOR = "#e0474c"


def pin_color(icon_name: str) -> QColor:
    entry = PIN_ICONS.get(icon_name)
    return QColor(entry[2] if entry else FALLBACK_PIN_COLOR)


def pin_icon(icon_name: str) -> QIcon:
    """Return the QIcon for a persisted pin icon name."""
    entry = PIN_ICONS.get(icon_name)
    glyph = entry[1] if entry else "fa5s.map-pin"
    try:
        return QIcon(qta.icon(glyph, color=pin_color(icon_name)))  # type: ignore[arg-type]
    except Exception as e:
        logger.warning(f"Failed to load icon {glyph}: {e}")
        return QIcon()


def action_icon(glyph: str, color: Optional[QColor] = None) -> QIcon:
    """Return a qtawesome icon for buttons and menu actions."""
    try:
        if color is not None:
            return QIcon(qta.icon(glyph, color=color))  # type: ignore[arg-type]
        return QIcon(qta.icon(glyph))  # type: ignore[arg-type]
    except Exception as e:
        logger.warning(f"Failed to load icon {glyph}: {e}")
        return QIcon()


@lru_cache(maxsize=1)
def get_app_icon() -> QIcon:
    """Return the shared application icon."""
    return action_icon("fa5s.map-marked-alt", QColor("#2a9d8f"))
