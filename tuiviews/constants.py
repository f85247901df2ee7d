"""Alignment and orientation values shared by widgets and layouts."""

import enum


class Alignment(enum.IntFlag):
    """Horizontal and vertical alignment bits; combine with ``|``."""

    HALIGN_LEFT = 1
    HALIGN_CENTER = 2
    HALIGN_RIGHT = 4
    VALIGN_TOP = 8
    VALIGN_CENTER = 16
    VALIGN_BOTTOM = 32

    BEGIN = HALIGN_LEFT | VALIGN_TOP
    END = HALIGN_RIGHT | VALIGN_BOTTOM
    MIDDLE = HALIGN_CENTER | VALIGN_CENTER


class Orientation(enum.IntEnum):
    """Direction in which a layout arranges its children."""

    HORIZONTAL = 0
    VERTICAL = 1