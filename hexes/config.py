"""Validated layout settings and their on-disk persistence.

Settings live in a JSON file inside the per-user configuration directory
resolved by ``platformdirs.user_config_dir``.  Writes go to a temporary
sibling first and then replace the target, so a crash never leaves a
half-written file behind.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field

from .coords import EVEN, ODD
from .layout import Layout, Point, layout_flat, layout_pointy

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "hex_layout.json"


class OrientationName(str, Enum):
    """The two canonical hex orientations."""

    FLAT = "flat"
    POINTY = "pointy"


class OffsetParity(str, Enum):
    """Offset-coordinate parity conventions."""

    ODD = "odd"
    EVEN = "even"


_ORIENTATIONS = {
    OrientationName.FLAT: layout_flat,
    OrientationName.POINTY: layout_pointy,
}


class LayoutSettings(BaseModel):
    """Parameters from which a :class:`~hexes.layout.Layout` is built."""

    model_config = ConfigDict(extra="forbid")

    orientation: OrientationName = Field(default=OrientationName.FLAT)
    size_x: float = Field(default=10.0, gt=0.0)
    size_y: float = Field(default=10.0, gt=0.0)
    origin_x: float = Field(default=0.0)
    origin_y: float = Field(default=0.0)
    offset_parity: OffsetParity = Field(default=OffsetParity.ODD)

    @property
    def parity(self) -> int:
        """Offset parity as the ``EVEN``/``ODD`` integer the conversions expect."""

        return EVEN if self.offset_parity is OffsetParity.EVEN else ODD

    def to_layout(self) -> Layout:
        return Layout(
            _ORIENTATIONS[self.orientation],
            Point(self.size_x, self.size_y),
            Point(self.origin_x, self.origin_y),
        )

    @classmethod
    def from_layout(
        cls, layout: Layout, *, offset_parity: OffsetParity = OffsetParity.ODD
    ) -> LayoutSettings:
        for name, orientation in _ORIENTATIONS.items():
            if layout.orientation == orientation:
                break
        else:
            raise ValueError("layout orientation must be layout_flat or layout_pointy")
        return cls(
            orientation=name,
            size_x=layout.size.x,
            size_y=layout.size.y,
            origin_x=layout.origin.x,
            origin_y=layout.origin.y,
            offset_parity=offset_parity,
        )


def default_config_path() -> Path:
    """Return the per-user location of the layout settings file."""

    return Path(user_config_dir("hexes")) / CONFIG_FILENAME


def load_layout_settings(path: Path | str | None = None) -> LayoutSettings:
    """Load settings from ``path``, falling back to defaults.

    A missing file yields defaults silently; an unreadable or invalid one
    is logged and also yields defaults.
    """

    target = Path(path) if path is not None else default_config_path()
    if not target.exists():
        return LayoutSettings()
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
        return LayoutSettings.model_validate(data)
    except (OSError, ValueError) as exc:
        logger.warning("ignoring invalid layout settings in %s: %s", target, exc)
        return LayoutSettings()


def save_layout_settings(
    settings: LayoutSettings, path: Path | str | None = None
) -> Path:
    """Write ``settings`` to ``path`` atomically and return the path written."""

    target = Path(path) if path is not None else default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    temp_path = target.with_suffix(target.suffix + ".tmp")
    try:
        temp_path.write_text(
            json.dumps(settings.model_dump(mode="json"), indent=2), encoding="utf-8"
        )
        temp_path.replace(target)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
    logger.debug("saved layout settings to %s", target)
    return target


__all__ = [
    "CONFIG_FILENAME",
    "LayoutSettings",
    "OffsetParity",
    "OrientationName",
    "default_config_path",
    "load_layout_settings",
    "save_layout_settings",
]
