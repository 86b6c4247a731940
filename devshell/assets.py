"""Locates and loads game assets beneath a project's assets directory."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import BinaryIO

__all__ = ["AssetType", "AssetDatabase"]


class AssetType(enum.Enum):
    """Kinds of asset."""

    SHADER = enum.auto()
    FONT = enum.auto()
    IMAGE = enum.auto()
    MAP = enum.auto()
    SBSP = enum.auto()


_ASSET_DIRS = {
    AssetType.SHADER: "shaders",
    AssetType.FONT: "fonts",
    AssetType.IMAGE: "images",
    AssetType.MAP: "maps",
}


class AssetDatabase:
    """Resolves asset paths under ``<root>/assets``."""

    def __init__(self, root: str | Path = "") -> None:
        self.base_dir = Path(f"{root}/assets")

    def asset_path(self, asset_type: AssetType, name: str) -> Path:
        """Return the path of asset ``name`` of ``asset_type``.

        Raises ``KeyError`` for an asset type without a directory.
        """
        try:
            subdir = _ASSET_DIRS[asset_type]
        except KeyError:
            raise KeyError(f"no asset directory for {asset_type.name}") from None
        return self.base_dir / subdir / name

    def image_path(self, name: str) -> Path:
        """Return the path of image ``name``."""
        return self.asset_path(AssetType.IMAGE, name)

    def map_path(self, name: str) -> Path:
        """Return the path of map ``name``."""
        return self.asset_path(AssetType.MAP, name)

    def load_shader(self, name: str) -> str:
        """Read shader source ``name`` as text."""
        return self.asset_path(AssetType.SHADER, name).read_text()

    def load_font(self, name: str) -> bytes:
        """Read font ``name`` as bytes."""
        return self.asset_path(AssetType.FONT, name).read_bytes()

    def load_image(self, name: str) -> bytes:
        """Read image ``name`` as bytes."""
        return self.image_path(name).read_bytes()

    def open_map(self, name: str) -> BinaryIO:
        """Open map ``name`` for binary streaming; the caller closes it."""
        return self.map_path(name).open("rb")