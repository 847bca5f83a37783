"""Asset loading service.

Front ends register an AssetLoader in the service container. The bundled
FileAssetLoader reads Netpbm images (P3 text and P6 binary), which need
nothing beyond numpy to decode.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .renderable import Bitmap


class LoadError(Exception):
    """Raised when an asset cannot be loaded or decoded."""


class ResourceNotFoundError(LoadError):
    """Raised when the requested resource does not exist at the given path."""


class AssetLoader(ABC):
    """Service used for loading assets such as bitmap images."""

    @abstractmethod
    def load_bitmap(self, path: str) -> Bitmap:
        """Load a bitmap from the specified path.

        Raises:
            ResourceNotFoundError: If nothing exists at the path
            LoadError: For any other failure
        """


class FileAssetLoader(AssetLoader):
    """Loads Netpbm bitmaps from the filesystem, with caching."""

    def __init__(self, root: Optional[Union[str, Path]] = None):
        self.root = Path(root) if root is not None else Path.cwd()
        self._cache: dict[str, Bitmap] = {}

    def resolve(self, path: str) -> Path:
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.root / candidate
        return candidate

    def load_bitmap(self, path: str) -> Bitmap:
        if path in self._cache:
            return self._cache[path].copy()

        file_path = self.resolve(path)
        if not file_path.is_file():
            raise ResourceNotFoundError(f"Asset not found: {file_path}")

        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise LoadError(f"Could not read {file_path}: {e}") from e

        bitmap = decode_netpbm(data, source=str(file_path))
        self._cache[path] = bitmap
        return bitmap.copy()

    def clear_cache(self) -> None:
        self._cache.clear()


def _read_header(data: bytes, count: int, source: str) -> tuple[list[bytes], int]:
    """Read whitespace-separated header tokens, skipping '#' comments.

    Returns:
        The tokens and the offset just past the last token
    """
    tokens: list[bytes] = []
    index = 0
    length = len(data)
    while len(tokens) < count:
        while index < length and data[index:index + 1].isspace():
            index += 1
        if index >= length:
            raise LoadError(f"Truncated image header in {source}")
        if data[index:index + 1] == b"#":
            while index < length and data[index:index + 1] not in (b"\n", b"\r"):
                index += 1
            continue
        start = index
        while index < length and not data[index:index + 1].isspace():
            index += 1
        tokens.append(data[start:index])
    return tokens, index


def decode_netpbm(data: bytes, source: str = "<bytes>") -> Bitmap:
    """Decode a P3 or P6 image into a Bitmap, scaling samples to 0-255.

    Raises:
        LoadError: If the data is not a valid P3/P6 image
    """
    tokens, offset = _read_header(data, 4, source)
    magic = tokens[0]
    if magic not in (b"P3", b"P6"):
        raise LoadError(f"Unsupported image format {magic!r} in {source}")

    try:
        width, height, max_value = (int(token) for token in tokens[1:4])
    except ValueError as e:
        raise LoadError(f"Invalid image header in {source}: {e}") from e
    if width <= 0 or height <= 0 or not 0 < max_value < 65536:
        raise LoadError(f"Invalid image dimensions in {source}: {width}x{height}, max {max_value}")

    sample_count = width * height * 3

    if magic == b"P3":
        text = b"\n".join(line.split(b"#", 1)[0] for line in data[offset:].splitlines())
        try:
            samples = np.array([int(token) for token in text.split()], dtype=np.int64)
        except ValueError as e:
            raise LoadError(f"Invalid pixel data in {source}: {e}") from e
    else:
        # Exactly one whitespace byte separates the header from the raster
        raster = data[offset + 1:]
        dtype = np.dtype(">u2") if max_value > 255 else np.dtype("u1")
        if len(raster) < sample_count * dtype.itemsize:
            raise LoadError(f"Truncated pixel data in {source}")
        samples = np.frombuffer(raster, dtype=dtype, count=sample_count).astype(np.int64)

    if samples.size != sample_count:
        raise LoadError(f"Expected {sample_count} samples in {source}, found {samples.size}")
    if samples.min() < 0 or samples.max() > max_value:
        raise LoadError(f"Pixel values out of range in {source}")

    if max_value != 255:
        samples = samples * 255 // max_value

    return Bitmap(width, height, samples.reshape(height, width, 3).astype(np.uint8))
