"""Image holder with Gaussian and box blurs, salt-and-pepper noise and greyscale conversion."""

from __future__ import annotations

import os
from typing import Any, Union

import numpy as np
from PIL import Image

_SMALL_GAUSSIAN_KERNELS = {
    1: (1.0,),
    3: (0.25, 0.5, 0.25),
    5: (0.0625, 0.25, 0.375, 0.25, 0.0625),
    7: (0.03125, 0.109375, 0.21875, 0.28125, 0.21875, 0.109375, 0.03125),
}

_SUPPORTED_MODES = ("L", "I;16", "RGB", "RGBA")

ImageSource = Union[None, "FImage", Image.Image, np.ndarray, str, os.PathLike]

_rng = np.random.default_rng()


def gaussian_kernel(ksize: int) -> np.ndarray:
    """Return the normalised 1-D Gaussian kernel of odd length ``ksize``.

    The standard deviation is derived from the size, as a blur with
    sigma left at zero does.
    """
    if isinstance(ksize, bool) or not isinstance(ksize, int):
        raise TypeError(f"kernel size must be an int, got {type(ksize).__name__}")
    if ksize <= 0 or ksize % 2 == 0:
        raise ValueError(f"kernel size must be a positive odd number, got {ksize}")
    if ksize in _SMALL_GAUSSIAN_KERNELS:
        return np.array(_SMALL_GAUSSIAN_KERNELS[ksize], dtype=np.float64)
    sigma = 0.3 * ((ksize - 1) * 0.5 - 1) + 0.8
    offsets = np.arange(ksize, dtype=np.float64) - (ksize - 1) / 2
    kernel = np.exp(-(offsets**2) / (2 * sigma * sigma))
    return kernel / kernel.sum()


def _correlate_axis(data: np.ndarray, kernel: np.ndarray, axis: int) -> np.ndarray:
    """Correlate ``data`` with ``kernel`` along ``axis``, mirroring at the borders."""
    values = data.astype(np.float64)
    size = len(kernel)
    if size == 1:
        return values * kernel[0]
    anchor = size // 2
    padding = [(0, 0)] * values.ndim
    padding[axis] = (anchor, size - 1 - anchor)
    padded = np.pad(values, padding, mode="reflect")
    length = values.shape[axis]
    result = np.zeros_like(values)
    for offset, weight in enumerate(kernel):
        result += weight * np.take(padded, np.arange(offset, offset + length), axis=axis)
    return result


def _saturate(values: np.ndarray, dtype: np.dtype) -> np.ndarray:
    info = np.iinfo(dtype)
    return np.clip(np.rint(values), info.min, info.max).astype(dtype)


def _mode_of_array(array: np.ndarray) -> str:
    if array.ndim == 2 and array.dtype == np.uint8:
        return "L"
    if array.ndim == 2 and array.dtype == np.uint16:
        return "I;16"
    if array.ndim == 3 and array.dtype == np.uint8 and array.shape[2] == 3:
        return "RGB"
    if array.ndim == 3 and array.dtype == np.uint8 and array.shape[2] == 4:
        return "RGBA"
    raise ValueError(f"unsupported image array: shape {array.shape}, dtype {array.dtype}")


def _array_from_pil(image: Image.Image, from_file: bool) -> np.ndarray:
    if image.mode == "1":
        image = image.convert("L")
    elif image.mode not in _SUPPORTED_MODES:
        if not from_file:
            raise ValueError(f"unsupported image mode: {image.mode}")
        image = image.convert("RGBA")
    return np.array(image)


def _require_radius(radius: int) -> None:
    if radius < 0:
        raise ValueError(f"the blur radius must be greater than or equal to 0, got {radius}")


class FImage:
    """An 8-bit greyscale, 16-bit greyscale, RGB or RGBA image that is filtered in place.

    Every filter returns the image itself so that calls can be chained.
    """

    def __init__(self, source: ImageSource = None, format: str | None = None) -> None:
        if source is None:
            self._data = np.zeros((0, 0), dtype=np.uint8)
        elif isinstance(source, FImage):
            self._data = source._data.copy()
        elif isinstance(source, Image.Image):
            self._data = _array_from_pil(source, from_file=False)
        elif isinstance(source, np.ndarray):
            _mode_of_array(source)
            self._data = source.copy()
        elif isinstance(source, (str, os.PathLike)):
            formats = None if format is None else [format]
            with Image.open(source, formats=formats) as image:
                image.load()
                self._data = _array_from_pil(image, from_file=True)
        else:
            raise TypeError(f"cannot build an image from {type(source).__name__}")

    @property
    def mode(self) -> str:
        return _mode_of_array(self._data)

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def is_null(self) -> bool:
        return self._data.size == 0

    def mat(self) -> np.ndarray:
        """Return a copy of the pixel array (rows, columns[, channels])."""
        return self._data.copy()

    def to_pil(self) -> Image.Image:
        """Return the image as a new PIL image."""
        if self.is_null:
            return Image.new("L", (0, 0))
        return Image.fromarray(np.ascontiguousarray(self._data))

    def _filter(self, kernel_x: np.ndarray | None, kernel_y: np.ndarray | None) -> FImage:
        if self.is_null:
            return self
        values: Any = self._data
        if kernel_x is not None:
            values = _correlate_axis(values, kernel_x, axis=1)
        if kernel_y is not None:
            values = _correlate_axis(values, kernel_y, axis=0)
        self._data = _saturate(values, self._data.dtype)
        return self

    def gaussian_blur(self, radius: int = 30) -> FImage:
        _require_radius(radius)
        if radius == 0:
            return self
        kernel = gaussian_kernel(radius * 2 + 1)
        return self._filter(kernel, kernel)

    def horizontal_gaussian_blur(self, radius: int = 30) -> FImage:
        _require_radius(radius)
        if radius == 0:
            return self
        return self._filter(gaussian_kernel(radius * 2 + 1), None)

    def vertical_gaussian_blur(self, radius: int = 30) -> FImage:
        _require_radius(radius)
        if radius == 0:
            return self
        return self._filter(None, gaussian_kernel(radius * 2 + 1))

    @staticmethod
    def _box(radius: int) -> np.ndarray:
        return np.full(radius, 1.0 / radius, dtype=np.float64)

    def uniform_blur(self, radius: int = 30) -> FImage:
        """Average over a ``radius`` x ``radius`` box."""
        _require_radius(radius)
        if radius == 0:
            return self
        box = self._box(radius)
        return self._filter(box, box)

    def horizontal_uniform_blur(self, radius: int = 30) -> FImage:
        _require_radius(radius)
        if radius == 0:
            return self
        return self._filter(self._box(radius), None)

    def vertical_uniform_blur(self, radius: int = 30) -> FImage:
        _require_radius(radius)
        if radius == 0:
            return self
        return self._filter(None, self._box(radius))

    def _black_and_white(self) -> tuple[Any, Any]:
        mode = self.mode
        if mode == "L":
            return 0, 255
        if mode == "I;16":
            return 0, 65535
        if mode == "RGB":
            return (0, 0, 0), (255, 255, 255)
        return (0, 0, 0, 255), (255, 255, 255, 255)

    def impulse_noise(self, noise_ratio: float = 0.3) -> FImage:
        """Turn a share ``noise_ratio`` of the pixels black or white at random.

        A ratio of 1 or more replaces every pixel.
        """
        if noise_ratio < 0.0:
            raise ValueError(f"noise ratio must be greater than or equal to 0, got {noise_ratio}")
        if noise_ratio == 0.0 or self.is_null:
            return self
        shape = self._data.shape[:2]
        if noise_ratio >= 1.0:
            hit = np.ones(shape, dtype=bool)
        else:
            hit = _rng.random(shape) <= noise_ratio
        pick_black = _rng.integers(0, 2, size=shape).astype(bool)
        black, white = self._black_and_white()
        self._data[hit & pick_black] = black
        self._data[hit & ~pick_black] = white
        return self

    def grey_scale(self) -> FImage:
        """Convert to 8-bit single-channel greyscale."""
        mode = self.mode
        if mode == "L":
            return self
        if mode == "I;16":
            self._data = np.rint(self._data.astype(np.float64) / 257).astype(np.uint8)
            return self
        channels = self._data.astype(np.int32)
        red, green, blue = channels[..., 0], channels[..., 1], channels[..., 2]
        self._data = ((red * 11 + green * 16 + blue * 5) // 32).astype(np.uint8)
        return self

    def __repr__(self) -> str:
        return f"FImage(mode={self.mode!r}, size={self.size})"


def load_image(path: str | os.PathLike) -> FImage:
    """Load an image file; modes other than greyscale, RGB and RGBA become RGBA."""
    return FImage(path)