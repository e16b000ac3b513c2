import math
import numbers
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from alphart.charsets import ASCII_RAMP
from alphart.grid import TextGrid
from alphart.sampling import glyph_indices, luminance, sample_pixels

DEFAULT_WIDTH = 120
# Monospace glyphs are roughly twice as tall as they are wide
DEFAULT_ASPECT = 0.5


class InvalidInput(ValueError):
    """Malformed render input: empty image, bad width or aspect ratio, empty ramp."""


@dataclass(frozen=True)
class RenderConfig:
    width: int = DEFAULT_WIDTH
    aspect: float = DEFAULT_ASPECT
    invert: bool = False
    ramp: Sequence[str] = ASCII_RAMP

    def __post_init__(self):
        if isinstance(self.width, bool) or not isinstance(self.width, numbers.Integral):
            raise InvalidInput(f"Width must be an integer, got {self.width!r}")
        if self.width < 1:
            raise InvalidInput(f"Width must be at least 1, got {self.width}")
        if isinstance(self.aspect, bool) or not isinstance(self.aspect, numbers.Real):
            raise InvalidInput(f"Aspect ratio must be a positive number, got {self.aspect!r}")
        if not math.isfinite(self.aspect) or self.aspect <= 0:
            raise InvalidInput(f"Aspect ratio must be a positive number, got {self.aspect!r}")
        ramp = tuple(self.ramp)
        if not ramp:
            raise InvalidInput("Glyph ramp is empty")
        for glyph in ramp:
            if not isinstance(glyph, str) or not glyph:
                raise InvalidInput(f"Glyph ramp entries must be non-empty strings, got {glyph!r}")
        object.__setattr__(self, "width", int(self.width))
        object.__setattr__(self, "aspect", float(self.aspect))
        object.__setattr__(self, "ramp", ramp)

    def grid_height(self, image_width: int, image_height: int) -> int:
        """Rows needed so the text keeps the image's proportions: floor(h / w * W * A)."""
        try:
            return math.floor(image_height * self.width * self.aspect / image_width)
        except OverflowError:
            raise InvalidInput(
                f"Grid height overflows for a {image_width}x{image_height} image "
                f"at width {self.width} and aspect {self.aspect}"
            ) from None


def _check_pixels(pixels) -> np.ndarray:
    pixels = np.asarray(pixels)
    if pixels.ndim != 3 or pixels.shape[2] < 3:
        raise InvalidInput(f"Expected an (height, width, RGB[A]) pixel array, got shape {pixels.shape}")
    height, width = pixels.shape[:2]
    if width == 0 or height == 0:
        raise InvalidInput(f"Image has zero area: {width}x{height}")
    return pixels


def render(pixels, config: RenderConfig | None = None) -> TextGrid:
    """Render decoded RGB(A) pixels as a grid of glyphs.

    Each cell takes the single nearest source pixel, converts it to BT.709
    luminance (optionally inverted) and picks the ramp glyph of matching
    density. Raises InvalidInput before any sampling if the input is malformed.
    """
    if config is None:
        config = RenderConfig()
    pixels = _check_pixels(pixels)
    height, width = pixels.shape[:2]

    rows = config.grid_height(width, height)
    lum = luminance(sample_pixels(pixels, config.width, rows))
    indices = glyph_indices(lum, len(config.ramp), invert=config.invert)

    lookup = np.array(config.ramp, dtype=object)
    lines = tuple("".join(row) for row in lookup[indices])
    return TextGrid(rows=lines, width=config.width)
