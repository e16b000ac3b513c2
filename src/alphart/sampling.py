import numpy as np

# BT.709 luma weights scaled by LUMA_SCALE so floors are exact in integer arithmetic
LUMA_WEIGHTS = (2126, 7152, 722)
LUMA_SCALE = 10000
MAX_LUMINANCE = 255


def sample_indices(count: int, source_size: int) -> np.ndarray:
    """Nearest-neighbour source coordinate for each of `count` output cells: floor(i / count * source_size)."""
    if count <= 0:
        return np.zeros(0, dtype=np.int64)
    return np.arange(count, dtype=np.int64) * source_size // count


def sample_pixels(pixels: np.ndarray, cols: int, rows: int) -> np.ndarray:
    """Point-sample an (h, w, C) pixel array down to (rows, cols, 3) RGB. No averaging."""
    height, width = pixels.shape[:2]
    ys = sample_indices(rows, height)
    xs = sample_indices(cols, width)
    return np.asarray(pixels[ys[:, None], xs[None, :], :3], dtype=np.int64)


def luminance(rgb: np.ndarray) -> np.ndarray:
    """floor(0.2126*r + 0.7152*g + 0.0722*b) for an (..., 3) integer array."""
    rgb = np.asarray(rgb, dtype=np.int64)
    wr, wg, wb = LUMA_WEIGHTS
    weighted = wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2]
    return np.clip(weighted // LUMA_SCALE, 0, MAX_LUMINANCE)


def glyph_indices(lum: np.ndarray, ramp_length: int, invert: bool = False) -> np.ndarray:
    """Quantise luminance linearly into ramp_length buckets; 255 lands on the last index."""
    lum = np.asarray(lum, dtype=np.int64)
    if invert:
        lum = MAX_LUMINANCE - lum
    return lum * (ramp_length - 1) // MAX_LUMINANCE
