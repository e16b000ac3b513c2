from pathlib import Path

import numpy as np
from PIL import Image

from alphart.renderer import RenderConfig, render

DEFAULT_FILENAME = "ascii_art.txt"


def image_to_ascii(image: Image.Image | str | Path, config: RenderConfig | None = None) -> str:
    if not isinstance(image, Image.Image):
        image = Image.open(image)
    # Alpha is dropped, not composited
    image = image.convert("RGB")
    return str(render(np.asarray(image), config))


def save_ascii(text: str, path: str | Path = DEFAULT_FILENAME) -> Path:
    """Write rendered art to a plain-text file and return its path."""
    if not text:
        raise ValueError("No ASCII art to save")
    path = Path(path)
    path.write_text(text, encoding="utf-8")
    return path
