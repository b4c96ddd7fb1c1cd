import logging
from pathlib import Path

import numpy as np
from PIL import Image

from asciidither.config import ConvertConfig
from asciidither.resampling import resample
from asciidither.result import RenderResult
from asciidither.tone import tone_map

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".webp")

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> Image.Image:
    """Open and decode an image file (first frame only)."""
    with Image.open(path) as image:
        image.load()
        return image.convert("RGB")


def is_image_file(name: str | Path) -> bool:
    return Path(name).suffix.lower() in IMAGE_EXTENSIONS


def list_image_files(directory: str | Path) -> list[str]:
    """Sorted names of the image files directly inside ``directory``."""
    return sorted(p.name for p in Path(directory).iterdir() if p.is_file() and is_image_file(p.name))


def _as_rgb(image: Image.Image | np.ndarray | str | Path) -> Image.Image:
    if isinstance(image, (str, Path)):
        return load_image(image)
    if isinstance(image, np.ndarray):
        if image.dtype != np.uint8:
            raise ValueError(f"image array must be uint8, got {image.dtype}")
        image = Image.fromarray(np.ascontiguousarray(image))
    return image.convert("RGB")


def quantize(gray: np.ndarray, ramp: str) -> str:
    """Map each luminance value to a ramp character."""
    levels = len(ramp)
    indices = np.clip(np.floor(np.clip(gray, 0.0, 255.0) / 255.0 * (levels - 1) + 0.5), 0, levels - 1)
    return "".join(ramp[i] for i in indices.astype(np.intp).tolist())


def convert(image: Image.Image | np.ndarray | str | Path, config: ConvertConfig | None = None) -> RenderResult:
    """Convert an image to character art.

    Raises a ConversionError subclass when the config is out of range or the
    scaled grid would be empty. The source image is never modified.
    """
    if config is None:
        config = ConvertConfig()
    config.validate()
    ramp = config.active_ramp()

    resized = resample(_as_rgb(image), config.resolution)
    width, height = resized.size

    gray, colors = tone_map(np.asarray(resized), config.contrast, config.brightness)

    logger.debug(
        "Converting %dx%d grid: %d levels, dithering=%s", width, height, len(ramp), config.dithering.label
    )
    config.dithering.apply(gray, width, height, len(ramp))

    return RenderResult(
        width=width,
        height=height,
        chars=quantize(gray, ramp),
        colors=tuple(map(tuple, colors.tolist())),
        colored=config.colored,
    )
