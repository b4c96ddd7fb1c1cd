import logging

from PIL import Image

from asciidither.errors import ImageTooSmall

# Terminal cells are roughly twice as tall as wide; halve the row count so the
# output isn't stretched vertically.
CELL_ASPECT = 0.5

logger = logging.getLogger(__name__)


def target_size(width: int, height: int, resolution: float) -> tuple[int, int]:
    """Character grid size for a source image scaled by ``resolution``.

    The aspect correction never collapses a row that the scaled image still
    has, so a 100x100 image at resolution 0.01 gives a single cell. Any
    source with 1 <= height * resolution < 2 therefore gets one row, where a
    plain floor of height * resolution * 0.5 would leave none.
    """
    cols = int(width * resolution)
    rows = int(height * resolution * CELL_ASPECT)
    if rows < 1:
        rows = min(1, int(height * resolution))
    if cols < 1 or rows < 1:
        raise ImageTooSmall(cols, rows)
    return cols, rows


def resample(image: Image.Image, resolution: float) -> Image.Image:
    """Lanczos-downscale an image to its character grid size."""
    cols, rows = target_size(image.width, image.height, resolution)
    logger.debug("Resampling %dx%d -> %dx%d", image.width, image.height, cols, rows)
    return image.resize((cols, rows), Image.LANCZOS)
