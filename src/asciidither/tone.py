import numpy as np

# NTSC luma weights for R, G, B
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def adjust(values: np.ndarray, contrast: float, brightness: float) -> np.ndarray:
    """Apply contrast around mid-grey, clamp, then scale by brightness and clamp again."""
    stretched = np.clip((np.asarray(values, dtype=np.float64) - 128.0) * contrast + 128.0, 0.0, 255.0)
    return np.clip(stretched * brightness, 0.0, 255.0)


def luminance(rgb: np.ndarray) -> np.ndarray:
    """Per-pixel luma of an (..., 3) integer RGB array, as float64."""
    rgb = np.asarray(rgb, dtype=np.float64)
    wr, wg, wb = LUMA_WEIGHTS
    return wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2]


def tone_map(rgb: np.ndarray, contrast: float, brightness: float) -> tuple[np.ndarray, np.ndarray]:
    """Tone-map an (H, W, 3) RGB array.

    Returns:
        gray: flat row-major float64 luminance buffer, one value per pixel
        colors: (H*W, 3) uint8 adjusted colours, truncated towards zero
    """
    adjusted = adjust(rgb[..., :3], contrast, brightness)
    colors = adjusted.astype(np.uint8).reshape(-1, 3)
    return luminance(colors), colors
