import math
from enum import Enum

import numpy as np

# Bayer index matrices, normalised to (entry + 0.5) / N**2 so every threshold
# sits strictly inside (0, 1).
_BAYER_2X2 = (np.array([[0, 2], [3, 1]], dtype=np.float64) + 0.5) / 4.0
_BAYER_4X4 = (
    np.array(
        [
            [0, 8, 2, 10],
            [12, 4, 14, 6],
            [3, 11, 1, 9],
            [15, 7, 13, 5],
        ],
        dtype=np.float64,
    )
    + 0.5
) / 16.0

# Neighbour search order for the Riemersma walk as (dy, dx):
# S, E, N, W, SE, SW, NW, NE
_WALK_DIRECTIONS = [
    (1, 0),
    (0, 1),
    (-1, 0),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, -1),
    (-1, 1),
]


class Dithering(Enum):
    NONE = "None"
    FLOYD_STEINBERG = "FS"
    ATKINSON = "Atkinson"
    RIEMERSMA = "Riemersma"
    ORDERED_2X2 = "Ord2x2"
    ORDERED_4X4 = "Ord4x4"
    THRESHOLD = "Thresh"

    @property
    def label(self) -> str:
        return self.value

    def next(self) -> "Dithering":
        members = list(Dithering)
        return members[(members.index(self) + 1) % len(members)]

    @classmethod
    def parse(cls, name: str) -> "Dithering":
        key = name.strip().lower().replace("-", "_")
        for member in cls:
            if key in (member.name.lower(), member.value.lower()):
                return member
        raise ValueError(f"Unknown dithering strategy: {name!r}")

    def apply(self, gray: np.ndarray, width: int, height: int, levels: int) -> np.ndarray:
        """Dither a flat row-major float64 luminance buffer in place and return it."""
        if self is Dithering.NONE:
            return gray
        _STRATEGIES[self](gray, width, height, levels)
        return gray


def _round(value: float) -> float:
    """Round half away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _round_array(values: np.ndarray) -> np.ndarray:
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


def _step(levels: int) -> float:
    return 255.0 / (levels - 1)


def floyd_steinberg(gray: np.ndarray, width: int, height: int, levels: int) -> None:
    scale = _step(levels)
    img = gray.tolist()

    for y in range(height):
        row = y * width
        below = row + width
        for x in range(width):
            i = row + x
            old = img[i]
            new = _round(old / scale) * scale
            err = old - new
            img[i] = new

            if x + 1 < width:
                img[i + 1] += err * 7.0 / 16.0
            if y + 1 < height:
                if x > 0:
                    img[below + x - 1] += err * 3.0 / 16.0
                img[below + x] += err * 5.0 / 16.0
                if x + 1 < width:
                    img[below + x + 1] += err * 1.0 / 16.0

    gray[:] = np.clip(img, 0.0, 255.0)


def atkinson(gray: np.ndarray, width: int, height: int, levels: int) -> None:
    """Atkinson diffusion: six neighbours get 1/8 of the error each, the other 2/8 is dropped."""
    scale = _step(levels)
    img = gray.tolist()

    for y in range(height):
        row = y * width
        for x in range(width):
            i = row + x
            old = img[i]
            new = _round(old / scale) * scale
            frac = (old - new) / 8.0
            img[i] = new

            if x + 1 < width:
                img[i + 1] += frac
            if x + 2 < width:
                img[i + 2] += frac
            if y + 1 < height:
                below = i + width
                if x > 0:
                    img[below - 1] += frac
                img[below] += frac
                if x + 1 < width:
                    img[below + 1] += frac
            if y + 2 < height:
                img[i + 2 * width] += frac

    gray[:] = np.clip(img, 0.0, 255.0)


def riemersma_path(width: int, height: int) -> list[int]:
    """Flat indices visited by the greedy 8-connected walk starting at (0, 0).

    The walk stops as soon as no unvisited neighbour is left, so it may end
    before covering every cell.
    """
    visited = [False] * (width * height)
    row, col = 0, 0
    visited[0] = True
    path = [0]

    while True:
        for dy, dx in _WALK_DIRECTIONS:
            nr, nc = row + dy, col + dx
            if 0 <= nr < height and 0 <= nc < width and not visited[nr * width + nc]:
                row, col = nr, nc
                break
        else:
            return path
        idx = row * width + col
        visited[idx] = True
        path.append(idx)


def riemersma(gray: np.ndarray, width: int, height: int, levels: int) -> None:
    """Carry a single running error along the greedy walk; cells off the walk are only clamped."""
    scale = _step(levels)
    img = gray.tolist()
    err = 0.0

    for idx in riemersma_path(width, height):
        old = img[idx] + err
        new = _round(old / scale) * scale
        err = old - new
        img[idx] = new

    gray[:] = np.clip(img, 0.0, 255.0)


def _ordered(gray: np.ndarray, width: int, height: int, levels: int, matrix: np.ndarray) -> None:
    scale = _step(levels)
    n = matrix.shape[0]
    ys = np.arange(height) % n
    xs = np.arange(width) % n
    thresholds = ((matrix[ys[:, None], xs[None, :]] - 0.5) * scale).reshape(-1)
    values = gray + thresholds
    gray[:] = np.clip(_round_array(values / scale) * scale, 0.0, 255.0)


def ordered_2x2(gray: np.ndarray, width: int, height: int, levels: int) -> None:
    _ordered(gray, width, height, levels, _BAYER_2X2)


def ordered_4x4(gray: np.ndarray, width: int, height: int, levels: int) -> None:
    _ordered(gray, width, height, levels, _BAYER_4X4)


def threshold(gray: np.ndarray, width: int, height: int, levels: int) -> None:
    scale = _step(levels)
    gray[:] = np.clip(_round_array(gray / scale) * scale, 0.0, 255.0)


_STRATEGIES = {
    Dithering.FLOYD_STEINBERG: floyd_steinberg,
    Dithering.ATKINSON: atkinson,
    Dithering.RIEMERSMA: riemersma,
    Dithering.ORDERED_2X2: ordered_2x2,
    Dithering.ORDERED_4X4: ordered_4x4,
    Dithering.THRESHOLD: threshold,
}
