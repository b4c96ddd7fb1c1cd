from dataclasses import dataclass, replace

from asciidither.charsets import CharSet, resolve_ramps
from asciidither.dithering import Dithering
from asciidither.errors import InvalidBrightness, InvalidContrast, InvalidRamp, InvalidResolution

RESOLUTION_RANGE = (0.01, 1.0)
CONTRAST_RANGE = (0.1, 3.0)
BRIGHTNESS_RANGE = (0.1, 3.0)


@dataclass(frozen=True)
class ConvertConfig:
    resolution: float = 0.2  # fraction of the source dimensions
    contrast: float = 1.0
    brightness: float = 1.0
    inverted: bool = False
    colored: bool = True
    dithering: Dithering = Dithering.NONE
    charset: CharSet = CharSet.PHOTO
    custom_ramp: str = ""  # overrides charset when non-blank

    def validate(self) -> None:
        lo, hi = RESOLUTION_RANGE
        if not lo <= self.resolution <= hi:
            raise InvalidResolution(f"resolution must be in [{lo}, {hi}]: {self.resolution}")
        lo, hi = CONTRAST_RANGE
        if not lo <= self.contrast <= hi:
            raise InvalidContrast(f"contrast must be in [{lo}, {hi}]: {self.contrast}")
        lo, hi = BRIGHTNESS_RANGE
        if not lo <= self.brightness <= hi:
            raise InvalidBrightness(f"brightness must be in [{lo}, {hi}]: {self.brightness}")

    def ramps(self) -> tuple[str, str]:
        return resolve_ramps(self.charset, self.custom_ramp)

    def active_ramp(self) -> str:
        """The ramp selected by the inverted flag, checked to hold at least two levels."""
        normal, inverted = self.ramps()
        ramp = inverted if self.inverted else normal
        if len(ramp) < 2:
            raise InvalidRamp(f"character ramp needs at least 2 characters: {ramp!r}")
        return ramp

    def replace(self, **changes) -> "ConvertConfig":
        return replace(self, **changes)
