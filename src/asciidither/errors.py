class ConversionError(ValueError):
    """Base class for every failure raised by the conversion pipeline."""


class InvalidResolution(ConversionError):
    pass


class InvalidContrast(ConversionError):
    pass


class InvalidBrightness(ConversionError):
    pass


class InvalidRamp(ConversionError):
    pass


class ImageTooSmall(ConversionError):
    def __init__(self, width: int, height: int):
        super().__init__(f"image too small after scaling: {width}x{height}")
        self.width = width
        self.height = height
