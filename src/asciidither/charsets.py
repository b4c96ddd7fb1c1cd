from enum import Enum

# Preset ramps run from the sparsest glyph to the densest one. The inverted
# forms are authored separately and are not plain reversals of the normal ones.
CLASSIC = " .,:;i1tfLCG08@"
CLASSIC_INVERTED = "@80GCLft1i;:,. "

# Long, smooth photographic ramp; works best with dithering
PHOTO = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/*tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"
PHOTO_INVERTED = "@$B%8&WM#*ao bhkdpqwmZO0QLCJUYXzcvunxrjft/\\|)(1}{][?-_+~<>i!lI;:,'^`. "

MINIMAL = "@%#*+=-:. "
MINIMAL_INVERTED = " .:-=+*#%@"

# Needs a font with block element glyphs (U+2591-U+2593, U+2588)
BLOCKS = " ░▒▓█"
BLOCKS_INVERTED = "█▓▒░ "


class CharSet(Enum):
    CLASSIC = "Classic"
    PHOTO = "Photo"
    MINIMAL = "Minimal"
    BLOCKS = "Blocks"

    @property
    def label(self) -> str:
        return self.value

    @property
    def ramps(self) -> tuple[str, str]:
        """(normal, inverted) ramp strings for this preset."""
        return _PRESETS[self]

    def next(self) -> "CharSet":
        members = list(CharSet)
        return members[(members.index(self) + 1) % len(members)]

    @classmethod
    def parse(cls, name: str) -> "CharSet":
        key = name.strip().lower()
        for member in cls:
            if key in (member.name.lower(), member.value.lower()):
                return member
        raise ValueError(f"Unknown character set: {name!r}")


_PRESETS = {
    CharSet.CLASSIC: (CLASSIC, CLASSIC_INVERTED),
    CharSet.PHOTO: (PHOTO, PHOTO_INVERTED),
    CharSet.MINIMAL: (MINIMAL, MINIMAL_INVERTED),
    CharSet.BLOCKS: (BLOCKS, BLOCKS_INVERTED),
}


def resolve_ramps(charset: CharSet, custom_ramp: str = "") -> tuple[str, str]:
    """Return the (normal, inverted) ramps for a preset or a custom ramp.

    A custom ramp wins whenever it holds any non-whitespace character; its
    inverted form is the character-reversed ramp.
    """
    if custom_ramp and custom_ramp.strip():
        return custom_ramp, custom_ramp[::-1]
    return charset.ramps
