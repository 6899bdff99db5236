FALLBACK_COLOR = "#c8c8c8"

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def parse_hex(color: object) -> tuple[int, int, int] | None:
    """Parse ``RRGGBB`` (optionally ``#``-prefixed) into channel values.

    Returns None for anything that is not exactly six hex digits.
    """

    if not isinstance(color, str):
        return None

    digits = color.strip().removeprefix("#")
    if len(digits) != 6 or not set(digits) <= _HEX_DIGITS:
        return None

    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _encode(channels) -> str:
    return "#" + "".join(f"{channel:02x}" for channel in channels)


def normalize_color(color: object) -> str:
    """Return color as lowercase ``#rrggbb``, or FALLBACK_COLOR if malformed."""

    channels = parse_hex(color)
    if channels is None:
        return FALLBACK_COLOR
    return _encode(channels)


def darken(color: object, factor: float) -> str:
    """Scale every channel of a hex color by factor.

    Malformed colors yield FALLBACK_COLOR so a single bad value never
    aborts a render. Channels are clamped to [0, 255]; a NaN product
    counts as 0.
    """

    channels = parse_hex(color)
    if channels is None:
        return FALLBACK_COLOR

    # max() keeps 0.0 when the product is NaN.
    return _encode(
        int(min(255.0, max(0.0, channel * factor))) for channel in channels
    )
