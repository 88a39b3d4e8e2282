"""Color conversion helpers for the bridge's hue/sat/bri scales."""

MAX_HUE = 65535
MAX_SATURATION = 254
MAX_BRIGHTNESS = 254


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert hex color to RGB tuple."""
    hex_color = hex_color.lstrip("#")
    if len(hex_color) != 6:
        raise ValueError(f"Expected a #RRGGBB color, got {hex_color!r}")
    return (
        int(hex_color[0:2], 16),
        int(hex_color[2:4], 16),
        int(hex_color[4:6], 16),
    )


def hex_to_hue_sat_bri(hex_color: str) -> tuple[int, int, int]:
    """Convert hex color to bridge hue, saturation and brightness.

    Args:
        hex_color: Color in hex format (e.g., "#FF0000")

    Returns:
        Tuple of (hue 0-65535, saturation 0-254, brightness 0-254)
    """
    r, g, b = (c / 255.0 for c in hex_to_rgb(hex_color))

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    diff = max_c - min_c

    if diff == 0:
        h = 0.0
    elif max_c == r:
        h = (60 * ((g - b) / diff) + 360) % 360
    elif max_c == g:
        h = (60 * ((b - r) / diff) + 120) % 360
    else:
        h = (60 * ((r - g) / diff) + 240) % 360

    s = 0 if max_c == 0 else (diff / max_c)

    hue = int((h / 360.0) * MAX_HUE)
    saturation = int(s * MAX_SATURATION)
    brightness = int(max_c * MAX_BRIGHTNESS)

    return hue, saturation, brightness
