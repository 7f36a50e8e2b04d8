"""Brightness and hue divergence between a foreground and background color.

Uses the perceptual luma approximation from the W3C "Techniques For
Accessibility Evaluation And Repair Tools" draft rather than the WCAG 2
contrast ratio.
"""

from __future__ import annotations

from a11ylint.rules.colors import ColorValue

# Minimum brightness difference.
MIN_BRIGHTNESS_DIFFERENCE = 126
# Minimum hue difference.
MIN_HUE_DIFFERENCE = 501


def brightness(color: ColorValue) -> float:
    return (299 * color.red + 587 * color.green + 114 * color.blue) / 1000  # type: ignore[operator]


def brightness_difference(foreground: ColorValue, background: ColorValue) -> float:
    return abs(brightness(background) - brightness(foreground))


def hue_difference(foreground: ColorValue, background: ColorValue) -> int:
    return (
        abs(foreground.red - background.red)  # type: ignore[operator]
        + abs(foreground.green - background.green)  # type: ignore[operator]
        + abs(foreground.blue - background.blue)  # type: ignore[operator]
    )


def has_sufficient_contrast(foreground: ColorValue, background: ColorValue) -> bool:
    """Both the brightness and the hue difference must meet their minimum.

    Callers must only pass valid colors.
    """
    return (
        brightness_difference(foreground, background) >= MIN_BRIGHTNESS_DIFFERENCE
        and hue_difference(foreground, background) >= MIN_HUE_DIFFERENCE
    )
