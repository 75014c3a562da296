"""
Fixed role tables of a theme.

Every table maps a CSS-facing kebab-case key to a getter. Standard roles
are resolved against a ``DynamicScheme``, custom roles against the
:class:`ColorGroup` of one mode.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Sequence, Union

from materialyoucolor.dynamiccolor.dynamic_color import DynamicColor
from materialyoucolor.dynamiccolor.material_dynamic_colors import MaterialDynamicColors as MDC
from materialyoucolor.palettes.tonal_palette import TonalPalette

from ..utils.strings import kebab_case
from .custom_color import ColorGroup

if TYPE_CHECKING:
    from materialyoucolor.scheme.dynamic_scheme import DynamicScheme

STANDARD_DYNAMIC_COLORS: dict[str, DynamicColor] = {
    # surface
    'surface': MDC.surface,
    'surface-dim': MDC.surfaceDim,
    'surface-bright': MDC.surfaceBright,
    'surface-variant': MDC.surfaceVariant,
    'surface-container-lowest': MDC.surfaceContainerLowest,
    'surface-container-low': MDC.surfaceContainerLow,
    'surface-container': MDC.surfaceContainer,
    'surface-container-high': MDC.surfaceContainerHigh,
    'surface-container-highest': MDC.surfaceContainerHighest,
    'inverse-surface': MDC.inverseSurface,

    'on-surface': MDC.onSurface,
    'on-surface-dim': MDC.onSurface,
    'on-surface-bright': MDC.onSurface,
    'on-surface-container-lowest': MDC.onSurface,
    'on-surface-container-low': MDC.onSurface,
    'on-surface-container': MDC.onSurface,
    'on-surface-container-high': MDC.onSurface,
    'on-surface-container-highest': MDC.onSurface,
    'on-surface-variant': MDC.onSurfaceVariant,
    'on-inverse-surface': MDC.inverseOnSurface,

    # primary
    'primary': MDC.primary,
    'primary-container': MDC.primaryContainer,
    'primary-fixed': MDC.primaryFixed,
    'primary-fixed-dim': MDC.primaryFixedDim,
    'inverse-primary': MDC.inversePrimary,

    'on-primary': MDC.onPrimary,
    'on-primary-container': MDC.onPrimaryContainer,
    'on-primary-fixed': MDC.onPrimaryFixed,
    'on-primary-fixed-variant': MDC.onPrimaryFixedVariant,

    # secondary
    'secondary': MDC.secondary,
    'secondary-container': MDC.secondaryContainer,
    'secondary-fixed': MDC.secondaryFixed,
    'secondary-fixed-dim': MDC.secondaryFixedDim,

    'on-secondary': MDC.onSecondary,
    'on-secondary-container': MDC.onSecondaryContainer,
    'on-secondary-fixed': MDC.onSecondaryFixed,
    'on-secondary-fixed-variant': MDC.onSecondaryFixedVariant,

    # tertiary
    'tertiary': MDC.tertiary,
    'tertiary-container': MDC.tertiaryContainer,
    'tertiary-fixed': MDC.tertiaryFixed,
    'tertiary-fixed-dim': MDC.tertiaryFixedDim,

    'on-tertiary': MDC.onTertiary,
    'on-tertiary-container': MDC.onTertiaryContainer,
    'on-tertiary-fixed': MDC.onTertiaryFixed,
    'on-tertiary-fixed-variant': MDC.onTertiaryFixedVariant,

    # error
    'error': MDC.error,
    'error-container': MDC.errorContainer,
    'on-error': MDC.onError,
    'on-error-container': MDC.onErrorContainer,

    # misc
    'outline': MDC.outline,
    'outline-variant': MDC.outlineVariant,
    'shadow': MDC.shadow,
    'scrim': MDC.scrim,
}

STANDARD_PALETTE_KEY_COLORS: dict[str, DynamicColor] = {
    'primary-palette-key': MDC.primaryPaletteKeyColor,
    'secondary-palette-key': MDC.secondaryPaletteKeyColor,
    'tertiary-palette-key': MDC.tertiaryPaletteKeyColor,
    'neutral-palette-key': MDC.neutralPaletteKeyColor,
    'neutral-variant-palette-key': MDC.neutralVariantPaletteKeyColor,
}

STANDARD_PALETTES: dict[str, Callable[[DynamicScheme], TonalPalette]] = {
    'primary': lambda s: s.primary_palette,
    'secondary': lambda s: s.secondary_palette,
    'tertiary': lambda s: s.tertiary_palette,
    'neutral': lambda s: s.neutral_palette,
    'neutral-variant': lambda s: s.neutral_variant_palette,
}

# ``{}`` is replaced with the kebab-case name of the custom color.
CUSTOM_DYNAMIC_COLORS: dict[str, Callable[[ColorGroup], int]] = {
    '{}': lambda g: g.color,
    '{}-container': lambda g: g.color_container,
    'on-{}': lambda g: g.on_color,
    'on-{}-container': lambda g: g.on_color_container,
}

PALETTE_KEY_SUFFIX = '-palette-key'


def is_standard_key(name: str) -> bool:
    """True if the kebab-case form of ``name`` is a standard role or palette key color."""
    key = kebab_case(name)
    return key in STANDARD_DYNAMIC_COLORS or key in STANDARD_PALETTE_KEY_COLORS


@dataclass(frozen=True)
class ColorOptions:
    """
    A theme color, whether it is harmonized with the primary color and the
    shades generated for its palette.

    ``harmonize`` defaults to True; it is ignored for the primary color.
    ``shades`` defaults to the shades option of the CSS theme.
    """
    value: object
    harmonize: Optional[bool] = None
    shades: Optional[Union[bool, Sequence[float]]] = None
