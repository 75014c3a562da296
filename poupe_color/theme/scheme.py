"""
Scheme variant selection.
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Callable, Union

from materialyoucolor.hct import Hct
from materialyoucolor.scheme.scheme_content import SchemeContent
from materialyoucolor.scheme.scheme_expressive import SchemeExpressive
from materialyoucolor.scheme.scheme_fidelity import SchemeFidelity
from materialyoucolor.scheme.scheme_monochrome import SchemeMonochrome
from materialyoucolor.scheme.scheme_neutral import SchemeNeutral
from materialyoucolor.scheme.scheme_tonal_spot import SchemeTonalSpot
from materialyoucolor.scheme.scheme_vibrant import SchemeVibrant

from ..errors import UnknownSchemeVariant
from ..types.scheme_key import DEFAULT_SCHEME, SchemeKey

if TYPE_CHECKING:
    from materialyoucolor.scheme.dynamic_scheme import DynamicScheme

logger = logging.getLogger(__name__)

# Role and palette definitions of the 2021 Material guidelines.
SPEC_VERSION = "2021"

SchemeFactory = Callable[..., "DynamicScheme"]

STANDARD_DYNAMIC_SCHEMES: dict[SchemeKey, SchemeFactory] = {
    SchemeKey.CONTENT: SchemeContent,
    SchemeKey.EXPRESSIVE: SchemeExpressive,
    SchemeKey.FIDELITY: SchemeFidelity,
    SchemeKey.MONOCHROME: SchemeMonochrome,
    SchemeKey.NEUTRAL: SchemeNeutral,
    SchemeKey.TONAL_SPOT: SchemeTonalSpot,
    SchemeKey.VIBRANT: SchemeVibrant,
}


def resolve_scheme_key(scheme: Union[SchemeKey, str, None], strict: bool = False) -> SchemeKey:
    """
    Map a scheme name to its :class:`SchemeKey`.

    Unknown names fall back to ``content`` unless ``strict`` is set.

    Raises:
        UnknownSchemeVariant: if ``strict`` and the name is unknown.
    """
    if scheme is None:
        return DEFAULT_SCHEME
    key = SchemeKey.parse(scheme)
    if key is not None:
        return key
    if strict:
        raise UnknownSchemeVariant(scheme)
    logger.warning("unknown scheme %r, using %r", scheme, DEFAULT_SCHEME.value)
    return DEFAULT_SCHEME


def get_scheme_factory(scheme: Union[SchemeKey, str, None], strict: bool = False) -> SchemeFactory:
    return STANDARD_DYNAMIC_SCHEMES[resolve_scheme_key(scheme, strict)]


def make_schemes(
    source: Hct,
    scheme: Union[SchemeKey, str, None] = DEFAULT_SCHEME,
    contrast_level: float = 0.0,
    strict: bool = False,
) -> tuple[DynamicScheme, DynamicScheme]:
    """
    Build the dark and light schemes of one seed.

    Args:
        source: seed color.
        scheme: scheme variant name.
        contrast_level: -1 (minimum) to 1 (maximum), 0 is standard.
        strict: raise on unknown scheme names instead of falling back.

    Returns:
        ``(dark, light)``
    """
    factory = get_scheme_factory(scheme, strict)
    dark = factory(source, True, contrast_level, spec_version=SPEC_VERSION)
    light = factory(source, False, contrast_level, spec_version=SPEC_VERSION)
    logger.debug("built %r and %r", dark, light)
    return dark, light
