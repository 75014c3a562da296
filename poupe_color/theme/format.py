"""
String renderings of colors and CSS rule objects.

A CSS rule object is a mapping of selector (or at-rule) to declarations,
where declarations map a property to a string, a list of strings or a
nested rule object:

>>> print(format_css_rule_objects([{':root': {'--md-primary': 'rgb(103 80 164)'}}]))
:root {
	--md-primary: rgb(103 80 164);
}
"""
from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Callable, Literal, Sequence, Union

from materialyoucolor.hct import Hct

from ..colors.normalize import argb, hex
from ..conversions.argb import hsl_from_argb, rgb_from_argb, split_argb
from ..utils.num_utils import round_half_up

ColorFormat = Union[Literal['numbers', 'rgb', 'hsl', 'hex'], Callable[[Hct], str]]
CSSRuleObject = Mapping[str, Any]


def numbers_from_argb(value: int) -> str:
    """``r g b`` triplet, for ``rgb(var(--x) / <alpha-value>)`` style usage."""
    c = split_argb(value)
    return f"{c['r']} {c['g']} {c['b']}"


def numbers_from_hct(c: Hct) -> str:
    """``r g b`` triplet of an :class:`Hct`."""
    return numbers_from_argb(c.to_int())


def rgb_from_hct(c: Hct) -> str:
    """``rgb(r g b)`` of an :class:`Hct`, alpha ignored."""
    return rgb_from_argb(c.to_int())


def hex_string(c: Any) -> str:
    """``#rrggbb`` of any color input; hex literals are kept as given."""
    return hex(c)


def rgba_string(c: Any, alpha: bool = True) -> str:
    """
    ``rgb(r g b)``, or ``rgb(r g b / a)`` when the color is translucent.

    Args:
        c: any color input.
        alpha: False to ignore the alpha channel.
    """
    parts = split_argb(argb(c))
    a = parts['a'] / 255 if alpha else 1.0
    if a < 1:
        return f"rgb({parts['r']} {parts['g']} {parts['b']} / {a:.2f})"
    return f"rgb({parts['r']} {parts['g']} {parts['b']})"


def hsl_string(c: Any, alpha: bool = True) -> str:
    """
    ``hsl(h, s%, l%)``, or ``hsla(h, s%, l%, a)`` when the color is
    translucent. Hue, saturation and lightness are rounded to integers.
    """
    hsl = hsl_from_argb(argb(c))
    h = round_half_up(hsl['h']) % 360
    s = round_half_up(hsl['s'])
    l = round_half_up(hsl['l'])
    a = hsl['a'] / 100 if alpha else 1.0
    if a < 1:
        return f"hsla({h}, {s}%, {l}%, {round(a, 3)})"
    return f"hsl({h}, {s}%, {l}%)"


def color_formatter(fmt: ColorFormat = 'rgb') -> Callable[[Hct], str]:
    """
    Return the function rendering colors in ``fmt``.

    Args:
        fmt: ``'numbers'`` (``r g b``), ``'rgb'``, ``'hsl'``, ``'hex'`` or
            a callable, returned as is.

    Raises:
        ValueError: if ``fmt`` is not a known format.
    """
    if callable(fmt):
        return fmt
    formatters = {
        'numbers': numbers_from_hct,
        'rgb': rgba_string,
        'hsl': hsl_string,
        'hex': hex_string,
    }
    try:
        return formatters[fmt]
    except KeyError:
        raise ValueError(f"Unknown color format: {fmt!r}. Use one of {list(formatters)}") from None


def _valid_rule(key: str, value: Any) -> bool:
    return key != '' and value is not None


def format_css_rules(rules: CSSRuleObject, indent: str = '\t', prefix: str = '') -> list[str]:
    """
    Lines of a CSS rule object.

    Empty strings and empty nested blocks are omitted; a list of strings
    is joined with commas.
    """
    out: list[str] = []
    for key, value in rules.items():
        if not _valid_rule(key, value):
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            out.append(f"{prefix}{key}: {value};")
        elif isinstance(value, str):
            if value:
                out.append(f"{prefix}{key}: {value};")
        elif isinstance(value, Sequence):
            if not value:
                continue
            if isinstance(value[0], str):
                out.append(f"{prefix}{key}: {', '.join(value)};")
            else:
                inner = [line for v in value for line in format_css_rules(v, indent, prefix + indent)]
                if inner:
                    out.extend([f"{prefix}{key} {{", *inner, f"{prefix}}}"])
        elif isinstance(value, Mapping):
            inner = format_css_rules(value, indent, prefix + indent)
            if inner:
                out.extend([f"{prefix}{key} {{", *inner, f"{prefix}}}"])
        else:
            raise TypeError(f"Unsupported CSS value for {key!r}: {type(value).__name__}")
    return out


def format_css_rule_objects(
    rules: Union[CSSRuleObject, Sequence[CSSRuleObject]],
    indent: str = '\t',
    new_line: str = '\n',
) -> str:
    """
    Render one or more CSS rule objects as CSS text.

    Args:
        rules: a rule object or a list of them, rendered in order.
        indent: indentation per nesting level.
        new_line: line separator.
    """
    if isinstance(rules, Mapping):
        rules = [rules]
    lines: list[str] = []
    for rule in rules:
        lines.extend(format_css_rules(rule, indent))
    return new_line.join(lines)
