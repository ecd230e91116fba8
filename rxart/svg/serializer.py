"""Write SVG markup from a layered composition."""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

from rxart.engine.composition import gradient_id
from rxart.engine.context import ColorPalette, ElementKind, LayeredComposition, Seed, VisualElement
from rxart.utils.geometry import format_number

# Every kind a composition may contain, mapped to its SVG tag.
_TAGS: dict[ElementKind, str] = {
    ElementKind.CIRCLE: "circle",
    ElementKind.ELLIPSE: "ellipse",
    ElementKind.RECT: "rect",
    ElementKind.PATH: "path",
    ElementKind.LINE: "line",
    ElementKind.POLYGON: "polygon",
}


def _attr_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def serialize_element(element: VisualElement) -> str:
    tag = _TAGS[element.kind]
    attrs = [f"{name}={quoteattr(_attr_value(v))}" for name, v in element.attributes.items()]
    if element.class_name:
        attrs.append(f"class={quoteattr(element.class_name)}")
    return f"<{tag} {' '.join(attrs)} />"


def gradient_defs(palette: ColorPalette, seed: Seed) -> list[str]:
    """Radial gradient referenced by the background card."""
    stops = palette.gradient_stops
    last = max(len(stops) - 1, 1)
    lines = [f'    <radialGradient id="{gradient_id(seed)}" cx="50%" cy="50%" r="50%">']
    for i, color in enumerate(stops):
        offset = format_number(i / last * 100)
        lines.append(f'      <stop offset="{offset}%" stop-color={quoteattr(color)} />')
    lines.append("    </radialGradient>")
    return lines


def serialize_svg(
    composition: LayeredComposition,
    palette: ColorPalette,
    seed: Seed,
    size: float = 200,
    title: str = "",
    description: str = "",
    element_id: str = "ortho-artwork",
) -> str:
    """Generate an SVG document, layers as ``<g>`` groups in paint order."""
    dim = format_number(size)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg id="{element_id}" width="{dim}" height="{dim}" viewBox="0 0 {dim} {dim}"'
        ' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    lines.append("  <defs>")
    lines.extend(gradient_defs(palette, seed))
    lines.append("  </defs>")

    for name, elements in composition.layers():
        if not elements:
            lines.append(f'  <g class="{name}-layer" />')
            continue
        lines.append(f'  <g class="{name}-layer">')
        for element in elements:
            lines.append(f"    {serialize_element(element)}")
        lines.append("  </g>")

    lines.append("</svg>")
    return "\n".join(lines)
