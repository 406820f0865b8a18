"""Write an SVG document from rendered element dicts."""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

from diagrams2d.svg.options import RenderOptions


def serialize_svg(elements: list[dict[str, str]], options: RenderOptions | None = None) -> str:
    """Each element dict carries its tag under "tag"; every other key is an attribute."""
    options = options or RenderOptions()
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {options.width:g} {options.height:g}" width="{options.width:g}"'
        f' height="{options.height:g}" xmlns="http://www.w3.org/2000/svg">',
    ]

    if options.title:
        lines.append(f"  <title>{escape(options.title)}</title>")
    if options.description:
        lines.append(f"  <desc>{escape(options.description)}</desc>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attr_str = " ".join(f"{k}={quoteattr(str(v))}" for k, v in elem.items() if k != "tag")
        lines.append(f"  <{tag} {attr_str} />" if attr_str else f"  <{tag} />")

    lines.append("</svg>")
    return "\n".join(lines)
