"""Write a standalone SVG document from a Scene."""

from __future__ import annotations

from html import escape

from chordview.render.scene import Scene

SVG_NS = "http://www.w3.org/2000/svg"


def _num(v: float) -> str:
    return f"{v:.12g}"


def scene_to_svg(scene: Scene) -> str:
    """Generate SVG markup for a scene. An empty scene yields an empty <svg>."""
    root_attrs = [
        f'xmlns="{SVG_NS}"',
        f'viewBox="0 0 {_num(scene.width)} {_num(scene.height)}"',
        f'width="{_num(scene.width)}"',
        f'height="{_num(scene.height)}"',
        'preserveAspectRatio="xMidYMid meet"',
        'font-family="sans-serif"',
        'font-size="10"',
    ]
    if scene.surface_id:
        root_attrs.insert(1, f'id="{escape(scene.surface_id)}"')

    lines = [f"<svg {' '.join(root_attrs)}>"]
    if scene.is_empty:
        lines.append("</svg>")
        return "\n".join(lines)

    lines.append(
        f'  <g transform="translate({_num(scene.center_x)},{_num(scene.center_y)})">'
    )

    for arc, label in zip(scene.arcs, scene.labels):
        lines.append(f'    <g class="group" data-index="{arc.index}" data-category="{arc.category.value}">')
        lines.append(
            f'      <path class="arc" d="{arc.d}" fill="{escape(arc.fill)}" stroke="{escape(arc.stroke)}">'
            f"<title>{escape(arc.label)}</title></path>"
        )
        lines.append(
            f'      <text dy=".35em" transform="{label.transform}" text-anchor="{label.anchor}"'
            f' font-weight="{label.font_weight}" fill="{label.fill}">{escape(label.text)}</text>'
        )
        lines.append("    </g>")

    lines.append('    <g class="ribbons">')
    for ribbon in scene.ribbons:
        title = f"{ribbon.source_label} → {ribbon.target_label}: {_num(ribbon.value)}"
        lines.append(
            f'      <path class="ribbon" d="{ribbon.d}" fill="{escape(ribbon.fill)}"'
            f' stroke="{escape(ribbon.stroke)}" opacity="{_num(ribbon.opacity)}"'
            f' data-source="{escape(ribbon.source_label)}" data-target="{escape(ribbon.target_label)}"'
            f' data-value="{_num(ribbon.value)}"><title>{escape(title)}</title></path>'
        )
    lines.append("    </g>")
    lines.append("  </g>")
    lines.append("</svg>")
    return "\n".join(lines)
