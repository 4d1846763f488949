"""
Layout "cahiers-mint": notebook sheet, tinted header band.

Fields: title, author, characters, takeaways, summary, structure
"""

from src.render.context import RenderContext
from src.render.layouts.common import bullets, paragraph, section_label
from src.render.nodes import Node, el

TEMPLATE_ID = "cahiers-mint"

BASE_STYLES = {
    "title": {"fontFamily": "ui-sans-serif", "fontSize": 24, "fontWeight": 900},
    "author": {"fontFamily": "ui-sans-serif", "fontSize": 13, "fontWeight": 600},
    "characters": {"fontFamily": "ui-sans-serif", "fontSize": 12},
    "summary": {"fontFamily": "ui-sans-serif", "fontSize": 12},
    "structure": {"fontFamily": "ui-sans-serif", "fontSize": 12},
    "takeaways": {"fontFamily": "ui-sans-serif", "fontSize": 12},
}


def render(ctx: RenderContext) -> Node:
    theme = ctx.theme

    header = el(
        "div",
        ctx.region(
            "title",
            el(
                "div",
                style=ctx.style("title", BASE_STYLES["title"]),
                text=ctx.text("title") or "Titre",
            ),
            framed=False,
        ),
        ctx.region(
            "author",
            el(
                "div",
                cls="dim",
                style=ctx.style("author", BASE_STYLES["author"]),
                text=ctx.text("author") or "Auteur",
            ),
            framed=False,
        ),
        cls="sheet-header band",
        style={"background": ctx.tint("primary", "12")},
    )

    body = el(
        "div",
        ctx.region(
            "characters",
            section_label("Personnages"),
            bullets(ctx, "characters", BASE_STYLES["characters"]),
        ),
        ctx.region(
            "takeaways",
            section_label("Idées clés"),
            bullets(ctx, "takeaways", BASE_STYLES["takeaways"]),
        ),
        ctx.region(
            "summary",
            section_label("Résumé"),
            paragraph(ctx, "summary", BASE_STYLES["summary"]),
            cls="span-2",
        ),
        ctx.region(
            "structure",
            section_label("Structure"),
            paragraph(ctx, "structure", BASE_STYLES["structure"]),
            cls="span-2",
        ),
        cls="grid-2",
    )

    return el(
        "div",
        header,
        body,
        cls=f"sheet sheet-{TEMPLATE_ID}",
        style={"background": theme["background"], "color": theme["text"]},
    )
