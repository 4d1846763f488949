"""
Layout "sido-orange": reading sheet with header swatch.

Fields: title, author, context, themes, quotes, opinion
"""

from src.render.context import RenderContext
from src.render.layouts.common import bullets, chips, paragraph, section_label
from src.render.nodes import Node, el

TEMPLATE_ID = "sido-orange"

BASE_STYLES = {
    "title": {"fontFamily": "ui-serif", "fontSize": 22, "fontWeight": 800},
    "author": {"fontFamily": "ui-sans-serif", "fontSize": 13, "fontWeight": 600},
    "context": {"fontFamily": "ui-sans-serif", "fontSize": 12},
    "themes": {"fontFamily": "ui-sans-serif", "fontSize": 12},
    "quotes": {"fontFamily": "ui-serif", "fontSize": 12},
    "opinion": {"fontFamily": "ui-sans-serif", "fontSize": 12},
}


def render(ctx: RenderContext) -> Node:
    theme = ctx.theme

    title_style = ctx.style("title", BASE_STYLES["title"])
    # theme text color unless the title has its own
    title_style.setdefault("color", theme["text"])

    header = el(
        "div",
        el(
            "div",
            ctx.region(
                "title",
                el("div", style=title_style, text=ctx.text("title") or "Titre"),
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
            cls="grow",
        ),
        el("div", cls="swatch", style={"background": theme["primary"]}, title="Couleur primaire"),
        cls="sheet-header row",
    )

    body = el(
        "div",
        ctx.region(
            "context",
            section_label("Contexte / Résumé"),
            paragraph(ctx, "context", BASE_STYLES["context"]),
            cls="span-2",
        ),
        ctx.region(
            "themes",
            section_label("Thèmes"),
            el(
                "div",
                *chips(
                    ctx,
                    "themes",
                    {"background": ctx.tint("primary", "22"), "color": theme["text"]},
                    chip_cls="chip pill",
                ),
                cls="chips",
                style=ctx.style("themes", BASE_STYLES["themes"]),
            ),
        ),
        ctx.region(
            "quotes",
            section_label("Citations"),
            bullets(ctx, "quotes", BASE_STYLES["quotes"]),
        ),
        ctx.region(
            "opinion",
            section_label("Avis personnel"),
            paragraph(ctx, "opinion", BASE_STYLES["opinion"]),
            cls="span-2",
        ),
        cls="grid-2",
    )

    footer = el(
        "div",
        el("span", text=f"Template: {ctx.template.name}"),
        el("span", cls="pill", style={"background": ctx.tint("accent", "22")}, text="accent"),
        cls="sheet-footer row dim",
    )

    return el(
        "div",
        header,
        body,
        footer,
        cls=f"sheet sheet-{TEMPLATE_ID}",
        style={"background": theme["background"], "color": theme["text"]},
    )
