"""
Layout "sido-vrilles": poster-style sheet with tinted panels.

Fields: title, subtitle, keywords, writingContext, themes, structure,
linkToCourse, definitions, author, authorFacts, toRead
"""

from src.render.context import PLACEHOLDER, RenderContext
from src.render.layouts.common import bullets, chips, paragraph
from src.render.nodes import Node, el

TEMPLATE_ID = "sido-vrilles"

BASE_STYLES = {
    "title": {"fontFamily": "ui-serif", "fontSize": 28, "fontWeight": 900},
    "subtitle": {"fontFamily": "ui-sans-serif", "fontSize": 12, "fontWeight": 800},
    "keywords": {"fontFamily": "ui-sans-serif", "fontSize": 10},
    "writingContext": {"fontFamily": "ui-sans-serif", "fontSize": 12},
    "themes": {"fontFamily": "ui-sans-serif", "fontSize": 11, "fontWeight": 800},
    "structure": {"fontFamily": "ui-sans-serif", "fontSize": 12},
    "linkToCourse": {"fontFamily": "ui-sans-serif", "fontSize": 12},
    "definitions": {"fontFamily": "ui-sans-serif", "fontSize": 12},
    "author": {"fontFamily": "ui-sans-serif", "fontSize": 14, "fontWeight": 900},
    "authorFacts": {"fontFamily": "ui-sans-serif", "fontSize": 11, "fontWeight": 800},
    "toRead": {"fontFamily": "ui-sans-serif", "fontSize": 12},
}


def _heading(text: str) -> Node:
    return el("div", cls="panel-heading", text=text)


def _tinted_panel(ctx: RenderContext, key: str, heading: str) -> Node:
    return ctx.region(
        key,
        el(
            "div",
            _heading(heading),
            paragraph(ctx, key, BASE_STYLES[key]),
            cls="panel",
            style={"background": ctx.tint("primary", "D9"), "color": ctx.theme["text"]},
        ),
        cls="flush",
    )


def _header(ctx: RenderContext) -> Node:
    keywords = ctx.items("keywords")
    if keywords:
        keyword_block = el(
            "div",
            *[el("span", text=k) for k in keywords],
            cls="chips end dim",
        )
    else:
        keyword_block = el("div", cls="muted", text="mots-clés…")

    return el(
        "div",
        el(
            "div",
            ctx.region(
                "title",
                el(
                    "div",
                    el(
                        "div",
                        style=ctx.style("title", BASE_STYLES["title"]),
                        text=ctx.text("title") or "Titre",
                    ),
                    cls="title-badge",
                    style={"background": ctx.tint("primary", "E6")},
                ),
                framed=False,
            ),
            ctx.region(
                "subtitle",
                el(
                    "div",
                    cls="caps",
                    style=ctx.style("subtitle", BASE_STYLES["subtitle"]),
                    text=ctx.text("subtitle") or "Sous-titre",
                ),
                framed=False,
            ),
            cls="grow",
        ),
        ctx.region(
            "keywords",
            el(
                "div",
                keyword_block,
                cls="keywords",
                style=ctx.style("keywords", BASE_STYLES["keywords"]),
            ),
            framed=False,
        ),
        cls="sheet-header row",
    )


def _themes_and_structure(ctx: RenderContext) -> Node:
    chip_style = {
        "background": ctx.tint("primary", "E6"),
        "color": ctx.theme["text"],
        **ctx.style("themes", BASE_STYLES["themes"]),
    }

    structure_lines = ctx.lines("structure")
    if structure_lines:
        structure_body = bullets(ctx, "structure", BASE_STYLES["structure"], items=structure_lines)
    else:
        structure_body = el("div", cls="muted", text=PLACEHOLDER)

    return el(
        "div",
        ctx.region(
            "themes",
            _heading("Thèmes"),
            el(
                "div",
                *chips(ctx, "themes", chip_style, chip_cls="chip caps"),
                cls="stack center",
            ),
        ),
        ctx.region(
            "structure",
            _heading("Structure"),
            el(
                "div",
                structure_body,
                cls="boxed",
                style={
                    "border-color": ctx.tint("primary", "99"),
                    "background": ctx.tint("background", "F2"),
                },
            ),
        ),
        cls="grid-2",
    )


def _author_and_reading(ctx: RenderContext) -> Node:
    theme = ctx.theme

    author_card = ctx.region(
        "author",
        el(
            "div",
            el(
                "div",
                cls="badge-heading",
                style={"background": ctx.tint("primary", "E6")},
                text="Auteur",
            ),
            el("div", cls="dim small", text="Portrait (optionnel)"),
            cls="row",
        ),
        el(
            "div",
            el(
                "div",
                cls="portrait",
                style={"border-color": ctx.tint("primary", "66"), "background": "#11182710"},
                title="Zone image (non gérée)",
            ),
            el(
                "div",
                el(
                    "div",
                    cls="truncate",
                    style=ctx.style("author", BASE_STYLES["author"]),
                    text=ctx.text("author") or "Nom de l’auteur·e",
                ),
                ctx.region(
                    "authorFacts",
                    el(
                        "div",
                        *chips(
                            ctx,
                            "authorFacts",
                            {"background": "#11182712", **ctx.style("authorFacts", BASE_STYLES["authorFacts"])},
                        ),
                        cls="chips",
                    ),
                    framed=False,
                ),
                cls="grow",
            ),
            cls="row start",
        ),
        also_selected_by=("authorFacts",),
    )

    reading_card = ctx.region(
        "toRead",
        el(
            "div",
            el(
                "div",
                cls="badge-heading",
                style={"background": ctx.tint("background", "FF")},
                text="À lire",
            ),
            el("span", cls="rule", style={"background": ctx.tint("primary", "CC")}, aria_hidden="true"),
            cls="row",
        ),
        el(
            "div",
            bullets(ctx, "toRead", BASE_STYLES["toRead"]),
            cls="panel",
            style={"background": ctx.tint("primary", "D9"), "color": theme["text"]},
        ),
    )

    return el("div", author_card, reading_card, cls="grid-2")


def render(ctx: RenderContext) -> Node:
    link_to_course = ctx.region(
        "linkToCourse",
        _heading("Lien avec le parcours"),
        el(
            "div",
            paragraph(ctx, "linkToCourse", BASE_STYLES["linkToCourse"]),
            cls="boxed dotted",
            style={"border-color": ctx.tint("primary", "99")},
        ),
    )

    return el(
        "div",
        _header(ctx),
        _tinted_panel(ctx, "writingContext", "Contexte d’écriture"),
        _themes_and_structure(ctx),
        link_to_course,
        _tinted_panel(ctx, "definitions", "Définition des termes"),
        _author_and_reading(ctx),
        cls=f"sheet sheet-{TEMPLATE_ID}",
        style={"background": ctx.theme["background"], "color": ctx.theme["text"]},
    )
