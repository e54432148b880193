"""page assembly: wraps the rendered body in a standalone HTML document."""

from mdview.core.escaping import escape_attribute, escape_html
from mdview.core.models import DEFAULT_TITLE

PAGE_STYLE = (
    "body{font-family:ui-sans-serif,system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"
    "Cantarell,Noto Sans,Helvetica Neue,Arial;line-height:1.6;padding:24px;"
    "max-width:900px;margin:auto;background:#0f172a;color:#e5e7eb;}"
    "a{color:#93c5fd;} "
    "code,pre{font-family:ui-monospace,SFMono-Regular,Menlo,Monaco,Consolas,"
    '"Liberation Mono",monospace;} '
    "pre{background:#0a0f1a;border:1px solid #0f1a2b;padding:12px;"
    "border-radius:8px;overflow:auto;} "
    "h1,h2,h3{color:#bfdbfe;} "
    "hr{border:0;border-top:1px solid #1f2937;margin:24px 0;} "
    "p{margin:10px 0;}"
)


def render_page(
    body_html: str, title: str = DEFAULT_TITLE, lang: str = "fr"
) -> str:
    """
    wraps body HTML in a complete page with inline styles only.

    Args:
        body_html: rendered block fragments
        title: page title (escaped)
        lang: value of the html lang attribute

    Returns:
        HTML document
    """
    return (
        "<!DOCTYPE html>\n"
        f'<html lang="{escape_attribute(lang)}">\n'
        "<head>\n"
        '<meta charset="UTF-8"/>\n'
        f"<title>{escape_html(title)}</title>\n"
        f"<style>{PAGE_STYLE}</style>\n"
        "</head><body>\n"
        f"{body_html}\n"
        "</body></html>"
    )
