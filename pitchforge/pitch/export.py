"""HTML export of a pitch for customer download."""

import html
import logging

import markdown

from pitchforge.models import SolutionPitch

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "nl2br"]

DEFAULT_CSS = """
body {
    font-family: 'Helvetica Neue', Arial, sans-serif;
    font-size: 11pt;
    line-height: 1.6;
    color: #333;
    max-width: 800px;
    margin: 40px auto;
}

h1 {
    color: #007bff;
    font-size: 18pt;
    margin-top: 30px;
    padding-bottom: 5px;
    border-bottom: 1px solid #ddd;
}

strong {
    color: #007bff;
}

.pitch-meta {
    color: #666;
    font-size: 9pt;
}
"""


def render_html(pitch: SolutionPitch, css: str = DEFAULT_CSS) -> str:
    """
    Convert a pitch's Markdown content into a standalone HTML document.

    Args:
        pitch: Pitch to export
        css: Stylesheet embedded in the document head

    Returns:
        Complete HTML document as a string
    """
    # Raw HTML in brief or case study text renders as literal text
    body = markdown.markdown(html.escape(pitch.content, quote=False), extensions=MARKDOWN_EXTENSIONS)
    title = html.escape(pitch.title)

    logger.debug(f"Rendered pitch {pitch.id} v{pitch.version} to HTML ({len(body)} chars)")

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>{css}</style>
</head>
<body>
    <p class="pitch-meta">{title} &middot; version {pitch.version} &middot; {pitch.status.value}</p>
    <div class="pitch-content">
{body}
    </div>
</body>
</html>
"""
