"""Markdown view of a document's OCR result."""

from pageocr.processor.models import ResultSet


def unescape_newlines(text: str) -> str:
    # The OCR envelope keeps newlines as literal "\n" sequences.
    return text.replace("\\n", "\n")


def render_markdown(result: ResultSet, title: str | None = None) -> str:
    """Render every page under its own heading, in page order."""
    sections: list[str] = []
    if title:
        sections.append(f"# {title}")
    for page in result.pages:
        sections.append(f"## Page {page.page}\n\n{unescape_newlines(page.natural_text).strip()}")
    return "\n\n".join(sections) + "\n"
