"""Utilities to export the application summary into downloadable formats."""

from __future__ import annotations

from io import BytesIO
import json
from typing import Tuple

import docx
from docx.enum.text import WD_PARAGRAPH_ALIGNMENT
import fitz  # PyMuPDF


PDF_FONT_MAP = {
    "Helvetica": "helv",
    "Arial": "helv",
    "Times New Roman": "times",
    "Georgia": "times",
    "Calibri": "helv",
}
PDF_LINES_PER_PAGE = 48


def text_to_docx(
    text: str,
    *,
    font: str | None = None,
    title: str | None = None,
) -> bytes:
    """Convert plain text into a DOCX binary with an optional heading."""

    doc = docx.Document()

    if title:
        heading = doc.add_heading(title, level=1)
        heading.alignment = WD_PARAGRAPH_ALIGNMENT.CENTER

    normal_style = doc.styles["Normal"]
    if font:
        normal_style.font.name = font

    for line in text.splitlines():
        paragraph = doc.add_paragraph(line)
        if font:
            for run in paragraph.runs:
                run.font.name = font

    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def _paginate(text: str, lines_per_page: int) -> list[str]:
    lines = text.splitlines() or [""]
    return [
        "\n".join(lines[offset : offset + lines_per_page])
        for offset in range(0, len(lines), lines_per_page)
    ]


def text_to_pdf(
    text: str,
    *,
    font: str | None = None,
    title: str | None = None,
) -> bytes:
    """Convert text into a PDF, starting a new page every ``PDF_LINES_PER_PAGE`` lines."""

    fontname = PDF_FONT_MAP.get(font or "Helvetica", "helv")
    doc = fitz.open()
    left_margin = 72

    for page_number, chunk in enumerate(_paginate(text, PDF_LINES_PER_PAGE)):
        page = doc.new_page()
        top_margin = 72
        if title and page_number == 0:
            title_rect = fitz.Rect(
                left_margin, top_margin, page.rect.width - left_margin, top_margin + 40
            )
            page.insert_textbox(
                title_rect,
                title,
                fontsize=18,
                fontname=fontname,
                align=fitz.TEXT_ALIGN_CENTER,
            )
            top_margin = title_rect.y1 + 16
        rect = fitz.Rect(
            left_margin,
            top_margin,
            page.rect.width - left_margin,
            page.rect.height - left_margin,
        )
        page.insert_textbox(rect, chunk, fontsize=11, fontname=fontname)

    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def text_to_json(text: str, *, key: str, title: str | None = None) -> bytes:
    """Wrap text in a structured JSON object and return as bytes."""
    data: dict[str, str] = {"type": key, "content": text}
    if title:
        data["title"] = title
    return json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8")


def prepare_download_data(
    text: str,
    fmt: str,
    *,
    key: str,
    title: str | None = None,
    font: str | None = None,
) -> Tuple[bytes, str, str]:
    """Prepare data, mime type and extension for download."""
    fmt = fmt.lower()
    if fmt == "docx":
        return (
            text_to_docx(text, font=font, title=title),
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            "docx",
        )
    if fmt == "pdf":
        return (
            text_to_pdf(text, font=font, title=title),
            "application/pdf",
            "pdf",
        )
    if fmt == "json":
        return text_to_json(text, key=key, title=title), "application/json", "json"
    return text.encode("utf-8"), "text/markdown", "md"
