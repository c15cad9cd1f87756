"""
PDF text extraction for ACF annual reports.

Report tables are laid out as visual rows: a state name followed by its numbers.
PyMuPDF's plain text mode can emit table cells on separate lines, so words are
regrouped by vertical position into one text line per visual row, joined by single
spaces, which is what the data-row recognizer expects.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import fitz  # PyMuPDF

from acf_report_csv.exceptions import MissingInputFile, UnreadableReport

logger = logging.getLogger(__name__)

# Word tuple layout returned by Page.get_text("words")
Word = Tuple[float, float, float, float, str, int, int, int]


def words_to_lines(words: Sequence[Word], tolerance: float = 0.5) -> List[str]:
    """
    Group positioned words into text lines.

    Words whose vertical centers lie within ``tolerance`` times the current line's
    height of each other belong to the same line. Lines are returned top to bottom,
    words left to right.

    Args:
        words: Word tuples ``(x0, y0, x1, y1, text, block, line, word)``.
        tolerance: Fraction of the line height allowed between word centers.

    Returns:
        List of text lines.

    Example:
        >>> words_to_lines([(50, 10, 60, 20, "12", 0, 0, 0), (0, 10, 40, 20, "Alabama", 0, 0, 1)])
        ['Alabama 12']
    """
    lines: List[List[Word]] = []
    center = height = None

    for word in sorted(words, key=lambda w: ((w[1] + w[3]) / 2, w[0])):
        word_center = (word[1] + word[3]) / 2
        word_height = max(word[3] - word[1], 1.0)
        if lines and abs(word_center - center) <= tolerance * height:
            lines[-1].append(word)
        else:
            lines.append([word])
            center, height = word_center, word_height

    return [" ".join(w[4] for w in sorted(line, key=lambda w: w[0])) for line in lines]


def extract_text(pdf_path: Union[str, Path]) -> str:
    """
    Extract the text of a report PDF, one visual row per line.

    Pages are processed in order; each page's lines follow the previous page's.

    Args:
        pdf_path: Path to the PDF file.

    Returns:
        Newline-delimited document text.

    Raises:
        MissingInputFile: If the PDF does not exist.
        UnreadableReport: If PyMuPDF cannot open or read the PDF.
    """
    pdf_path = Path(pdf_path)
    if not pdf_path.is_file():
        raise MissingInputFile(f"Report PDF not found: {pdf_path}")

    page_texts = []
    # PyMuPDF open and read errors are RuntimeError or ValueError subclasses
    try:
        with fitz.open(pdf_path) as doc:
            for page_num in range(doc.page_count):
                words = doc.load_page(page_num).get_text("words")
                page_texts.append("\n".join(words_to_lines(words)))
            logger.debug("Extracted %d page(s) from %s", doc.page_count, pdf_path.name)
    except (RuntimeError, ValueError) as e:
        raise UnreadableReport(pdf_path.name, str(e)) from e

    return "\n".join(page_texts)
