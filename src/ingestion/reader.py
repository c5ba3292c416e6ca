"""Corpus file reader for plain text and HTML editions."""

import logging
from pathlib import Path

import chardet

logger = logging.getLogger(__name__)

# Supported file extensions mapped to format identifiers
SUPPORTED_FORMATS: dict[str, str] = {
    ".txt": "txt",
    ".md": "txt",
    ".html": "html",
    ".htm": "html",
}

# Below this chardet confidence the guessed encoding is reported.
MIN_ENCODING_CONFIDENCE = 0.7

# Encoding of pre-UTF-8 Gutenberg downloads.
LEGACY_ENCODING = "cp1252"

NON_BREAKING_SPACE = "\xa0"


class CorpusReader:
    """Reads an anthology edition into one string of newline-separated lines.

    Plain-text editions are decoded byte-for-byte. HTML editions are
    flattened so that every block element and every ``<br>`` starts a new
    line, which keeps speaker cues and verse lines on lines of their own.
    """

    def read(self, file_path: str | Path) -> str:
        """Read a corpus file.

        Args:
            file_path: Path to the corpus file.

        Returns:
            The edition's text.

        Raises:
            FileNotFoundError: If file_path does not exist.
            ValueError: If the file format is not supported.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        text = self._decode(path)
        if self._detect_format(path) == "html":
            return self._html_to_text(text, path)
        return text

    def _detect_format(self, file_path: Path) -> str:
        """Map the file extension to a format identifier.

        Raises:
            ValueError: If extension is not supported.
        """
        fmt = SUPPORTED_FORMATS.get(file_path.suffix.lower())
        if fmt is None:
            raise ValueError(
                f"Unsupported file format: '{file_path.suffix}'. "
                f"Supported: {', '.join(SUPPORTED_FORMATS)}"
            )
        return fmt

    def _decode(self, file_path: Path) -> str:
        """Decode a file as UTF-8 (BOM tolerated), else by detected encoding."""
        raw = file_path.read_bytes()
        try:
            return raw.decode("utf-8-sig")
        except UnicodeDecodeError:
            pass

        guess = chardet.detect(raw)
        encoding = guess.get("encoding") or LEGACY_ENCODING
        if (guess.get("confidence") or 0) < MIN_ENCODING_CONFIDENCE:
            logger.warning("Guessing %s for %s with low confidence", encoding, file_path)

        for candidate in (encoding, LEGACY_ENCODING):
            try:
                return raw.decode(candidate)
            except (UnicodeDecodeError, LookupError):
                continue

        logger.error("Could not decode %s; replacing invalid bytes", file_path)
        return raw.decode("utf-8", errors="replace")

    def _html_to_text(self, markup: str, file_path: Path) -> str:
        """Flatten an HTML edition to text lines.

        Scripts, styles and the document head are dropped; ``<br>`` tags
        become line breaks and non-breaking spaces become plain spaces.
        """
        from bs4 import BeautifulSoup

        try:
            soup = BeautifulSoup(markup, "lxml")
            for tag in soup(["script", "style", "head"]):
                tag.decompose()
            for br in soup.find_all("br"):
                br.replace_with("\n")
            text = soup.get_text(separator="\n")
        except Exception:
            logger.exception("Failed to parse HTML: %s", file_path)
            return ""

        return text.replace(NON_BREAKING_SPACE, " ")
