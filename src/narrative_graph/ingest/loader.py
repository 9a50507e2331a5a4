"""Load source documents from disk."""

from pathlib import Path

from bs4 import BeautifulSoup

from ..exceptions import LoaderError, UnsupportedFormatError
from ..logging import logger
from ..models.document import Document

TEXT_SUFFIXES = {".txt", ".md", ".html", ".htm"}
SUPPORTED_SUFFIXES = TEXT_SUFFIXES | {".epub"}


def load_documents(paths: list[Path]) -> list[Document]:
    """
    Load every file under the given paths as a Document.

    Directories are walked recursively and only supported files inside them
    are kept. Documents are sorted by path so repeated runs see the same
    order, which fixes which sentences become context samples.
    """
    files: set[Path] = set()
    for path in paths:
        path = Path(path)
        if path.is_dir():
            files.update(
                p for p in path.rglob("*")
                if p.is_file() and p.suffix.lower() in SUPPORTED_SUFFIXES
            )
        elif path.is_file():
            files.add(path)
        else:
            raise LoaderError(f"No such file or directory: {path}")

    documents = [load_document(p) for p in sorted(files)]
    logger.debug("Loaded %d documents", len(documents))
    return documents


def load_document(path: Path) -> Document:
    """Load a single file, dispatching on its suffix."""
    suffix = path.suffix.lower()

    if suffix in TEXT_SUFFIXES:
        content = load_txt(path)
    elif suffix == ".epub":
        content = load_epub(path)
    else:
        raise UnsupportedFormatError(str(path), suffix)

    return Document(name=str(path), content=content)


def load_txt(path: Path) -> str:
    """Load a plain text, markdown or HTML file."""
    # Try common encodings
    for encoding in ["utf-8", "utf-8-sig", "latin-1", "cp1252"]:
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue

    raise LoaderError(f"Could not decode {path} with any common encoding")


def load_epub(path: Path) -> str:
    """Load an EPUB file, keeping each chapter's body markup.

    Tags are left in place for the extractors to strip, so sentence
    boundaries stay where the markup put them.
    """
    import ebooklib
    from ebooklib import epub

    try:
        book = epub.read_epub(str(path))
    except Exception as e:
        raise LoaderError(f"Could not read EPUB {path}: {e}") from e

    chapters: list[str] = []

    for item in book.get_items():
        if item.get_type() == ebooklib.ITEM_DOCUMENT:
            chapter = clean_html(item.get_content())
            if chapter:
                chapters.append(chapter)

    return "\n\n".join(chapters)


def clean_html(html: bytes | str) -> str:
    """Drop script and style elements and return the body markup."""
    soup = BeautifulSoup(html, "html.parser")

    for element in soup(["script", "style"]):
        element.decompose()

    body = soup.body or soup
    if not body.get_text(strip=True):
        return ""
    return body.decode_contents().strip()
