"""Whole-corpus extraction across several documents.

All documents are joined into one corpus and every extractor runs once
over it, so counts do not depend on document order. Only the choice of
context samples does.
"""

from collections.abc import Callable, Iterable, Mapping

from pydantic import ValidationError

from ..config import Settings, get_settings
from ..exceptions import InvalidInputError
from ..logging import logger
from ..models.document import Document
from ..models.result import ExtractionResult
from .characters import CharacterExtractor
from .locations import extract_locations
from .relationships import RelationshipAnalyzer

DOCUMENT_SEPARATOR = "\n\n"

# progress_callback(phase, current, total, message)
ProgressCallback = Callable[[str, int, int, str], None]


def coerce_documents(documents: Iterable[Document | Mapping]) -> list[Document]:
    """Validate caller input into Document models.

    Accepts Document instances or mappings with string "name" and
    "content" keys. Anything else raises InvalidInputError.
    """
    if isinstance(documents, (str, bytes, Mapping)) or not isinstance(documents, Iterable):
        raise InvalidInputError("documents must be a list of {name, content} items")

    coerced: list[Document] = []
    for i, doc in enumerate(documents):
        if isinstance(doc, Document):
            coerced.append(doc)
            continue
        if not isinstance(doc, Mapping):
            raise InvalidInputError(f"document {i} must be a mapping, got {type(doc).__name__}")
        try:
            coerced.append(Document.model_validate(dict(doc)))
        except ValidationError as e:
            raise InvalidInputError(f"document {i} is malformed: {e}") from e
    return coerced


class CorpusAnalyzer:
    """Run character, location and relationship extraction over a corpus."""

    def __init__(self, settings: Settings | None = None):
        """Initialize the analyzer.

        Args:
            settings: Thresholds to use; defaults to the cached global settings
        """
        self.settings = settings or get_settings()
        self.characters = CharacterExtractor(self.settings)
        self.relationships = RelationshipAnalyzer(self.settings)

    def analyze(
        self,
        documents: Iterable[Document | Mapping],
        progress_callback: ProgressCallback | None = None,
    ) -> ExtractionResult:
        """Extract everything from the given documents.

        Args:
            documents: Documents in the order their text should be joined
            progress_callback: Optional callback(phase, current, total, message)

        Returns:
            ExtractionResult with characters, locations and relationships
        """
        docs = coerce_documents(documents)
        corpus = DOCUMENT_SEPARATOR.join(doc.content for doc in docs)
        logger.debug("Analyzing %d documents (%d characters)", len(docs), len(corpus))

        def report(step: int, phase: str, message: str) -> None:
            if progress_callback:
                progress_callback(phase, step, 3, message)

        report(0, "characters", "Extracting characters...")
        characters = self.characters.extract(corpus)

        report(1, "locations", f"Found {len(characters)} characters, extracting locations...")
        locations = extract_locations(corpus)

        report(2, "relationships", f"Found {len(locations)} locations, analyzing relationships...")
        relationships = self.relationships.analyze(corpus, [c.name for c in characters])

        report(3, "done", f"Found {len(relationships)} relationships")

        return ExtractionResult(
            characters=characters,
            locations=locations,
            relationships=relationships,
        )


def parse_files(
    documents: Iterable[Document | Mapping],
    settings: Settings | None = None,
    progress_callback: ProgressCallback | None = None,
) -> ExtractionResult:
    """Extract all entities (characters, locations) and relationships from documents."""
    return CorpusAnalyzer(settings).analyze(documents, progress_callback=progress_callback)
