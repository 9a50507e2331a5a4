"""Text ingestion and sentence segmentation."""

from narrative_graph.ingest.loader import load_document, load_documents
from narrative_graph.ingest.splitter import split_into_sentences, strip_markup

__all__ = ["load_document", "load_documents", "split_into_sentences", "strip_markup"]
