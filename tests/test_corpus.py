"""Tests for whole-corpus aggregation."""

from itertools import permutations

import pytest

from narrative_graph.exceptions import InvalidInputError
from narrative_graph.extract.corpus import CorpusAnalyzer, coerce_documents, parse_files
from narrative_graph.models import Document, ExtractionResult


class TestParseFiles:
    """Tests for parse_files."""

    def test_tom_and_jane(self):
        result = parse_files([
            {"name": "a", "content": "Tom said hi to Jane."},
            {"name": "b", "content": "Jane said hi to Tom."},
        ])
        characters = {c.name: c.count for c in result.characters}

        assert characters["Tom"] >= 2
        assert characters["Jane"] >= 2
        assert all(e.strength >= 2 for e in result.relationships)
        assert len({e.pair for e in result.relationships}) == len(result.relationships)

    def test_alex_and_maria(self, alex_and_maria):
        result = parse_files([Document(name="scene", content=alex_and_maria)])

        assert result.character_names() == ["Alex", "Maria"]
        assert [e.pair for e in result.relationships] == [("Alex", "Maria")]

    def test_document_order_does_not_change_counts(self, chapter_documents):
        def summary(result: ExtractionResult):
            return (
                {(c.name, c.count) for c in result.characters},
                {(loc.name, loc.count) for loc in result.locations},
            )

        expected = summary(parse_files(chapter_documents))
        assert expected[0]

        for order in permutations(chapter_documents):
            assert summary(parse_files(list(order))) == expected

    def test_unpunctuated_document_ends(self):
        documents = [
            {"name": "a", "content": "Bob said"},
            {"name": "b", "content": "Alex left. Alex ran."},
            {"name": "c", "content": "They rode to"},
            {"name": "d", "content": "Bree is far. Bree is old."},
            {"name": "e", "content": "Tom said hi to Jane. Jane said hi to Tom."},
        ]

        for order in permutations(documents):
            result = parse_files(list(order))
            assert {(c.name, c.count) for c in result.characters} == {("Tom", 2), ("Jane", 2)}
            assert {(loc.name, loc.count) for loc in result.locations} == {("Jane", 1), ("Tom", 1)}

    def test_unclosed_quote_at_document_end(self):
        documents = [
            {"name": "a", "content": 'He shouted "wait'},
            {"name": "b", "content": 'now", Cara nodded. Cara left.'},
        ]

        assert parse_files(documents) == ExtractionResult()
        assert parse_files(documents[::-1]) == ExtractionResult()

    def test_relationships_only_between_characters(self, chapter_documents):
        result = parse_files(chapter_documents)
        names = set(result.character_names())

        for edge in result.relationships:
            assert edge.char1 in names
            assert edge.char2 in names

    def test_unique_character_names(self, chapter_documents):
        result = parse_files(chapter_documents)
        names = result.character_names()
        assert len(names) == len(set(names))

    def test_empty_corpus(self):
        assert parse_files([]) == ExtractionResult()

    def test_no_matches(self):
        result = parse_files([{"name": "a", "content": "nothing capitalized happens here."}])
        assert result == ExtractionResult()

    def test_accepts_documents_and_mappings(self, alex_and_maria):
        from_models = parse_files([Document(name="a", content=alex_and_maria)])
        from_dicts = parse_files([{"name": "a", "content": alex_and_maria}])
        assert from_models == from_dicts

    def test_extra_keys_ignored(self, alex_and_maria):
        result = parse_files([{"name": "a", "content": alex_and_maria, "path": "/tmp/a"}])
        assert result.character_names() == ["Alex", "Maria"]

    def test_progress_callback(self, alex_and_maria):
        phases = []

        def record(phase, current, total, message):
            phases.append((phase, current, total))

        parse_files([{"name": "a", "content": alex_and_maria}], progress_callback=record)

        assert [p[0] for p in phases] == ["characters", "locations", "relationships", "done"]
        assert [p[1] for p in phases] == [0, 1, 2, 3]
        assert all(p[2] == 3 for p in phases)

    def test_settings_flow_through(self, settings, alex_and_maria):
        strict = settings.model_copy(update={"min_relationship_strength": 3})
        result = CorpusAnalyzer(strict).analyze([{"name": "a", "content": alex_and_maria}])

        assert result.character_names() == ["Alex", "Maria"]
        assert result.relationships == []

    def test_idempotent(self, chapter_documents):
        assert parse_files(chapter_documents) == parse_files(chapter_documents)


class TestDocumentValidation:
    """Tests for caller contract checks."""

    @pytest.mark.parametrize(
        "documents",
        [
            None,
            "Tom said hi.",
            {"name": "a", "content": "Tom said hi."},
            [42],
            [{"name": "a"}],
            [{"content": "Tom said hi."}],
            [{"name": "a", "content": 5}],
            [{"name": None, "content": "Tom said hi."}],
        ],
    )
    def test_rejects_malformed_documents(self, documents):
        with pytest.raises(InvalidInputError):
            parse_files(documents)

    def test_generators_accepted(self):
        docs = coerce_documents({"name": str(i), "content": "x"} for i in range(3))
        assert [d.name for d in docs] == ["0", "1", "2"]
