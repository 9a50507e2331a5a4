"""Character name extraction.

Three independent signals, each producing its own tally:
1. Dialogue attribution: "said Alex", "Alex said", "said goodbye to Alex"
2. Quoted speech: '"Go home", Alex told him'
3. Introductions: "met Alex", "named Alex" (admitted only on repeat)

The tallies are folded into one candidate table, counts are corroborated
against plain mentions, and anything below the frequency floor is dropped.
"""

import re
from collections import Counter
from dataclasses import dataclass, field

from ..config import Settings, get_settings
from ..ingest.splitter import ensure_text, normalize_whitespace, strip_markup, split_into_sentences
from ..logging import logger
from ..models.entities import CharacterCandidate
from .patterns import (
    DIALOGUE_VERBS,
    GAP,
    INTRODUCTION_VERBS,
    LOCATION_WORDS,
    NAME,
    clean_name,
    compile_name_matcher,
    is_valid_name,
    name_then_verb,
    verb_then_name,
    verb_to_name,
)

DIALOGUE_PATTERNS: list[re.Pattern] = [
    pattern
    for verb in DIALOGUE_VERBS
    for pattern in (verb_then_name(verb), name_then_verb(verb), verb_to_name(verb))
]

INTRODUCTION_PATTERNS: list[re.Pattern] = [verb_then_name(verb) for verb in INTRODUCTION_VERBS]

# A quotation may wrap lines but never runs past a blank line
QUOTED_TEXT = r'(?:[^"“”\n]|\n(?![ \t]*\n))+'

QUOTED_SPEECH = re.compile(rf'["“]({QUOTED_TEXT})["”][ \t]*,[ \t]*({NAME})(?={GAP}\w)')

# A quote followed by its dialogue tag, used to widen context windows
QUOTED_ATTRIBUTION = re.compile(rf'["“]{QUOTED_TEXT}["”][ \t]*,[ \t]*[A-Z][a-z]+{GAP}\w+')

# "Alex said" with nothing else worth keeping
BARE_ATTRIBUTION = re.compile(
    rf"[\"']?\s*[A-Z][a-z]+\s+(?:{'|'.join(DIALOGUE_VERBS)})\s*[\"']?",
    re.IGNORECASE,
)

CONTEXT_LEAD = 50
MIN_WINDOW_LENGTH = 20


@dataclass
class CandidateTally:
    """Running count and context samples for one name within a pass."""

    name: str
    count: int = 0
    context: list[str] = field(default_factory=list)


class CharacterExtractor:
    """Extract probable character names from narrative text."""

    def __init__(self, settings: Settings | None = None):
        """Initialize the extractor.

        Args:
            settings: Thresholds to use; defaults to the cached global settings
        """
        self.settings = settings or get_settings()

    def extract(self, text: str) -> list[CharacterCandidate]:
        """Extract characters ranked by count, ties in first-seen order."""
        clean_text = strip_markup(ensure_text(text))
        sentences = split_into_sentences(clean_text)

        dialogue = self._dialogue_pass(sentences)
        quoted = self._quoted_speech_pass(clean_text)
        introduced = self._introduction_pass(sentences)
        logger.debug(
            "Character passes: %d dialogue, %d quoted, %d introduced names",
            len(dialogue), len(quoted), len(introduced),
        )

        candidates = self._merge(dialogue, quoted, introduced)
        if self.settings.corroborate_mentions:
            self._corroborate(candidates, clean_text)

        accepted = [c for c in candidates.values() if self._keep(c)]
        accepted.sort(key=lambda c: c.count, reverse=True)

        logger.debug("Kept %d of %d character candidates", len(accepted), len(candidates))
        return [
            CharacterCandidate(name=c.name, count=c.count, context=c.context)
            for c in accepted
        ]

    def _accept(self, raw: str) -> str | None:
        name = clean_name(raw)
        if is_valid_name(name, self.settings.max_name_length):
            return name
        return None

    def _dialogue_pass(self, sentences: list[str]) -> dict[str, CandidateTally]:
        """Count names attached to speech and thought verbs, with context."""
        tallies: dict[str, CandidateTally] = {}

        for sentence in sentences:
            for pattern in DIALOGUE_PATTERNS:
                for match in pattern.finditer(sentence):
                    name = self._accept(match.group(1))
                    if name is None:
                        continue

                    tally = tallies.setdefault(name, CandidateTally(name))
                    tally.count += 1

                    if len(tally.context) < self.settings.max_context_samples:
                        context = self._context_for(sentence)
                        if context:
                            tally.context.append(context)

        return tallies

    def _context_for(self, sentence: str) -> str | None:
        """Pick a context string for a sentence, or None if it says nothing."""
        trimmed = normalize_whitespace(sentence)
        if len(trimmed) < self.settings.min_context_length:
            return None
        if BARE_ATTRIBUTION.fullmatch(trimmed):
            return None

        # Prefer a window that keeps the quote before its tag
        match = QUOTED_ATTRIBUTION.search(sentence)
        if match:
            window = normalize_whitespace(sentence[max(0, match.start() - CONTEXT_LEAD):])
            return window if len(window) >= MIN_WINDOW_LENGTH else None

        return trimmed

    def _quoted_speech_pass(self, clean_text: str) -> Counter:
        """Count names that directly follow a quotation and a comma."""
        counts: Counter = Counter()
        for match in QUOTED_SPEECH.finditer(clean_text):
            name = self._accept(match.group(2))
            if name is not None:
                counts[name] += 1
        return counts

    def _introduction_pass(self, sentences: list[str]) -> Counter:
        """Count names following introduction verbs ("met", "named", ...)."""
        counts: Counter = Counter()
        for sentence in sentences:
            for pattern in INTRODUCTION_PATTERNS:
                for match in pattern.finditer(sentence):
                    name = self._accept(match.group(1))
                    if name is not None:
                        counts[name] += 1
        return counts

    def _merge(
        self,
        dialogue: dict[str, CandidateTally],
        quoted: Counter,
        introduced: Counter,
    ) -> dict[str, CandidateTally]:
        """Fold the pass tallies into one candidate table.

        Dialogue and quoted-speech hits always admit a name and add up.
        Introduction hits only admit names nobody else found, and only
        once they reach the introduction threshold on their own.
        """
        candidates = {
            name: CandidateTally(name, tally.count, list(tally.context))
            for name, tally in dialogue.items()
        }

        for name, count in quoted.items():
            candidates.setdefault(name, CandidateTally(name)).count += count

        for name, count in introduced.items():
            if count >= self.settings.introduction_threshold and name not in candidates:
                candidates[name] = CandidateTally(name, count)

        return candidates

    def _corroborate(self, candidates: dict[str, CandidateTally], clean_text: str) -> None:
        """Raise each count to the number of capitalized mentions of the name."""
        for tally in candidates.values():
            mentions = len(compile_name_matcher(tally.name, ignore_case=False).findall(clean_text))
            tally.count = max(tally.count, mentions)

    def _keep(self, tally: CandidateTally) -> bool:
        return (
            tally.name not in LOCATION_WORDS
            and is_valid_name(tally.name, self.settings.max_name_length)
            and tally.count >= self.settings.min_character_count
        )


def extract_characters(text: str, settings: Settings | None = None) -> list[CharacterCandidate]:
    """Extract character candidates from text.

    Args:
        text: Raw text, markup allowed
        settings: Optional threshold overrides

    Returns:
        Candidates sorted by count, highest first
    """
    return CharacterExtractor(settings).extract(text)
