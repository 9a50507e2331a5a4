"""Location name extraction.

Place names are capitalized spans right after a spatial preposition
("in Rivendell", "from Bag End"). Precision is low on purpose: people
also follow "to" and "at", so results are meant for a human to review.
"""

import re
from collections import Counter

from ..ingest.splitter import ensure_text, split_into_sentences
from ..logging import logger
from ..models.entities import LocationCandidate
from .patterns import GAP, LOCATION_PREPOSITIONS, NAME, marker

LOCATION_PATTERNS: list[re.Pattern] = [
    re.compile(rf"{marker(preposition)}{GAP}({NAME})") for preposition in LOCATION_PREPOSITIONS
]

MIN_LOCATION_LENGTH = 2
MAX_LOCATION_LENGTH = 30


def extract_locations(text: str) -> list[LocationCandidate]:
    """Extract location candidates, most frequent first.

    Every name between 3 and 29 characters long is returned; there is
    no minimum count.
    """
    counts: Counter = Counter()

    for sentence in split_into_sentences(ensure_text(text)):
        for pattern in LOCATION_PATTERNS:
            for match in pattern.finditer(sentence):
                name = " ".join(match.group(1).split())
                if MIN_LOCATION_LENGTH < len(name) < MAX_LOCATION_LENGTH:
                    counts[name] += 1

    logger.debug("Found %d location candidates", len(counts))

    # Counter keeps insertion order, so sorting is stable on first-seen
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [LocationCandidate(name=name, count=count) for name, count in ranked]
