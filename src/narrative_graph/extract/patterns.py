"""Word lists and regex building blocks shared by the extractors.

Marker verbs and prepositions match in any case ("Said Alex", "At Rivendell");
names must be capitalized exactly.
"""

import re

# Spaces or tabs only; a marker and its name never sit on different lines
GAP = r"[ \t]+"

# One or two capitalized words on the same line
NAME = rf"[A-Z][a-z]+(?:{GAP}[A-Z][a-z]+)?"

# Speech and thought verbs that attribute dialogue to a speaker
DIALOGUE_VERBS = (
    "said", "thought", "asked", "replied", "answered", "whispered",
    "shouted", "exclaimed", "murmured", "called", "told",
)

# Verbs that tend to introduce a person by name
INTRODUCTION_VERBS = (
    "met", "saw", "knew", "told", "asked", "called", "named", "introduced",
)

# Prepositions that precede place names
LOCATION_PREPOSITIONS = (
    "in", "at", "to", "from", "near", "inside", "outside", "within",
)

# Capitalized words that are never names
STOP_WORDS = frozenset({
    "The", "A", "An", "And", "But", "Or", "Nor", "For", "So", "Yet", "As", "If",
    "When", "Where", "Why", "How",
    "I", "He", "She", "They", "We", "You", "It", "This", "That", "These", "Those",
    "His", "Her", "Him", "Them", "Their", "Theirs", "Themselves",
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
    "North", "South", "East", "West", "Northern", "Southern", "Eastern", "Western",
    "Chapter", "Part", "Section", "Page", "Expression", "Face", "Voice",
    "Hand", "Hands", "Eye", "Eyes",
})

# Compared lowercased
PRONOUNS = frozenset({
    "they", "their", "them", "theirs", "themselves",
    "he", "she", "it", "we", "you", "i", "his", "her", "him",
})

# Place nouns that dialogue patterns pick up as speakers ("the Tower said")
LOCATION_WORDS = frozenset({
    "Forest", "Tower", "Keep", "City", "Village", "Town", "Kingdom", "Realm",
    "Palace", "Castle", "Temple", "Shrine",
})

LOWERCASE_WORD = re.compile(r"\b[a-z]+\b")


def marker(word: str) -> str:
    """Case-insensitive whole-word pattern for a marker verb or preposition."""
    return rf"\b(?i:{re.escape(word)})\b"


def verb_then_name(verb: str) -> re.Pattern:
    """Match '<verb> <Name>', capturing the name."""
    return re.compile(rf"{marker(verb)}{GAP}({NAME})")


def name_then_verb(verb: str) -> re.Pattern:
    """Match '<Name> <verb>', capturing the name."""
    return re.compile(rf"\b({NAME}){GAP}{marker(verb)}")


def verb_to_name(verb: str) -> re.Pattern:
    """Match '<verb> [word] to <Name>', capturing the addressee."""
    return re.compile(rf"{marker(verb)}(?:{GAP}[a-z]+)?{GAP}(?i:to){GAP}({NAME})")


def clean_name(raw: str) -> str:
    """Collapse inner whitespace and drop a leading stop word.

    "When Alex" becomes "Alex"; a single word is returned as is.
    """
    words = raw.split()
    if len(words) == 2 and words[0] in STOP_WORDS:
        words = words[1:]
    return " ".join(words)


def is_valid_name(name: str, max_length: int = 30) -> bool:
    """Check the shape rules every character name must pass."""
    return (
        bool(name)
        and name[0].isupper()
        and 2 <= len(name) <= max_length
        and name not in STOP_WORDS
        and name.lower() not in PRONOUNS
        and not LOWERCASE_WORD.search(name)
    )


def compile_name_matcher(name: str, ignore_case: bool = True) -> re.Pattern:
    """Compile a whole-word matcher for a literal name.

    The name is escaped, so metacharacters in it ("Dr. Who?") match
    literally. Word edges use lookarounds rather than \\b so names that
    start or end with punctuation still match.
    """
    flags = re.IGNORECASE if ignore_case else 0
    return re.compile(rf"(?<!\w){re.escape(name)}(?!\w)", flags)
