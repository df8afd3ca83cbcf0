"""ISL grammar transformation rules.

Each stage is a small, independently testable function. ``apply_all_rules``
chains them in the only supported order:

1. Phrase substitution on the raw text
2. Tokenization
3. Normalization (lemma lookup, contraction expansion)
4. Stop-word removal
5. SVO -> SOV reordering
6. Deduplication

ISL typically follows Subject-Object-Verb order, omits articles and the
copula, and marks tense with time signs rather than inflection. The rules
approximate this with fixed lookup tables; they are not a parser.
"""

import logging
import re
from typing import Any, Iterable

from .lexicon import (
    COMMON_VERBS,
    LEMMA_RULES,
    PHRASE_RULES,
    STOP_WORDS,
    SUBJECT_PRONOUNS,
    TIME_MARKERS,
)

logger = logging.getLogger(__name__)

# One compiled pattern per phrase rule, in declaration order
_PHRASE_PATTERNS = tuple(
    (re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE), f" {replacement} ")
    for phrase, replacement in PHRASE_RULES.items()
)

# Words, keeping apostrophes that sit between two word characters (can't, i'm)
_WORD_RE = re.compile(r"[^\W_]+(?:'[^\W_]+)*")
_NON_WORD_RE = re.compile(r"[\W_]")
_TYPOGRAPHIC_APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "ʼ": "'"})


def substitute_phrases(text: str) -> str:
    """Rewrite known English phrases into ISL word order.

    Matching is case-insensitive and bounded by word boundaries, so a rule
    for "thank you" never fires inside "thank youth". Each replacement is
    padded with spaces so it cannot merge with its neighbours.

    Rules are applied in table-declaration order and each rewrites the text
    left by the previous ones. When two rules overlap, whichever comes first
    wins; there is no longest-match preference.

    Example: "How are you" -> " how you "

    Args:
        text: Raw utterance text

    Returns:
        Text with phrase rules applied
    """
    for pattern, replacement in _PHRASE_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def tokenize(text: str) -> list[str]:
    """Split text into lowercase word tokens.

    Punctuation becomes whitespace. Apostrophes inside a word are kept so
    contractions survive until normalization.

    Args:
        text: Text after phrase substitution

    Returns:
        List of raw lowercase tokens (empty for punctuation-only text)
    """
    text = text.translate(_TYPOGRAPHIC_APOSTROPHES).lower()
    return _WORD_RE.findall(text)


def normalize_word(word: str) -> tuple[str, ...]:
    """Map one token to its canonical lemma tokens.

    The token is looked up as written first (so "can't" finds its
    contraction rule) and then with residual punctuation stripped. Unknown
    words pass through unchanged.

    Example: "walked" -> ("walk",), "won't" -> ("not", "will")

    Args:
        word: A raw token

    Returns:
        Tuple of one or two lemma tokens; empty if nothing is left after cleaning
    """
    cleaned = word.translate(_TYPOGRAPHIC_APOSTROPHES).strip().lower()
    if cleaned in LEMMA_RULES:
        return LEMMA_RULES[cleaned]

    stripped = _NON_WORD_RE.sub("", cleaned)
    if not stripped:
        return ()
    return LEMMA_RULES.get(stripped, (stripped,))


def normalize_tokens(tokens: Iterable[str]) -> list[str]:
    """Normalize every token, flattening multi-token lemmas in order.

    Args:
        tokens: Raw tokens

    Returns:
        Normalized tokens
    """
    result = []
    for token in tokens:
        result.extend(normalize_word(token))
    return result


def rule_remove_stop_words(tokens: list[str]) -> list[str]:
    """Remove words that have no ISL gloss.

    Articles, be/have/do auxiliaries, minor prepositions, some conjunctions,
    intensifiers and question words are dropped. Runs after normalization so
    inflected forms ("doing" -> "do") are caught too.

    Example: ["the", "child", "play", "in", "the", "park"] -> ["child", "play", "park"]

    Args:
        tokens: Normalized tokens

    Returns:
        Tokens with stop words and empty strings removed
    """
    return [t for t in tokens if t and t not in STOP_WORDS]


def rule_svo_to_sov(tokens: list[str]) -> list[str]:
    """Reorder a pronoun + verb + object clause into Subject-Object-Verb.

    Only the narrowest pattern is handled: the first token is a subject
    pronoun and the second a common verb. Time markers after the verb move
    to the very end; everything else is treated as the object.

    Example: ["i", "eat", "rice", "today"] -> ["i", "rice", "eat", "today"]

    Anything else, including a clause with no object, is returned unchanged.

    Args:
        tokens: Filtered tokens

    Returns:
        Reordered tokens (a new list when reordered, the input otherwise)
    """
    if len(tokens) < 3:
        return tokens

    subject, verb = tokens[0], tokens[1]
    if subject not in SUBJECT_PRONOUNS or verb not in COMMON_VERBS:
        return tokens

    objects = []
    times = []
    for token in tokens[2:]:
        if token in TIME_MARKERS:
            times.append(token)
        else:
            objects.append(token)

    if not objects:
        return tokens

    return [subject, *objects, verb, *times]


def rule_deduplicate(tokens: list[str]) -> list[str]:
    """Drop repeated and empty tokens, keeping first-seen order.

    Args:
        tokens: Tokens after reordering

    Returns:
        Final gloss sequence
    """
    seen = set()
    result = []
    for token in tokens:
        if token and token not in seen:
            seen.add(token)
            result.append(token)
    return result


def apply_all_rules(text: Any) -> list[str]:
    """Apply all grammar rules to English text.

    Applies rules in the correct order:
    1. Substitute phrases
    2. Tokenize
    3. Normalize
    4. Remove stop words
    5. Reorder SVO -> SOV
    6. Deduplicate

    Args:
        text: English utterance (partial speech results are fine)

    Returns:
        List of ISL gloss tokens; empty for empty or non-string input
    """
    if not isinstance(text, str) or not text.strip():
        return []

    substituted = substitute_phrases(text)
    tokens = tokenize(substituted)
    tokens = normalize_tokens(tokens)
    tokens = rule_remove_stop_words(tokens)
    tokens = rule_svo_to_sov(tokens)
    glosses = rule_deduplicate(tokens)

    logger.debug("Translated %r -> %s", text, glosses)
    return glosses
