# Translation package - English to ISL gloss conversion
"""
Convert English text to Indian Sign Language gloss sequences using
rule tables.

Example usage:
    from islbridge.translation import translate, GlossConverter

    # Quick translation
    translate("I eat rice")  # ["i", "rice", "eat"]

    # With catalog information
    result = GlossConverter().translate("I eat mangoes")
    print(result.report.missing)      # ["mangoes"]
    print(result.suggestions)         # {"mangoes": [...]}
"""

from .gloss_converter import (
    GlossConverter,
    GlossSequence,
    translate,
)
from .grammar_rules import (
    apply_all_rules,
    normalize_tokens,
    normalize_word,
    rule_deduplicate,
    rule_remove_stop_words,
    rule_svo_to_sov,
    substitute_phrases,
    tokenize,
)
from .catalog import (
    DEFAULT_CATALOG,
    CatalogReport,
    SignCatalog,
    filter_available,
    is_sign_available,
    suggest_alternatives,
)
from .playback import (
    BASE_SIGN_DURATION_MS,
    PlaybackPlan,
    PlaybackStep,
    build_playback_plan,
    sign_duration_ms,
)

__all__ = [
    # Main API
    "translate",
    "GlossConverter",
    "GlossSequence",
    # Grammar
    "apply_all_rules",
    "substitute_phrases",
    "tokenize",
    "normalize_word",
    "normalize_tokens",
    "rule_remove_stop_words",
    "rule_svo_to_sov",
    "rule_deduplicate",
    # Catalog
    "DEFAULT_CATALOG",
    "SignCatalog",
    "CatalogReport",
    "is_sign_available",
    "filter_available",
    "suggest_alternatives",
    # Playback
    "BASE_SIGN_DURATION_MS",
    "PlaybackPlan",
    "PlaybackStep",
    "build_playback_plan",
    "sign_duration_ms",
]
