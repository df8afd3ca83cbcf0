"""ISL rule tables.

Static lookup tables driving the English to ISL gloss pipeline. Every table
is built once at import time and exposed read-only: dictionaries through
``MappingProxyType``, sets as ``frozenset``, ordered lists as tuples.

Table-declaration order matters for PHRASE_RULES (rules are applied in
the order written here) and for AVAILABLE_SIGNS (suggestions are returned
in catalog order).
"""

from types import MappingProxyType

# Multi-word English phrases and their ISL-ordered equivalents.
# Applied before tokenization, in declaration order.
_PHRASE_RULES = {
    # Greetings and common phrases
    "how are you": "how you",
    "how do you do": "how you",
    "nice to meet you": "nice meet you",
    "pleased to meet you": "happy meet you",
    "good morning": "morning good",
    "good afternoon": "afternoon good",
    "good evening": "evening good",
    "good night": "night good",
    "see you later": "see you later",
    "see you soon": "see you soon",
    "take care": "careful",
    "excuse me": "excuse",
    "i am sorry": "sorry",
    "thank you": "thank",
    "thanks": "thank",
    "you are welcome": "welcome",
    "no problem": "no problem",

    # Questions
    "what are you doing": "what you do",
    "what do you do": "what work you",
    "where are you going": "where you go",
    "where do you live": "where you live",
    "where do you work": "where you work",
    "why are you": "why you",
    "why do you": "why you",
    "when are you": "when you",
    "when do you": "when you",
    "how old are you": "age you how much",
    "what time is it": "time what",
    "what is your name": "name you what",
    "what is this": "this what",
    "what is that": "that what",
    "who is this": "this who",
    "who is that": "that who",
    "how much does this cost": "this price how much",
    "how much is this": "this price how much",
    "can you help me": "you help me can",
    "do you understand": "you understand",
    "do you know": "you know",

    # Common expressions
    "i need help": "help need me",
    "i want to go": "go want me",
    "i like this": "this like me",
    "i love you": "love you me",
    "i miss you": "miss you me",
    "i am hungry": "hungry me",
    "i am thirsty": "thirsty me",
    "i am tired": "tired me",
    "i am happy": "happy me",
    "i am sad": "sad me",
    "i am angry": "angry me",
    "i am fine": "fine me",
    "i am busy": "busy me",
    "i am ready": "ready me",
    "i feel good": "feel good me",
    "i feel bad": "feel bad me",

    # Time expressions
    "right now": "now",
    "at the moment": "now",
    "in the morning": "morning",
    "in the afternoon": "afternoon",
    "in the evening": "evening",
    "at night": "night",
    "last night": "night past",
    "last week": "week past",
    "last month": "month past",
    "last year": "year past",
    "next week": "week future",
    "next month": "month future",
    "next year": "year future",
    "this week": "week this",
    "this month": "month this",
    "this year": "year this",

    # Location expressions
    "at home": "home",
    "at school": "school",
    "at work": "work",
    "in the house": "house inside",
    "outside the house": "house outside",
    "on the table": "table on",
    "under the table": "table under",
    "next to": "near",
    "close to": "near",
    "far from": "far",

    # Weather
    "it is raining": "rain",
    "it is sunny": "sun",
    "it is cloudy": "cloud",
    "it is hot": "hot",
    "it is cold": "cold",
    "it is windy": "wind",

    # Food and drink
    "i am eating": "eat me",
    "i am drinking": "drink me",
    "i want to eat": "eat want me",
    "i want to drink": "drink want me",

    # Family
    "my family": "family my",
    "my mother": "mother my",
    "my father": "father my",
    "my brother": "brother my",
    "my sister": "sister my",
    "my friend": "friend my",
}

# Inflected or contracted surface form -> canonical lemma tokens.
# No canonical token may itself be a key, so normalization is idempotent.
_LEMMA_RULES = {
    # Verb forms to base form
    "decided": ("decide",),
    "deciding": ("decide",),
    "decides": ("decide",),
    "running": ("run",),
    "runs": ("run",),
    "ran": ("run",),
    "walking": ("walk",),
    "walks": ("walk",),
    "walked": ("walk",),
    "eating": ("eat",),
    "eats": ("eat",),
    "ate": ("eat",),
    "eaten": ("eat",),
    "drinking": ("drink",),
    "drinks": ("drink",),
    "drank": ("drink",),
    "sleeping": ("sleep",),
    "sleeps": ("sleep",),
    "slept": ("sleep",),
    "working": ("work",),
    "works": ("work",),
    "worked": ("work",),
    "playing": ("play",),
    "plays": ("play",),
    "played": ("play",),
    "reading": ("read",),
    "reads": ("read",),
    "writing": ("write",),
    "writes": ("write",),
    "wrote": ("write",),
    "written": ("write",),
    "studying": ("study",),
    "studies": ("study",),
    "studied": ("study",),
    "teaching": ("teach",),
    "teaches": ("teach",),
    "taught": ("teach",),
    "learning": ("learn",),
    "learns": ("learn",),
    "learned": ("learn",),
    "learnt": ("learn",),
    "coming": ("come",),
    "comes": ("come",),
    "came": ("come",),
    "going": ("go",),
    "goes": ("go",),
    "went": ("go",),
    "gone": ("go",),
    "seeing": ("see",),
    "sees": ("see",),
    "saw": ("see",),
    "seen": ("see",),
    "looking": ("look",),
    "looks": ("look",),
    "looked": ("look",),
    "watching": ("watch",),
    "watches": ("watch",),
    "watched": ("watch",),
    "talking": ("talk",),
    "talks": ("talk",),
    "talked": ("talk",),
    "speaking": ("speak",),
    "speaks": ("speak",),
    "spoke": ("speak",),
    "spoken": ("speak",),
    "thinking": ("think",),
    "thinks": ("think",),
    "thought": ("think",),
    "knowing": ("know",),
    "knows": ("know",),
    "knew": ("know",),
    "known": ("know",),
    "understands": ("understand",),
    "understood": ("understand",),
    "feeling": ("feel",),
    "feels": ("feel",),
    "felt": ("feel",),
    "helping": ("help",),
    "helps": ("help",),
    "helped": ("help",),
    "buying": ("buy",),
    "buys": ("buy",),
    "bought": ("buy",),
    "selling": ("sell",),
    "sells": ("sell",),
    "sold": ("sell",),
    "giving": ("give",),
    "gives": ("give",),
    "gave": ("give",),
    "given": ("give",),
    "taking": ("take",),
    "takes": ("take",),
    "took": ("take",),
    "taken": ("take",),
    "making": ("make",),
    "makes": ("make",),
    "made": ("make",),
    "doing": ("do",),
    "does": ("do",),
    "did": ("do",),
    "done": ("do",),
    "having": ("have",),
    "has": ("have",),
    "had": ("have",),
    "being": ("be",),
    "been": ("be",),
    "getting": ("get",),
    "gets": ("get",),
    "got": ("get",),
    "wanting": ("want",),
    "wants": ("want",),
    "wanted": ("want",),
    "needing": ("need",),
    "needs": ("need",),
    "needed": ("need",),
    "loving": ("love",),
    "loves": ("love",),
    "loved": ("love",),
    "liking": ("like",),
    "likes": ("like",),
    "liked": ("like",),
    "hating": ("hate",),
    "hates": ("hate",),
    "hated": ("hate",),
    "trying": ("try",),
    "tries": ("try",),
    "tried": ("try",),
    "starting": ("start",),
    "starts": ("start",),
    "started": ("start",),
    "stopping": ("stop",),
    "stops": ("stop",),
    "stopped": ("stop",),
    "finishing": ("finish",),
    "finishes": ("finish",),
    "finished": ("finish",),
    "sitting": ("sit",),
    "sits": ("sit",),
    "sat": ("sit",),
    "standing": ("stand",),
    "stands": ("stand",),
    "stood": ("stand",),
    "asking": ("ask",),
    "asks": ("ask",),
    "asked": ("ask",),
    "telling": ("tell",),
    "tells": ("tell",),
    "told": ("tell",),
    "showing": ("show",),
    "shows": ("show",),
    "showed": ("show",),
    "shown": ("show",),
    "hearing": ("hear",),
    "hears": ("hear",),
    "heard": ("hear",),
    "waiting": ("wait",),
    "waits": ("wait",),
    "waited": ("wait",),
    "remembering": ("remember",),
    "remembers": ("remember",),
    "remembered": ("remember",),
    "forgetting": ("forget",),
    "forgets": ("forget",),
    "forgot": ("forget",),
    "forgotten": ("forget",),
    "listening": ("listen",),
    "listens": ("listen",),
    "listened": ("listen",),
    "visiting": ("visit",),
    "visits": ("visit",),
    "visited": ("visit",),

    # Plural to singular
    "books": ("book",),
    "cars": ("car",),
    "dogs": ("dog",),
    "cats": ("cat",),
    "houses": ("house",),
    "people": ("person",),
    "children": ("child",),
    "men": ("man",),
    "women": ("woman",),
    "boys": ("boy",),
    "girls": ("girl",),
    "babies": ("baby",),
    "friends": ("friend",),
    "students": ("student",),
    "teachers": ("teacher",),
    "parents": ("parent",),
    "brothers": ("brother",),
    "sisters": ("sister",),
    "families": ("family",),
    "countries": ("country",),
    "cities": ("city",),
    "schools": ("school",),
    "hospitals": ("hospital",),
    "restaurants": ("restaurant",),
    "shops": ("shop",),
    "parks": ("park",),
    "phones": ("phone",),
    "computers": ("computer",),
    "fruits": ("fruit",),
    "vegetables": ("vegetable",),
    "movies": ("movie",),
    "games": ("game",),
    "questions": ("question",),
    "answers": ("answer",),
    "problems": ("problem",),
    "solutions": ("solution",),
    "days": ("day",),
    "weeks": ("week",),
    "months": ("month",),
    "years": ("year",),

    # Reflexive pronouns
    "myself": ("me",),
    "yourself": ("you",),
    "himself": ("he",),
    "herself": ("she",),
    "ourselves": ("we",),
    "yourselves": ("you",),
    "themselves": ("they",),

    # Contractions
    "i'm": ("i",),
    "you're": ("you",),
    "he's": ("he",),
    "she's": ("she",),
    "it's": ("it",),
    "we're": ("we",),
    "they're": ("they",),
    "that's": ("that",),
    "i'll": ("i", "will"),
    "you'll": ("you", "will"),
    "he'll": ("he", "will"),
    "she'll": ("she", "will"),
    "we'll": ("we", "will"),
    "they'll": ("they", "will"),
    "i've": ("i",),
    "you've": ("you",),
    "we've": ("we",),
    "they've": ("they",),
    "isn't": ("not",),
    "aren't": ("not",),
    "wasn't": ("not",),
    "weren't": ("not",),
    "don't": ("not",),
    "doesn't": ("not",),
    "didn't": ("not",),
    "won't": ("not", "will"),
    "wouldn't": ("not", "will"),
    "can't": ("not", "can"),
    "cannot": ("not", "can"),
    "couldn't": ("not", "can"),
    "shouldn't": ("not", "should"),
    "mustn't": ("not", "must"),

    # Adverbs to adjectives
    "quickly": ("quick",),
    "slowly": ("slow",),
    "carefully": ("careful",),
    "easily": ("easy",),
    "clearly": ("clear",),
    "loudly": ("loud",),
    "quietly": ("quiet",),
    "happily": ("happy",),
    "sadly": ("sad",),
    "angrily": ("angry",),
    "beautifully": ("beautiful",),
    "strongly": ("strong",),
    "weakly": ("weak",),
}

# Lemmas with no ISL gloss: articles, be/have/do auxiliaries, minor
# prepositions and conjunctions, intensifying adverbs and question words.
STOP_WORDS = frozenset({
    # Articles
    "a", "an", "the",

    # Auxiliary verbs (be, have, do)
    "is", "am", "are", "was", "were", "be", "being", "been",
    "has", "have", "had", "having",
    "do", "does", "did", "doing",

    # Prepositions
    "of", "by", "for", "at", "in", "on", "up", "out", "off", "over", "under", "to",

    # Conjunctions ("and", "but", "or" are kept)
    "so", "because", "since", "as", "while", "when", "if", "unless", "until",

    # Adverbs
    "very", "really", "quite", "rather", "pretty", "fairly", "somewhat",
    "just", "only", "even", "still", "yet", "already", "also", "too",
    "again", "back", "away", "down", "here", "there", "where",

    # Question words
    "how", "what", "why", "who", "which", "whose",
})

# Time markers moved after the verb by the SOV reorderer
TIME_MARKERS = frozenset({
    "yesterday", "today", "tomorrow", "now", "later",
    "before", "after", "past", "future",
    "morning", "afternoon", "evening", "night",
})

# Subjects recognised by the SOV reorderer
SUBJECT_PRONOUNS = frozenset({"i", "you", "he", "she", "we", "they"})

# Verbs recognised by the SOV reorderer
COMMON_VERBS = frozenset({
    "eat", "drink", "see", "watch", "read", "write", "buy", "sell",
    "give", "take", "make", "do", "have", "want", "need", "like",
    "love", "hate", "help", "teach", "learn", "go", "come", "run",
    "walk", "play", "work", "study",
})

# Glosses with a known animation clip, in catalog order
AVAILABLE_SIGNS = (
    # Basic words
    "hello", "hi", "goodbye", "bye", "thank", "please", "sorry", "excuse",
    "yes", "no", "good", "bad", "big", "small", "hot", "cold", "new", "old",

    # Pronouns
    "i", "me", "you", "he", "she", "we", "they",
    "my", "your", "his", "her", "our", "their",

    # Family
    "family", "mother", "father", "brother", "sister", "child", "baby", "friend",

    # Actions
    "eat", "drink", "sleep", "work", "play", "study", "read", "write",
    "walk", "run", "sit", "stand", "go", "come", "see", "look", "hear",
    "talk", "help", "give", "take", "buy", "sell", "make", "do", "have",
    "want", "need", "like", "love", "think", "know", "understand",
    "learn", "teach", "show", "tell", "ask",

    # Time
    "time", "today", "yesterday", "tomorrow", "now", "morning", "afternoon",
    "evening", "night", "week", "month", "year", "past", "future",
    "before", "after",

    # Places
    "home", "school", "hospital", "restaurant", "shop", "park", "city",

    # Food
    "food", "water", "milk", "bread", "rice", "fruit", "vegetable",

    # Colors
    "red", "blue", "green", "yellow", "black", "white", "brown", "pink",

    # Numbers
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",

    # Question words
    "what", "when", "where", "why", "who", "how", "which",

    # Common adjectives
    "happy", "sad", "angry", "tired", "hungry", "thirsty", "sick", "healthy",
    "easy", "difficult", "fast", "slow", "loud", "quiet", "clean", "dirty",

    # Modal verbs
    "can", "will", "should", "must", "may", "might", "could", "would",

    # Common nouns
    "book", "car", "house", "phone", "computer", "money", "clothes",
    "medicine", "dog", "cat", "person", "man", "woman", "boy", "girl",

    # Specific actions
    "decide", "finish", "start", "stop", "try", "remember", "forget",
    "wait", "feel", "touch", "smell", "taste", "watch", "listen",
)

PHRASE_RULES = MappingProxyType(_PHRASE_RULES)
LEMMA_RULES = MappingProxyType(_LEMMA_RULES)
