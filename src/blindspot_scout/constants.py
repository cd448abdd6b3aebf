"""Project-wide constants."""

# -- Quality scoring --------------------------------------------------------
QUALITY_THRESHOLD: float = 0.5  # overall_score >= threshold is high quality

RECENCY_WEIGHT: float = 0.4
RELEVANCE_WEIGHT: float = 0.4
SOURCE_WEIGHT: float = 0.2

# Reputation per source category; must stay peer-reviewed >= mixed >= preprint >= unknown
SOURCE_SCORES: dict[str, float] = {
    "PubMed": 0.9,
    "GoogleScholar": 0.7,
    "ArXiv": 0.6,
}
DEFAULT_SOURCE_SCORE: float = 0.5

# (max age in years, score); older papers fall through to the linear decay
RECENCY_STEPS: tuple[tuple[int, float], ...] = (
    (2, 1.0),
    (5, 0.8),
    (10, 0.6),
    (15, 0.4),
)
RECENCY_DECAY_YEARS: int = 20
MIN_RECENCY_SCORE: float = 0.2

NEUTRAL_RELEVANCE_SCORE: float = 0.5
MIN_QUERY_TERM_LENGTH: int = 4
TITLE_MATCH_POINTS: int = 2
ABSTRACT_MATCH_POINTS: int = 1

# Query words too generic to say anything about relevance
GENERIC_QUERY_TERMS: frozenset[str] = frozenset(
    {
        "disease",
        "disorder",
        "syndrome",
    }
)

# -- Query defaults ---------------------------------------------------------
DEFAULT_MIN_YEAR: int = 2000
DEFAULT_LANGUAGE: str = "en"

# Bare disease names that conventionally carry a possessive "'s disease"
POSSESSIVE_DISEASES: tuple[str, ...] = ("alzheimer", "parkinson", "huntington", "crohn")

# -- Demographic keyword tables ---------------------------------------------
# bucket -> case-insensitive substrings; a paper counts once per bucket
NOT_SPECIFIED: str = "not_specified"

AGE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "0-18": ("child", "pediatric", "adolescent", "infant", "youth", "under 18"),
    "18-65": ("adult", "young adult", "middle-aged", "18-65", "working age"),
    "65-75": ("elderly", "older adult", "65-75", "senior", "aged 65"),
    ">75": ("very old", "over 75", "aged 75", ">75", "oldest old", "over 80"),
}

GENDER_KEYWORDS: dict[str, tuple[str, ...]] = {
    "male": ("male", "men ", " men", "man ", "gentleman"),
    "female": ("female", "women", "woman", "lady", "ladies"),
}

PREGNANCY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "pregnant": ("pregnan", "gestat", "maternal", "expectant"),
}

GEOGRAPHY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "North America": (
        "united states",
        "usa",
        "u.s.",
        "canada",
        "mexico",
        "american",
    ),
    "Europe": (
        "europe",
        "uk",
        "united kingdom",
        "germany",
        "france",
        "italy",
        "spain",
        "european",
    ),
    "Asia": (
        "asia",
        "china",
        "japan",
        "india",
        "korea",
        "asian",
        "chinese",
        "japanese",
    ),
    "Other": ("africa", "australia", "south america", "brazil", "middle east"),
}

# Buckets reported in coverage that keyword matching never fills
PREGNANCY_EXTRA_BUCKETS: tuple[str, ...] = ("not_pregnant",)

# -- Blind spot thresholds --------------------------------------------------
LOW_AGE_COVERAGE_PCT: int = 10  # 0 < x < 10 is "very low"
GENDER_UNSPECIFIED_MAX_PCT: int = 70
GEOGRAPHY_SPECIFIED_MIN_PCT: int = 30

# -- Synthesis --------------------------------------------------------------
DEFAULT_TOP_BLIND_SPOTS: int = 5
MAX_RECOMMENDATIONS: int = 5
MAX_SUMMARY_CRITICAL_GAPS: int = 3

# -- LLM extraction ---------------------------------------------------------
DEFAULT_LLM_MAX_CONCURRENCY: int = 4
LLM_MAX_TOKENS: int = 1024
LLM_ABSTRACT_CHAR_LIMIT: int = 4000
