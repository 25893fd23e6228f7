from src.analyzer.models import NEGATIVE, NEUTRAL, POSITIVE

POSITIVE_KEYWORDS = (
    "strong",
    "beats",
    "exceeds",
    "grows",
    "gains",
    "rises",
    "bullish",
    "positive",
    "upgrade",
    "outperforms",
    "success",
    "partnership",
    "expansion",
    "breakthrough",
)

NEGATIVE_KEYWORDS = (
    "falls",
    "drops",
    "declines",
    "bearish",
    "negative",
    "concerns",
    "volatility",
    "downgrade",
    "misses",
    "disappoints",
    "struggles",
    "challenges",
    "uncertainty",
)


class KeywordSentimentModel:
    """
    Headline classifier based on keyword stems.

    Each keyword counts once if it appears anywhere in the lowercased text,
    including inside a longer word ("upgrades" matches "upgrade").
    """

    def __init__(
        self,
        positive_keywords=POSITIVE_KEYWORDS,
        negative_keywords=NEGATIVE_KEYWORDS,
    ):
        self.positive_keywords = tuple(k.lower() for k in positive_keywords)
        self.negative_keywords = tuple(k.lower() for k in negative_keywords)

    def counts(self, text: str) -> tuple[int, int]:
        lower = (text or "").lower()
        positive = sum(1 for k in self.positive_keywords if k in lower)
        negative = sum(1 for k in self.negative_keywords if k in lower)
        return positive, negative

    def classify(self, text: str) -> str:
        positive, negative = self.counts(text)
        if positive > negative:
            return POSITIVE
        if negative > positive:
            return NEGATIVE
        return NEUTRAL


_default_model = KeywordSentimentModel()


def classify(text: str) -> str:
    return _default_model.classify(text)
