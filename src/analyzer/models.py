from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

POSITIVE = "Positive"
NEGATIVE = "Negative"
NEUTRAL = "Neutral"

MOCK_DATA_SOURCE = "Mock Data (MVP Demo)"
FMP_DATA_SOURCE = "Financial Modeling Prep"


@dataclass(frozen=True)
class CompanyProfile:
    symbol: str
    name: str
    price: float
    market_cap: int
    sector: Optional[str] = None
    industry: Optional[str] = None
    description: str = ""
    website: Optional[str] = None

    @property
    def formatted_price(self) -> str:
        return f"{self.price:.2f}"


@dataclass(frozen=True)
class NewsArticle:
    title: str
    source: str
    sentiment: str
    published_date: str
    url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "title": self.title,
            "source": self.source,
            "sentiment": self.sentiment,
            "publishedDate": self.published_date,
        }
        if self.url:
            data["url"] = self.url
        return data


@dataclass(frozen=True)
class PricePoint:
    date: date
    price: float
    volume: int
    high: float
    low: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "price": self.price,
            "volume": self.volume,
            "high": self.high,
            "low": self.low,
        }


@dataclass(frozen=True)
class OverallSentiment:
    label: str
    positive_pct: int = 0
    negative_pct: int = 0
    neutral_pct: int = 0
    total: int = 0

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class AnalysisResult:
    profile: CompanyProfile
    news: List[NewsArticle]
    sentiment: OverallSentiment
    summary: str
    data_source: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_mock(self) -> bool:
        return self.data_source == MOCK_DATA_SOURCE

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON body of the analyze endpoint (camelCase keys).
        """
        p = self.profile
        data: Dict[str, Any] = {
            "symbol": p.symbol,
            "name": p.name,
            "price": p.formatted_price,
            "marketCap": p.market_cap,
            "sector": p.sector or "Unknown",
            "industry": p.industry or "Unknown",
            "description": p.description,
        }
        if p.website:
            data["website"] = p.website
        data.update(
            {
                "sentimentScore": self.sentiment.label,
                "news": [a.to_dict() for a in self.news],
                "summary": self.summary,
                "timestamp": self.timestamp.isoformat(timespec="milliseconds").replace(
                    "+00:00", "Z"
                ),
                "dataSource": self.data_source,
            }
        )
        return data
