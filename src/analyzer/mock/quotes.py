import math
import random
from typing import Optional

from src.analyzer.models import CompanyProfile

KNOWN_PROFILES = {
    "AAPL": {
        "name": "Apple Inc.",
        "price": 175.25,
        "market_cap": 2_800_000_000_000,
        "sector": "Technology",
        "industry": "Consumer Electronics",
        "description": (
            "Apple Inc. designs, manufactures, and markets smartphones, personal "
            "computers, tablets, wearables, and accessories worldwide."
        ),
    },
    "TSLA": {
        "name": "Tesla Inc.",
        "price": 248.50,
        "market_cap": 780_000_000_000,
        "sector": "Consumer Discretionary",
        "industry": "Auto Manufacturers",
        "description": (
            "Tesla, Inc. designs, develops, manufactures, leases, and sells electric "
            "vehicles, and energy generation and storage systems."
        ),
    },
    "GOOGL": {
        "name": "Alphabet Inc.",
        "price": 138.75,
        "market_cap": 1_700_000_000_000,
        "sector": "Technology",
        "industry": "Internet Content & Information",
        "description": (
            "Alphabet Inc. provides online advertising services in the United States, "
            "Europe, the Middle East, Africa, the Asia-Pacific, Canada, and Latin America."
        ),
    },
    "MSFT": {
        "name": "Microsoft Corporation",
        "price": 415.20,
        "market_cap": 3_100_000_000_000,
        "sector": "Technology",
        "industry": "Software Infrastructure",
        "description": (
            "Microsoft Corporation develops, licenses, and supports software, services, "
            "devices, and solutions worldwide."
        ),
    },
    "NVDA": {
        "name": "NVIDIA Corporation",
        "price": 465.85,
        "market_cap": 1_150_000_000_000,
        "sector": "Technology",
        "industry": "Semiconductors",
        "description": (
            "NVIDIA Corporation operates as a computing company in the United States, "
            "Taiwan, China, Hong Kong, and internationally."
        ),
    },
    "AMZN": {
        "name": "Amazon.com Inc.",
        "price": 155.30,
        "market_cap": 1_600_000_000_000,
        "sector": "Consumer Discretionary",
        "industry": "Internet Retail",
        "description": (
            "Amazon.com, Inc. engages in the retail sale of consumer products, "
            "advertising, and subscription services through online and physical "
            "stores in North America and internationally."
        ),
    },
}

MIN_PRICE = 50.0
PRICE_RANGE = 200.0
MIN_MARKET_CAP = 50_000_000_000
MARKET_CAP_RANGE = 1_000_000_000_000


class MockQuoteGenerator:
    def __init__(self, rng: Optional[random.Random] = None, known=None):
        self.rng = rng or random.Random()
        self.known = KNOWN_PROFILES if known is None else known

    def generate(self, symbol: str) -> CompanyProfile:
        entry = self.known.get(symbol)
        if entry:
            return CompanyProfile(symbol=symbol, **entry)

        # truncate to cents so the 2-decimal price stays below the upper bound
        raw = MIN_PRICE + self.rng.random() * PRICE_RANGE
        price = math.floor(raw * 100) / 100

        return CompanyProfile(
            symbol=symbol,
            name=f"{symbol} Corporation",
            price=price,
            market_cap=int(MIN_MARKET_CAP + self.rng.random() * MARKET_CAP_RANGE),
            sector="Unknown",
            industry="Unknown",
            description=(
                f"{symbol} is a publicly traded company. "
                "This is mock data for demonstration purposes."
            ),
        )
