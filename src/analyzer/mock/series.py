import random
from datetime import date, timedelta
from typing import Optional

from src.analyzer.models import PricePoint

DAILY_VOLATILITY = 0.02
PRICE_FLOOR = 10.0
MIN_VOLUME = 5_000_000
VOLUME_RANGE = 50_000_000
BAND = 0.02


class MockSeriesGenerator:
    """
    Daily random walk ending today.

    Produces ``days + 1`` points, oldest first. Each step moves the price by
    a uniform draw in [-2%, +2%] and clamps it at 10. ``high``/``low`` are a
    fixed +/-2% of that day's rounded price, not an intraday range.
    """

    def __init__(self, rng: Optional[random.Random] = None, days: int = 30):
        self.rng = rng or random.Random()
        self.days = days

    def generate(self, symbol: str, today: Optional[date] = None) -> list[PricePoint]:
        today = today or date.today()
        base_price = 50.0 + self.rng.random() * 200.0

        points = []
        for offset in range(self.days, -1, -1):
            change = self.rng.uniform(-DAILY_VOLATILITY, DAILY_VOLATILITY)
            base_price = max(base_price * (1 + change), PRICE_FLOOR)
            price = round(base_price, 2)

            points.append(
                PricePoint(
                    date=today - timedelta(days=offset),
                    price=price,
                    volume=MIN_VOLUME + self.rng.randrange(VOLUME_RANGE),
                    high=round(price * (1 + BAND), 2),
                    low=round(price * (1 - BAND), 2),
                )
            )
        return points
