from datetime import date, datetime
from typing import Iterable, Optional, Union

import pandas as pd

from src.analyzer.models import PricePoint


def format_market_cap(market_cap: Optional[float]) -> str:
    if not market_cap:
        return "N/A"

    if market_cap >= 1e12:
        return f"${market_cap / 1e12:.2f}T"
    if market_cap >= 1e9:
        return f"${market_cap / 1e9:.2f}B"
    if market_cap >= 1e6:
        return f"${market_cap / 1e6:.2f}M"
    return f"${market_cap:,.0f}"


def format_relative_date(value: Union[str, date, None], today: Optional[date] = None) -> str:
    """
    "Today", "Yesterday", "N days ago" within a week, else the date itself.
    """
    if not value:
        return ""

    if isinstance(value, datetime):
        day = value.date()
    elif isinstance(value, date):
        day = value
    else:
        try:
            day = datetime.fromisoformat(str(value).replace("Z", "+00:00")[:19]).date()
        except ValueError:
            return str(value)

    today = today or date.today()
    diff = (today - day).days

    if diff == 0:
        return "Today"
    if diff == 1:
        return "Yesterday"
    if 1 < diff < 7:
        return f"{diff} days ago"
    return day.isoformat()


def truncate_text(text: Optional[str], max_length: int) -> Optional[str]:
    if not text or len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def series_to_frame(series: Iterable[PricePoint]) -> pd.DataFrame:
    rows = [p.to_dict() for p in series]
    if not rows:
        return pd.DataFrame(columns=["date", "price", "volume", "high", "low"])

    df = pd.DataFrame(rows)
    df["date"] = pd.to_datetime(df["date"])
    return df.sort_values("date").reset_index(drop=True)
