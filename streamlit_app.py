import altair as alt
import streamlit as st

from src.analyzer.config import settings
from src.analyzer.errors import SymbolValidationError
from src.analyzer.formatting import (
    format_market_cap,
    format_relative_date,
    series_to_frame,
    truncate_text,
)
from src.analyzer.models import NEGATIVE, POSITIVE
from src.analyzer.service import AnalysisService

SENTIMENT_BADGES = {
    POSITIVE: "🟢",
    NEGATIVE: "🔴",
}


def render_chart(df, symbol: str, metric: str):
    if metric == "Volume":
        field, title, color = "volume", "Volume", "#764ba2"
    else:
        field, title, color = "price", "Price ($)", "#667eea"

    chart = (
        alt.Chart(df)
        .mark_area(line={"color": color}, color=color, opacity=0.15)
        .encode(
            x=alt.X("date:T", title="Date"),
            y=alt.Y(f"{field}:Q", title=title, scale=alt.Scale(zero=False)),
            tooltip=["date:T", "price:Q", "high:Q", "low:Q", "volume:Q"],
        )
        .properties(title=f"{symbol} {metric} (30 Days)")
    )
    st.altair_chart(chart, use_container_width=True)


# ----------------------------
# Page config
# ----------------------------
st.set_page_config(
    page_title="Stock Sentiment Analyzer",
    layout="wide",
)

st.title("📈 Stock Sentiment Analyzer")

if settings.uses_mock_data:
    st.info("🧪 MOCK DATA MODE: set FMP_API_KEY in .env to use live provider data.")

# built per run so sessions never share a random source
service = AnalysisService.from_settings(settings)

symbol = st.text_input("Stock symbol", value="AAPL", max_chars=10).strip().upper()
run = st.button("🔍 Analyze", key="analyze_btn")

if run or symbol:
    try:
        result = service.analyze(symbol)
    except SymbolValidationError as e:
        st.warning(str(e))
        st.stop()
    except Exception as e:
        st.error(f"Analysis failed: {e}")
        st.stop()

    data = result.to_dict()

    # ----------------------------
    # Company snapshot
    # ----------------------------
    st.subheader(f"🏢 {data['name']} ({data['symbol']})")
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Price", f"${data['price']}")
    c2.metric("Market Cap", format_market_cap(data["marketCap"]))
    c3.metric("Sector", data["sector"])
    c4.metric("Sentiment", data["sentimentScore"])

    if data.get("website"):
        st.caption(data["website"])
    st.write(truncate_text(data["description"], 400))

    # ----------------------------
    # Summary
    # ----------------------------
    st.subheader("🧠 Summary")
    st.write(data["summary"])

    # ----------------------------
    # Chart
    # ----------------------------
    st.subheader("📊 Price Chart")
    metric = st.radio("Series", ["Price", "Volume"], horizontal=True, key="chart_metric")
    df = series_to_frame(service.price_series(symbol))
    if df.empty:
        st.info("No chart data available.")
    else:
        render_chart(df, data["symbol"], metric)

    # ----------------------------
    # News
    # ----------------------------
    st.subheader("📰 Recent News")
    if not data["news"]:
        st.info("No recent news.")
    for article in data["news"]:
        badge = SENTIMENT_BADGES.get(article["sentiment"], "⚪")
        title = article["title"]
        if article.get("url"):
            title = f"[{title}]({article['url']})"
        st.markdown(f"{badge} **{title}**")
        st.caption(
            f"{article['source']} | {format_relative_date(article['publishedDate'])} "
            f"| {article['sentiment']}"
        )

    st.caption(f"Data source: {data['dataSource']} | Generated {data['timestamp']}")
