from streamlit.testing.v1 import AppTest

from src.analyzer.config import settings


def test_dashboard_renders_mock_analysis(monkeypatch):
    monkeypatch.setattr(settings, "fmp_api_key", "demo")

    at = AppTest.from_file("../streamlit_app.py", default_timeout=30)
    at.run()

    assert not at.exception
    assert "Stock Sentiment Analyzer" in at.title[0].value
    assert any("Apple Inc. (AAPL)" in s.value for s in at.subheader)


def test_dashboard_analyzes_new_symbol(monkeypatch):
    monkeypatch.setattr(settings, "fmp_api_key", "demo")

    at = AppTest.from_file("../streamlit_app.py", default_timeout=30)
    at.run()
    first = at.text_input[0]
    first.set_value("zzzz").run()

    assert not at.exception
    assert any("ZZZZ Corporation (ZZZZ)" in s.value for s in at.subheader)
