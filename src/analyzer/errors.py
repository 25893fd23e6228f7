class AnalyzerError(Exception):
    """Base class for analysis failures."""


class SymbolValidationError(AnalyzerError):
    def __init__(self, message: str = "Stock symbol is required"):
        super().__init__(message)


class UpstreamUnavailable(AnalyzerError):
    """
    The market data provider could not be used: no credential, network
    failure, timeout, non-2xx status or an unreadable payload.
    Always recovered locally by switching to mock data.
    """


class SymbolNotFound(UpstreamUnavailable):
    def __init__(self, symbol: str):
        super().__init__(f"No data found for symbol: {symbol}")
        self.symbol = symbol
