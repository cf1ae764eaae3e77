"""
Shared endpoint wrappers for the forex, crypto and stock API groups.
"""
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..outcome import RequestOutcome

if TYPE_CHECKING:
    from ..client import FcsApi


def compact(params: Dict[str, Any], **optional: Any) -> Dict[str, Any]:
    """Return params extended with the optional values that are set (falsy values are left out)."""
    merged = dict(params)
    for key, value in optional.items():
        if value:
            merged[key] = value
    return merged


class EndpointGroup:
    """Base for one API resource family (forex/, crypto/, stock/)."""

    base = ""

    def __init__(self, api: "FcsApi"):
        self.api = api

    def _request(self, operation: str, params: Optional[Dict[str, Any]] = None) -> RequestOutcome:
        return self.api.request(f"{self.base}{operation}", params or {})

    # Latest prices

    def get_latest_price(
        self,
        symbol: str,
        period: str = "1D",
        symbol_type: Optional[str] = None,
        exchange: Optional[str] = None,
        get_profile: bool = False,
    ) -> RequestOutcome:
        """
        Get latest prices for symbols.

        Args:
            symbol: Symbol(s), comma-separated, optionally exchange-prefixed (FX:EURUSD)
            period: 1m, 5m, 15m, 30m, 1h, 4h, 1D, 1W, 1M
            symbol_type: Type filter (forex/commodity, crypto/coin)
            exchange: Exchange filter
            get_profile: Include profile info
        """
        params = compact(
            {"symbol": symbol, "period": period},
            type=symbol_type,
            exchange=exchange,
            get_profile=1 if get_profile else None,
        )
        return self._request("latest", params)

    def get_all_prices(self, exchange: str, period: str = "1D", symbol_type: Optional[str] = None) -> RequestOutcome:
        """Get all latest prices on one exchange."""
        return self._request("latest", compact({"exchange": exchange, "period": period}, type=symbol_type))

    # Historical data

    def get_history(
        self,
        symbol: str,
        period: str = "1D",
        length: int = 300,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        page: int = 1,
        is_chart: bool = False,
    ) -> RequestOutcome:
        """
        Get historical OHLCV candles.

        Args:
            symbol: Single symbol
            period: Candle period
            length: Number of candles (max 10000)
            from_date: Start date (YYYY-MM-DD or unix timestamp)
            to_date: End date (YYYY-MM-DD or unix timestamp)
            page: Page number
            is_chart: Return chart-friendly [timestamp, o, h, l, c, v] rows
        """
        params = compact(
            {"symbol": symbol, "period": period, "length": length, "page": page},
            **{"from": from_date, "to": to_date, "is_chart": 1 if is_chart else None},
        )
        return self._request("history", params)

    def get_profile(self, symbol: str) -> RequestOutcome:
        return self._request("profile", {"symbol": symbol})

    def get_exchanges(self, symbol_type: Optional[str] = None, sub_type: Optional[str] = None) -> RequestOutcome:
        return self._request("exchanges", compact({}, type=symbol_type, sub_type=sub_type))

    def advanced(self, params: Dict[str, Any]) -> RequestOutcome:
        """
        Advanced query with filters, sorting, pagination and merging.

        Common keys: type, symbol, exchange, period, merge (latest,perf,tech,profile,meta),
        sort_by (active.chp_desc), filters ({"active.c_gt": 1.1}), per_page, page.
        """
        return self._request("advance", params)

    # Technical analysis

    def get_moving_averages(self, symbol: str, period: str = "1D", exchange: Optional[str] = None) -> RequestOutcome:
        return self._request("ma_avg", compact({"symbol": symbol, "period": period}, exchange=exchange))

    def get_indicators(self, symbol: str, period: str = "1D", exchange: Optional[str] = None) -> RequestOutcome:
        """RSI, MACD, Stochastic, ADX, ATR and friends."""
        return self._request("indicators", compact({"symbol": symbol, "period": period}, exchange=exchange))

    def get_pivot_points(self, symbol: str, period: str = "1D", exchange: Optional[str] = None) -> RequestOutcome:
        return self._request("pivot_points", compact({"symbol": symbol, "period": period}, exchange=exchange))

    def get_performance(self, symbol: str, exchange: Optional[str] = None) -> RequestOutcome:
        """Historical highs/lows, percentage changes and volatility."""
        return self._request("performance", compact({"symbol": symbol}, exchange=exchange))

    def multi_url(self, urls: List[str], base: Optional[str] = None) -> RequestOutcome:
        """
        Run several API requests server-side in one call.

        Args:
            urls: Endpoint URLs, sent as url[0], url[1], ...
            base: Common URL prefix for all entries
        """
        return self._request("multi_url", compact({"url": list(urls)}, base=base))
