"""
Stock, index and company fundamentals endpoints.
"""
from typing import Optional

from ..outcome import RequestOutcome
from .base import EndpointGroup, compact


class Stock(EndpointGroup):
    """Wrappers for the stock/ endpoints."""

    base = "stock/"

    def get_symbols_list(
        self,
        exchange: Optional[str] = None,
        country: Optional[str] = None,
        sector: Optional[str] = None,
        indices: Optional[str] = None,
    ) -> RequestOutcome:
        """
        List stock symbols.

        Args:
            exchange: NASDAQ, NYSE, BSE
            country: united-states, japan, india
            sector: technology, finance, energy
            indices: DJ:DJI, NASDAQ:IXIC
        """
        return self._request("list", compact({}, exchange=exchange, country=country, sector=sector, indices=indices))

    # Indices

    def get_indices_list(self, country: Optional[str] = None, exchange: Optional[str] = None) -> RequestOutcome:
        return self._request("indices", compact({}, country=country, exchange=exchange))

    def get_indices_latest(
        self,
        symbol: Optional[str] = None,
        country: Optional[str] = None,
        exchange: Optional[str] = None,
    ) -> RequestOutcome:
        return self._request("indices_latest", compact({}, symbol=symbol, country=country, exchange=exchange))

    # Latest prices

    def get_latest_price(  # type: ignore[override]
        self,
        symbol: str,
        period: str = "1D",
        exchange: Optional[str] = None,
        get_profile: bool = False,
    ) -> RequestOutcome:
        """Latest stock prices; get_profile is always sent as 1 or 0."""
        params = compact(
            {"symbol": symbol, "period": period, "get_profile": 1 if get_profile else 0},
            exchange=exchange,
        )
        return self._request("latest", params)

    def get_all_prices(self, exchange: str, period: str = "1D") -> RequestOutcome:  # type: ignore[override]
        return self._request("latest", {"exchange": exchange, "period": period})

    def get_latest_by_country(self, country: str, sector: Optional[str] = None, period: str = "1D") -> RequestOutcome:
        return self._request("latest", compact({"country": country, "period": period}, sector=sector))

    def get_latest_by_indices(self, indices: str, period: str = "1D") -> RequestOutcome:
        return self._request("latest", {"indices": indices, "period": period})

    # Financial data

    def get_earnings(self, symbol: str, duration: str = "both") -> RequestOutcome:
        """EPS and revenue; duration is annual, interim or both."""
        return self._request("earnings", {"symbol": symbol, "duration": duration})

    def get_revenue(self, symbol: str) -> RequestOutcome:
        """Revenue segmentation by business and region."""
        return self._request("revenue", {"symbol": symbol})

    def get_dividends(self, symbol: str, format: str = "plain") -> RequestOutcome:
        return self._request("dividend", {"symbol": symbol, "format": format})

    def get_balance_sheet(self, symbol: str, duration: str = "annual", format: str = "plain") -> RequestOutcome:
        return self._request("balance_sheet", {"symbol": symbol, "duration": duration, "format": format})

    def get_income_statements(self, symbol: str, duration: str = "annual", format: str = "plain") -> RequestOutcome:
        return self._request("income_statements", {"symbol": symbol, "duration": duration, "format": format})

    def get_cash_flow(self, symbol: str, duration: str = "annual", format: str = "plain") -> RequestOutcome:
        return self._request("cash_flow", {"symbol": symbol, "duration": duration, "format": format})

    def get_statistics(self, symbol: str, duration: str = "annual") -> RequestOutcome:
        return self._request("statistics", {"symbol": symbol, "duration": duration})

    def get_forecast(self, symbol: str) -> RequestOutcome:
        """Analyst price target forecast."""
        return self._request("forecast", {"symbol": symbol})

    def get_stock_data(
        self,
        symbol: str,
        data_column: str = "profile,earnings,dividends",
        duration: str = "annual",
        format: str = "plain",
    ) -> RequestOutcome:
        """
        Several financial datasets in one call.

        Args:
            symbol: Stock symbol (NASDAQ:AAPL)
            data_column: Comma-separated subset of earnings, revenue, profile, dividends,
                balance_sheet, income_statements, statistics, cash_flow
            duration: annual or interim
            format: plain or inherit
        """
        return self._request("stock_data", {
            "symbol": symbol,
            "data_column": data_column,
            "duration": duration,
            "format": format,
        })

    # Top movers

    def get_top_gainers(
        self,
        exchange: Optional[str] = None,
        limit: int = 20,
        period: str = "1D",
        country: Optional[str] = None,
    ) -> RequestOutcome:
        return self.get_sorted_data("active.chp", "desc", limit, exchange, country, period)

    def get_top_losers(
        self,
        exchange: Optional[str] = None,
        limit: int = 20,
        period: str = "1D",
        country: Optional[str] = None,
    ) -> RequestOutcome:
        return self.get_sorted_data("active.chp", "asc", limit, exchange, country, period)

    def get_most_active(
        self,
        exchange: Optional[str] = None,
        limit: int = 20,
        period: str = "1D",
        country: Optional[str] = None,
    ) -> RequestOutcome:
        return self.get_sorted_data("active.v", "desc", limit, exchange, country, period)

    def get_sorted_data(
        self,
        sort_column: str,
        sort_direction: str = "desc",
        limit: int = 20,
        exchange: Optional[str] = None,
        country: Optional[str] = None,
        period: str = "1D",
    ) -> RequestOutcome:
        params = compact(
            {
                "period": period,
                "sort_by": f"{sort_column}_{sort_direction}",
                "per_page": limit,
                "merge": "latest",
            },
            exchange=exchange,
            country=country,
        )
        return self.advanced(params)

    def search(self, query: str, exchange: Optional[str] = None, country: Optional[str] = None) -> RequestOutcome:
        return self._request("list", compact({"search": query}, exchange=exchange, country=country))

    # Sector / country screens

    def get_by_sector(self, sector: str, limit: int = 100, exchange: Optional[str] = None) -> RequestOutcome:
        return self.advanced(compact({"sector": sector, "per_page": limit, "merge": "latest"}, exchange=exchange))

    def get_by_country(self, country: str, limit: int = 100, exchange: Optional[str] = None) -> RequestOutcome:
        return self.advanced(compact({"country": country, "per_page": limit, "merge": "latest"}, exchange=exchange))
