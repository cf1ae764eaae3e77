"""
Forex and commodity endpoints.
"""
from typing import Optional

from ..outcome import RequestOutcome
from .base import EndpointGroup, compact


class Forex(EndpointGroup):
    """Wrappers for the forex/ endpoints."""

    base = "forex/"

    def get_symbols_list(
        self,
        symbol_type: Optional[str] = None,
        sub_type: Optional[str] = None,
        exchange: Optional[str] = None,
    ) -> RequestOutcome:
        """
        List forex symbols.

        Args:
            symbol_type: forex or commodity
            sub_type: spot or synthetic
            exchange: FX, ONA, SFO, FCM
        """
        return self._request("list", compact({}, type=symbol_type, sub_type=sub_type, exchange=exchange))

    def get_commodities(self, symbol: Optional[str] = None, period: str = "1D") -> RequestOutcome:
        """Commodity prices (XAUUSD, XAGUSD, USOIL, BRENT, NGAS)."""
        return self._request("latest", compact({"type": "commodity", "period": period}, symbol=symbol))

    def get_commodity_symbols(self) -> RequestOutcome:
        return self.get_symbols_list("commodity")

    def convert(self, pair1: str, pair2: str, amount: float = 1, symbol_type: Optional[str] = None) -> RequestOutcome:
        """
        Convert an amount between currencies.

        Args:
            pair1: Currency from (EUR)
            pair2: Currency to (USD)
            amount: Amount to convert
            symbol_type: forex or crypto
        """
        return self._request("converter", compact({"pair1": pair1, "pair2": pair2, "amount": amount}, type=symbol_type))

    def get_base_prices(
        self,
        symbol: str,
        symbol_type: str = "forex",
        exchange: Optional[str] = None,
        fallback: bool = False,
    ) -> RequestOutcome:
        """
        Prices of one base currency against all others.

        Args:
            symbol: Single currency code (USD, not USDJPY)
            symbol_type: forex or crypto
            exchange: Exchange filter
            fallback: Fetch from other exchanges if not found
        """
        params = compact(
            {"symbol": symbol, "type": symbol_type},
            exchange=exchange,
            fallback=1 if fallback else None,
        )
        return self._request("base_latest", params)

    def get_cross_rates(
        self,
        symbol: str,
        exchange: Optional[str] = None,
        symbol_type: str = "forex",
        period: str = "1D",
        crossrates: bool = False,
        fallback: bool = False,
    ) -> RequestOutcome:
        """Cross rates with OHLC data for all pairs of a base currency."""
        params = compact(
            {"symbol": symbol, "type": symbol_type, "period": period},
            exchange=exchange,
            crossrates=1 if crossrates else None,
            fallback=1 if fallback else None,
        )
        return self._request("cross", params)

    def get_economy_calendar(
        self,
        symbol: Optional[str] = None,
        country: Optional[str] = None,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> RequestOutcome:
        """Economic calendar events, filtered by currency, country or date range."""
        params = compact({}, symbol=symbol, country=country, **{"from": from_date, "to": to_date})
        return self._request("economy_cal", params)

    # Top movers

    def get_top_gainers(
        self,
        symbol_type: str = "forex",
        limit: int = 20,
        period: str = "1D",
        exchange: Optional[str] = None,
    ) -> RequestOutcome:
        return self.get_sorted_data("active.chp", "desc", limit, symbol_type, exchange, period)

    def get_top_losers(
        self,
        symbol_type: str = "forex",
        limit: int = 20,
        period: str = "1D",
        exchange: Optional[str] = None,
    ) -> RequestOutcome:
        return self.get_sorted_data("active.chp", "asc", limit, symbol_type, exchange, period)

    def get_most_active(
        self,
        symbol_type: str = "forex",
        limit: int = 20,
        period: str = "1D",
        exchange: Optional[str] = None,
    ) -> RequestOutcome:
        return self.get_sorted_data("active.v", "desc", limit, symbol_type, exchange, period)

    def get_sorted_data(
        self,
        sort_column: str,
        sort_direction: str = "desc",
        limit: int = 20,
        symbol_type: Optional[str] = "forex",
        exchange: Optional[str] = None,
        period: str = "1D",
    ) -> RequestOutcome:
        """
        Latest data sorted by any column.

        Args:
            sort_column: active.c, active.chp, active.v, active.h, active.l
            sort_direction: asc or desc
            limit: Number of results
            symbol_type: forex or commodity
            exchange: FX, ONA, SFO
            period: Time period
        """
        params = compact(
            {
                "period": period,
                "sort_by": f"{sort_column}_{sort_direction}",
                "per_page": limit,
                "merge": "latest",
            },
            type=symbol_type,
            exchange=exchange,
        )
        return self.advanced(params)

    def search(self, query: str, symbol_type: Optional[str] = None, exchange: Optional[str] = None) -> RequestOutcome:
        return self._request("search", compact({"search": query}, type=symbol_type, exchange=exchange))
