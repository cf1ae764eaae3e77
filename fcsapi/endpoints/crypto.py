"""
Cryptocurrency endpoints.
"""
from typing import Optional

from ..outcome import RequestOutcome
from .base import EndpointGroup, compact


class Crypto(EndpointGroup):
    """Wrappers for the crypto/ endpoints."""

    base = "crypto/"

    def get_symbols_list(
        self,
        symbol_type: Optional[str] = "crypto",
        sub_type: Optional[str] = None,
        exchange: Optional[str] = None,
    ) -> RequestOutcome:
        """
        List crypto symbols.

        Args:
            symbol_type: crypto, coin, futures, dex, dominance
            sub_type: spot, swap, index
            exchange: BINANCE, COINBASE, ...
        """
        return self._request("list", compact({}, type=symbol_type, sub_type=sub_type, exchange=exchange))

    def get_coins_list(self) -> RequestOutcome:
        """Coins with market cap, rank and supply data."""
        return self.get_symbols_list("coin")

    def get_coin_data(self, symbol: Optional[str] = None, limit: int = 100, sort_by: str = "perf.rank_asc") -> RequestOutcome:
        """
        Coin rank, market cap, supply and performance.

        Only applies to type=coin symbols (BTCUSD, ETHUSD).

        Args:
            symbol: Coin symbol, all coins if omitted
            limit: Number of results
            sort_by: perf.rank_asc, perf.market_cap_desc, perf.circulating_supply_desc
        """
        params = compact(
            {"type": "coin", "sort_by": sort_by, "per_page": limit, "merge": "latest,perf"},
            symbol=symbol,
        )
        return self.advanced(params)

    def get_top_by_market_cap(self, limit: int = 100) -> RequestOutcome:
        return self.get_coin_data(None, limit, "perf.market_cap_desc")

    def get_top_by_rank(self, limit: int = 100) -> RequestOutcome:
        return self.get_coin_data(None, limit, "perf.rank_asc")

    def convert(self, pair1: str, pair2: str, amount: float = 1) -> RequestOutcome:
        """Convert crypto to fiat or crypto to crypto."""
        return self._request("converter", {"pair1": pair1, "pair2": pair2, "amount": amount})

    def get_base_prices(self, symbol: str, exchange: Optional[str] = None, fallback: bool = False) -> RequestOutcome:
        params = compact({"symbol": symbol}, exchange=exchange, fallback=1 if fallback else None)
        return self._request("base_latest", params)

    def get_cross_rates(
        self,
        symbol: str,
        exchange: Optional[str] = None,
        symbol_type: str = "crypto",
        period: str = "1D",
        crossrates: bool = False,
        fallback: bool = False,
    ) -> RequestOutcome:
        params = compact(
            {"symbol": symbol, "type": symbol_type, "period": period},
            exchange=exchange,
            crossrates=1 if crossrates else None,
            fallback=1 if fallback else None,
        )
        return self._request("cross", params)

    # Top movers

    def get_top_gainers(
        self,
        exchange: Optional[str] = None,
        limit: int = 20,
        period: str = "1D",
        symbol_type: str = "crypto",
    ) -> RequestOutcome:
        return self.get_sorted_data("active.chp", "desc", limit, symbol_type, exchange, period)

    def get_top_losers(
        self,
        exchange: Optional[str] = None,
        limit: int = 20,
        period: str = "1D",
        symbol_type: str = "crypto",
    ) -> RequestOutcome:
        return self.get_sorted_data("active.chp", "asc", limit, symbol_type, exchange, period)

    def get_highest_volume(
        self,
        exchange: Optional[str] = None,
        limit: int = 20,
        period: str = "1D",
        symbol_type: str = "crypto",
    ) -> RequestOutcome:
        return self.get_sorted_data("active.v", "desc", limit, symbol_type, exchange, period)

    def get_sorted_data(
        self,
        sort_column: str,
        sort_direction: str = "desc",
        limit: int = 20,
        symbol_type: Optional[str] = "crypto",
        exchange: Optional[str] = None,
        period: str = "1D",
    ) -> RequestOutcome:
        """
        Latest data sorted by any column.

        Args:
            sort_column: active.c, active.chp, active.v, active.h, active.l, rank, market_cap
            sort_direction: asc or desc
            limit: Number of results
            symbol_type: crypto, coin, futures, dex
            exchange: BINANCE, COINBASE
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

    def search(self, query: str, symbol_type: Optional[str] = None) -> RequestOutcome:
        # Crypto search is served by the symbol list endpoint
        return self._request("list", compact({"search": query}, type=symbol_type))
