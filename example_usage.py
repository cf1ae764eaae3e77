"""
Example script walking through the three authentication methods.

Set FCS_ACCESS_KEY (and FCS_PUBLIC_KEY for the token example), then run:
    python example_usage.py
"""
import sys
import os
import json

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from fcsapi import FcsApi, FcsConfig, RequestOutcome


def show(title: str, outcome: RequestOutcome) -> None:
    if outcome.succeeded:
        print(f"✓ {title}: {json.dumps(outcome.response_data)[:200]}")
    else:
        print(f"✗ {title}: {outcome.error_message} (HTTP {outcome.http_status_code})")


def main() -> None:
    access_key = os.getenv("FCS_ACCESS_KEY", "YOUR_API_KEY")
    public_key = os.getenv("FCS_PUBLIC_KEY", "YOUR_PUBLIC_KEY")

    print("Method 1: access key")
    api = FcsApi(access_key)
    show("forex latest FX:EURUSD", api.forex.get_latest_price("FX:EURUSD"))
    show("crypto latest BINANCE:BTCUSDT", api.crypto.get_latest_price("BINANCE:BTCUSDT"))
    show("stock latest NASDAQ:AAPL", api.stock.get_latest_price("NASDAQ:AAPL"))

    # Whitelist the server IP in the FCS dashboard first
    print("\nMethod 2: IP whitelist")
    api = FcsApi(FcsConfig.with_ip_whitelist())
    show("forex latest FX:EURUSD", api.forex.get_latest_price("FX:EURUSD"))

    print("\nMethod 3: token (for frontends)")
    api = FcsApi(FcsConfig.with_token(access_key, public_key, 3600))

    # Hand this to browser code; it never contains the access key
    token_data = api.generate_token()
    print(f"Token for frontend: {json.dumps(token_data, indent=2)}")
    show("forex latest FX:EURUSD", api.forex.get_latest_price("FX:EURUSD"))

    print("\nCustom config")
    config = FcsConfig.with_access_key(access_key)
    config.timeout = 60
    config.connect_timeout = 10
    api = FcsApi(config)
    show("forex top gainers", api.forex.get_top_gainers(limit=5))


if __name__ == "__main__":
    main()
