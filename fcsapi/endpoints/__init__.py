"""
Per-domain endpoint wrappers.

Each group only assembles request parameters and hands them to
FcsApi.request().
"""
from .base import EndpointGroup
from .crypto import Crypto
from .forex import Forex
from .stock import Stock

__all__ = [
    'EndpointGroup',
    'Forex',
    'Crypto',
    'Stock',
]
