from .client import BscScanClient, BscScanResponse
from .parse import parse_abi, parse_source_bundle

__all__ = ["BscScanClient", "BscScanResponse", "parse_abi", "parse_source_bundle"]
