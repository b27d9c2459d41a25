"""Services subpackage - outbound calls to the vendor."""
from .upstream_client import UpstreamClient, build_prices_payload

__all__ = ['UpstreamClient', 'build_prices_payload']
