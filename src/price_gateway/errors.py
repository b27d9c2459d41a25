"""Exception types raised by the gateway."""


class GatewayError(Exception):
    """Base class for gateway failures."""


class ConfigError(GatewayError):
    """Invalid process configuration; fatal at startup."""


class UpstreamError(GatewayError):
    """
    The vendor service could not be reached or answered with something
    we could not use (non-2xx status, bad JSON, unexpected shape).
    """
