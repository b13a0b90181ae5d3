"""Store locator client with response caching and field normalization"""

__version__ = "0.1.0"
