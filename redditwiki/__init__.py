"""Client for the wiki endpoints of the Reddit API: models and the WikiService."""

__version__ = "0.1.0"
__all__ = ["models", "service"]