from .queries import SearchItinerariesQuery, SearchItinerariesQueryHandler

__all__ = ["SearchItinerariesQuery", "SearchItinerariesQueryHandler"]
