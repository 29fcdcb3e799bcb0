"""Market query handlers"""
from .get_market import GetCityMarketQuery, GetCityMarketHandler
from .get_news import GetNewsQuery, GetNewsHandler, NewsView

__all__ = ['GetCityMarketQuery', 'GetCityMarketHandler', 'GetNewsQuery', 'GetNewsHandler', 'NewsView']
