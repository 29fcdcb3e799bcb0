"""Catalog query handlers"""
from .list_cities import ListCitiesQuery, ListCitiesHandler, CityView
from .list_goods import ListGoodsQuery, ListGoodsHandler

__all__ = ['ListCitiesQuery', 'ListCitiesHandler', 'CityView', 'ListGoodsQuery', 'ListGoodsHandler']
