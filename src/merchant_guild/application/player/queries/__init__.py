"""Player query handlers"""
from .get_player import GetPlayerQuery, GetPlayerHandler, PlayerView

__all__ = ['GetPlayerQuery', 'GetPlayerHandler', 'PlayerView']
