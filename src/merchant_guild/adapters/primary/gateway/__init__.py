"""Shell gateway returning structured results"""
from .guild_gateway import GuildGateway, OperationError, OperationResult

__all__ = ['GuildGateway', 'OperationError', 'OperationResult']
