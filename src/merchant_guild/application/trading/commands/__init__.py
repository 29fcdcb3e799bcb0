"""Trading command handlers"""
from .execute_trade import ExecuteTradeCommand, ExecuteTradeHandler, TradeResult

__all__ = ['ExecuteTradeCommand', 'ExecuteTradeHandler', 'TradeResult']
