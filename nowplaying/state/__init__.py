from .manager import DailyLogStore, today_key

__all__ = ["DailyLogStore", "today_key"]
