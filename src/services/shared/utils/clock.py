from datetime import datetime, timezone


def utc_now() -> datetime:
    """現在時刻（UTC, タイムゾーン付き）"""
    return datetime.now(timezone.utc)
