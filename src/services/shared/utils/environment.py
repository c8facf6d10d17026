import os

PRODUCTION = "production"


def table_name() -> str | None:
    """DynamoDB テーブル名"""
    return os.getenv("TABLE_NAME")


def environment() -> str:
    """実行環境名（未設定時は production とみなす）"""
    return os.getenv("ENVIRONMENT", PRODUCTION).strip().lower()


def is_production() -> bool:
    return environment() == PRODUCTION
