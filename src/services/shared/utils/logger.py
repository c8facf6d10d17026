from aws_lambda_powertools import Logger


def get_logger(service_name: str | None = None) -> Logger:
    """アプリケーション層向けの子ロガーを返す

    ハンドラ側の Logger と設定（service, lambda context）を共有する。
    """
    return Logger(service=service_name, child=True)
