from aws_lambda_powertools import Logger


def get_logger(service_name: str) -> Logger:
    """サービス名付きの構造化ロガーを返す

    同じ service_name の Logger は同じ出力設定を共有する。
    """
    return Logger(service=service_name)
