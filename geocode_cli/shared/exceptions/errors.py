"""カスタム例外定義"""


class GeocodeCLIError(Exception):
    """geocode-cli 基底例外"""

    pass


class UsageError(GeocodeCLIError):
    """コマンドライン引数の指定誤り（終了コード2）"""

    pass


class RequestParseError(GeocodeCLIError):
    """フラグ値の解析エラー（数値変換失敗など）"""

    pass


class GeocodingError(GeocodeCLIError):
    """ジオコーディングエラー"""

    pass


class ConfigurationError(GeocodeCLIError):
    """設定エラー"""

    pass
