"""CLIエントリーポイント"""
import argparse
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from pydantic import ValidationError

from .features.geocoding.providers.google_maps_geocoder import GoogleMapsGeocoder
from .features.geocoding.services.request_builder import (
    build_request,
    require_address_or_components,
)
from .infrastructure.config.settings import Settings
from .infrastructure.gcp.secret_manager import has_api_key_source, resolve_api_key
from .shared.exceptions.errors import ConfigurationError, GeocodeCLIError, UsageError
from .shared.http.client import HTTPClient
from .shared.logging.config import get_logger, setup_logging
from .shared.utils.output import print_structure

logger = get_logger(__name__)

# (フラグ名, ヘルプ)
_REQUEST_FLAGS = [
    ("key", "API Key for using Google Maps API."),
    (
        "address",
        "The street address that you want to geocode, in the format used by the "
        "national postal service of the country concerned.",
    ),
    ("components", "A component filter for which you wish to obtain a geocode."),
    (
        "bounds",
        "The bounding box of the viewport within which to bias geocode results more prominently.",
    ),
    ("language", "The language in which to return results."),
    ("region", "The region code, specified as a ccTLD two-character value."),
    (
        "latlng",
        "The textual latitude/longitude value for which you wish to obtain the closest, "
        "human-readable address.",
    ),
    ("result_type", "One or more address types, separated by a pipe (|)."),
    ("location_type", "One or more location types, separated by a pipe (|)."),
]

_REQUEST_FLAG_STRINGS = frozenset(
    flag for name, _ in _REQUEST_FLAGS for flag in (f"-{name}", f"--{name}")
)


@dataclass(frozen=True)
class GeocodeOptions:
    """コマンドライン引数（起動時に一度だけ作成）"""

    key: str = ""
    address: str = ""
    components: str = ""
    bounds: str = ""
    language: str = ""
    region: str = ""
    latlng: str = ""
    result_type: str = ""
    location_type: str = ""
    env_file: str = ".env"
    log_level: Optional[str] = None

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> "GeocodeOptions":
        """argparse の解析結果から作成"""
        return cls(**vars(args))


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを作成"""
    parser = argparse.ArgumentParser(
        prog="geocode-cli",
        description="Google Maps Geocoding API コマンドラインツール",
    )

    for name, help_text in _REQUEST_FLAGS:
        parser.add_argument(f"-{name}", f"--{name}", dest=name, default="", help=help_text)

    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )

    return parser


def join_flag_values(argv: Sequence[str]) -> list[str]:
    """
    リクエスト用フラグと直後の値を "-flag=値" の1引数にまとめる

    argparse は "-" で始まる値（"-33.86,151.20" など）を別のオプションと解釈するため、
    値の先頭文字に関係なく次の引数を値として扱う

    Args:
        argv: コマンドライン引数

    Returns:
        list[str]: 変換後の引数
    """
    joined = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            joined.extend(argv[i:])
            break
        if arg in _REQUEST_FLAG_STRINGS and i + 1 < len(argv):
            joined.append(f"{arg}={argv[i + 1]}")
            i += 2
            continue
        joined.append(arg)
        i += 1
    return joined


def run(options: GeocodeOptions, settings: Settings) -> None:
    """
    リクエストを組み立てて送信し、リクエストとレスポンスを標準出力に表示

    Raises:
        UsageError: API Key または address/components が未指定の場合
        RequestParseError: フラグ値の解析に失敗した場合
        GeocodingError: APIリクエストに失敗した場合
    """
    # API Key の有無を先に判定し、Secret Manager への問い合わせは引数チェックの後に行う
    if not has_api_key_source(options.key, settings):
        raise UsageError("Please specify an API Key.")

    require_address_or_components(options)

    api_key = resolve_api_key(options.key, settings)
    if not api_key:
        raise UsageError("Please specify an API Key.")

    request = build_request(options)
    print_structure(request)

    with HTTPClient(proxy_url=settings.https_proxy_url) as http_client:
        geocoder = GoogleMapsGeocoder(
            api_key,
            timeout=settings.request_timeout,
            session=http_client.session,
        )
        response = geocoder.submit(request)

    print_structure(response)


def _usage_and_exit_code(parser: argparse.ArgumentParser, message: str) -> int:
    print(message, file=sys.stderr)
    print("Flags:", file=sys.stderr)
    parser.print_help(file=sys.stderr)
    return 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    メインエントリーポイント

    Returns:
        int: 終了コード（0: 成功, 1: 失敗, 2: 引数エラー）
    """
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    options = GeocodeOptions.from_namespace(parser.parse_args(join_flag_values(argv)))

    try:
        try:
            settings = Settings(_env_file=options.env_file)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings: {e}") from e

        setup_logging(
            level=options.log_level or settings.log_level,
            enable_cloud_logging=settings.gcp_logging_enabled,
            project_id=settings.gcp_project_id,
        )

        run(options, settings)
        return 0

    except UsageError as e:
        return _usage_and_exit_code(parser, str(e))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # SIGINT
    except GeocodeCLIError as e:
        logger.critical(f"error {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
