"""Google Maps Geocoding API コマンドラインクライアント"""

__version__ = "0.1.0"
