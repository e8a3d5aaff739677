"""構造体の表示ユーティリティ"""

import sys
from pprint import pprint
from typing import Any, Optional, TextIO


def print_structure(obj: Any, stream: Optional[TextIO] = None) -> None:
    """
    dataclass・list・dict を整形して出力

    Args:
        obj: 出力対象
        stream: 出力先（デフォルト: 標準出力）
    """
    pprint(obj, stream=stream or sys.stdout, width=100, sort_dicts=False)
