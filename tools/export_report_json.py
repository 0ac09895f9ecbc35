"""
报表描述文件导出JSON（仓库内直接运行，无需安装）。

示例：
    python tools/export_report_json.py --input samples/receipt.yaml --output out/receipt.json
"""

from __future__ import annotations

import sys
from pathlib import Path


def _add_backend_to_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    backend_root = repo_root / "backend"
    if str(backend_root) not in sys.path:
        sys.path.insert(0, str(backend_root))


def main() -> int:
    _add_backend_to_path()
    from report_json.cli import main as cli_main  # type: ignore

    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())
