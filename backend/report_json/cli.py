"""
命令行入口 - 报表描述文件 -> JSON

用法：
    report-json --input report.yaml --output report.json --pages "1,3-5"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import RuntimeConfig, get_config
from .export import JsonExport
from .interfaces import ReportJsonError
from .models import Document

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export a laid-out report description to streamed JSON."
    )
    parser.add_argument("--input", required=True, help="报表描述文件（.yaml/.yml/.json）")
    parser.add_argument(
        "--output",
        default="",
        help="输出JSON路径（默认：与输入同名的.json；'-' 表示标准输出）",
    )
    parser.add_argument("--config", default="", help="可选：运行期配置YAML")
    parser.add_argument("--pages", default=None, help="可选：页码范围，如 1,3-5")
    return parser


def _resolve_output(input_path: Path, output: str) -> Path | None:
    if output == "-":
        return None
    if output:
        return Path(output)
    return input_path.with_suffix(JsonExport.DEFAULT_EXTENSION)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        if args.config:
            config = RuntimeConfig.from_yaml(args.config)
        else:
            config = get_config().model_copy(deep=True)
        if args.pages is not None:
            config.export.page_numbers = args.pages

        logging.basicConfig(
            level=config.logging.log_level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        input_path = Path(args.input)
        document = Document.from_file(input_path)
        exporter = JsonExport(config)

        output_path = _resolve_output(input_path, args.output)
        if output_path is None:
            exporter.export(document, sys.stdout)
            sys.stdout.write("\n")
        else:
            exporter.export_to_file(document, output_path)
            logger.info(f"已导出: {output_path} ({exporter.page_index} 页)")
    except ReportJsonError as e:
        logger.error(f"导出失败: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
