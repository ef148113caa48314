import argparse
import json
import sys
from pathlib import Path


def _add_repo_to_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Feed a form-submission event into the invoice handler."
    )
    parser.add_argument(
        "--month",
        default="",
        help="请求月（如 2024-5）；与 --event 二选一",
    )
    parser.add_argument(
        "--event",
        default="",
        help="事件JSON文件路径",
    )
    parser.add_argument(
        "--config",
        default="documents/runtime.yaml",
        help="运行期配置（默认：documents/runtime.yaml）",
    )
    args = parser.parse_args()

    _add_repo_to_path()
    from invoicer.config import reload_config, setup_logging  # type: ignore
    from invoicer.interfaces import InvoicerError  # type: ignore
    from invoicer.pipeline import SubmissionHandler  # type: ignore

    config = reload_config(args.config)
    setup_logging(config)

    if args.event:
        event = json.loads(Path(args.event).read_text(encoding="utf-8"))
    elif args.month:
        event = {"請求月": args.month}
    else:
        print("需要 --month 或 --event")
        return 2

    try:
        title = SubmissionHandler(config).handle(event)
    except InvoicerError as exc:
        print(f"ERROR {exc}")
        return 1

    print(title if title else "未生成（源sheet不存在）")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
