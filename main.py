"""
smart-home メインエントリーポイント

照明・サーモスタット・ドアロックを持つスマートホームをコマンドラインから操作する
- --invoke でデバイスメソッドを順に実行
- --descriptors でデバイス記述子を表示
- 最後に全デバイスの状態をJSONで表示
"""
import argparse
import json
import sys

from smart_home.home import SmartHome
from smart_home.utils.config_manager import ConfigManager
from smart_home.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def parse_parameters(pairs):
    """key=value 形式の引数をパラメータ辞書に変換する.

    値はJSONとして解釈できればその値、できなければ文字列として扱う。

    Raises:
        ValueError: "=" を含まない引数がある場合
    """
    parameters = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"パラメータは key=value 形式で指定してください: {pair}")
        try:
            parameters[key] = json.loads(raw)
        except json.JSONDecodeError:
            parameters[key] = raw
    return parameters


def parse_args(argv=None):
    """コマンドライン引数を解析する."""
    parser = argparse.ArgumentParser(description="スマートホームデバイスの操作")

    parser.add_argument(
        "--config",
        default=None,
        help="設定ファイルのパス（省略時は config/config.json）",
    )

    parser.add_argument(
        "--descriptors",
        action="store_true",
        help="デバイス記述子をJSONで表示する",
    )

    parser.add_argument(
        "--invoke",
        nargs="+",
        action="append",
        default=[],
        metavar="ARG",
        help="THING METHOD [key=value ...] の形式でデバイスメソッドを実行する（複数指定可）",
    )

    return parser.parse_args(argv)


def main(argv=None):
    """プログラムのエントリーポイント."""
    args = parse_args(argv)

    try:
        config = ConfigManager.get_instance(args.config)
        setup_logging(
            log_dir=config.get_config("LOGGING.LOG_DIR", "logs"),
            level=config.get_config("LOGGING.LEVEL", "INFO"),
            backup_count=config.get_config("LOGGING.BACKUP_COUNT", 30),
        )

        home = SmartHome()

        if args.descriptors:
            print(home.get_descriptors_json())

        for invocation in args.invoke:
            if len(invocation) < 2:
                raise ValueError(f"--invoke には THING と METHOD が必要です: {invocation}")
            name, method, *pairs = invocation
            result = home.invoke(
                {"name": name, "method": method, "parameters": parse_parameters(pairs)}
            )
            logger.info(f"{name}.{method} を実行しました: {result}")

        _, states_json = home.get_states_json()
        print(states_json)

    except (TypeError, ValueError) as e:
        logger.error(f"コマンドの実行に失敗しました: {e}")
        return 1
    except Exception as e:
        logger.error(f"プログラムでエラーが発生: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
