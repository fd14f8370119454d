"""
ログ設定モジュール

アプリケーション全体のログシステムを設定・管理するモジュールです。
コンソールとファイルへの出力、ログローテーション、カラー表示などの機能を提供します。
"""
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Union

from colorlog import ColoredFormatter


def setup_logging(
    log_dir: Union[str, Path] = "logs",
    level: Union[str, int] = logging.INFO,
    backup_count: int = 30,
) -> Path:
    """ログシステムを設定.

    ルートロガーを初期化し、コンソールとファイルの両方にログを出力するように
    設定します。ログファイルは日別にローテーションされ、backup_count日分が保持されます。

    Args:
        log_dir: ログファイルを置くディレクトリ
        level: ログレベル（"INFO" などの名前または数値）
        backup_count: 保持するローテーション済みログファイルの数

    Returns:
        Path: ログファイルのパス
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "app.log"

    if isinstance(level, str):
        level = level.upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # 既存のハンドラーを閉じてから削除（重複追加を回避）
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    file_handler = TimedRotatingFileHandler(
        log_file,
        when="midnight",
        interval=1,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.suffix = "%Y-%m-%d.log"

    formatter = logging.Formatter(
        "%(asctime)s[%(name)s] - %(levelname)s - %(message)s - %(threadName)s"
    )

    color_formatter = ColoredFormatter(
        "%(green)s%(asctime)s%(reset)s[%(blue)s%(name)s%(reset)s] - "
        "%(log_color)s%(levelname)s%(reset)s - %(green)s%(message)s%(reset)s - "
        "%(cyan)s%(threadName)s%(reset)s",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "white",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
        secondary_log_colors={"asctime": {"green": "green"}, "name": {"blue": "blue"}},
    )
    console_handler.setFormatter(color_formatter)
    file_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    logging.info("ログシステムが初期化されました。ログファイル: %s", log_file)

    return log_file


def get_logger(name):
    """統一設定されたロガーを取得.

    Args:
        name: ロガー名、通常はモジュール名

    Returns:
        logging.Logger: error_exc ヘルパーを追加したロガー

    使用例:
        logger = get_logger(__name__)
        logger.info("これは情報メッセージです")
        logger.error_exc("エラーが発生しました: %s", error_msg)
    """
    logger = logging.getLogger(name)

    def log_error_with_exc(msg, *args, **kwargs):
        """エラーを記録し、自動的に例外スタックトレースを含める."""
        kwargs["exc_info"] = True
        logger.error(msg, *args, **kwargs)

    logger.error_exc = log_error_with_exc

    return logger
