# システム設定管理モジュール
# 設定ファイルの読み込み、保存、管理を行う

import copy
import json
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

from smart_home.utils.logging_config import get_logger

logger = get_logger(__name__)


class ConfigManager:
    """
    設定管理クラス

    JSON設定ファイルの読み書きとデフォルト設定との統合を行う。
    CLIからはget_instance()でプロセス内の共有インスタンスを使用し、
    テストなどでは設定ファイルのパスを指定して個別に生成できる。
    """

    _instance = None
    _lock = threading.Lock()

    DEFAULT_CONFIG_FILE = Path("config") / "config.json"

    # デフォルト設定値の定義
    DEFAULT_CONFIG = {
        "LOGGING": {
            "LEVEL": "INFO",  # ログレベル
            "LOG_DIR": "logs",  # ログファイルの出力先ディレクトリ
            "BACKUP_COUNT": 30,  # 保持するログファイルの日数
        },
    }

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        設定管理クラスの初期化

        Args:
            config_file: 設定ファイルのパス（省略時は config/config.json）
        """
        self.config_file = Path(config_file or self.DEFAULT_CONFIG_FILE)
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        設定ファイルを読み込み、存在しない場合は作成する

        既存の設定とデフォルト設定をマージして返す。
        読み込みに失敗した場合はデフォルト設定を使用する。

        Returns:
            Dict[str, Any]: 読み込まれた設定データ
        """
        try:
            if self.config_file.exists():
                config = json.loads(self.config_file.read_text(encoding="utf-8"))
                return self._merge_configs(self.DEFAULT_CONFIG, config)

            logger.info(f"設定ファイルが見つかりません。デフォルト設定で作成します: {self.config_file}")
            self._save_config(self.DEFAULT_CONFIG)
            return copy.deepcopy(self.DEFAULT_CONFIG)
        except (OSError, ValueError) as e:
            logger.error(f"設定読み込みエラー: {e}")
            return copy.deepcopy(self.DEFAULT_CONFIG)

    def _save_config(self, config: dict) -> bool:
        """
        設定をファイルに保存する

        Returns:
            bool: 保存に成功した場合True、失敗した場合False
        """
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            self.config_file.write_text(
                json.dumps(config, indent=2, ensure_ascii=False), encoding="utf-8"
            )
            return True
        except OSError as e:
            logger.error(f"設定保存エラー: {e}")
            return False

    @staticmethod
    def _merge_configs(default: dict, custom: dict) -> dict:
        """
        設定辞書を再帰的にマージする（カスタム設定が優先される）
        """
        result = copy.deepcopy(default)
        for key, value in custom.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = ConfigManager._merge_configs(result[key], value)
            else:
                result[key] = value
        return result

    def get_config(self, path: str, default: Any = None) -> Any:
        """
        パス指定で設定値を取得する

        Args:
            path (str): ドット区切りの設定パス（例: "LOGGING.LEVEL"）
            default (Any, optional): パスが存在しない場合のデフォルト値

        Returns:
            Any: 設定値またはデフォルト値

        Example:
            >>> config_manager.get_config("LOGGING.BACKUP_COUNT", 30)
        """
        try:
            value = self._config
            for key in path.split("."):
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def update_config(self, path: str, value: Any) -> bool:
        """
        指定された設定項目を更新し、設定ファイルに保存する

        Returns:
            bool: 更新と保存に成功した場合True、失敗した場合False
        """
        try:
            current = self._config
            *parts, last = path.split(".")
            for part in parts:
                # 中間パスが存在しない場合は空の辞書を作成
                current = current.setdefault(part, {})
            current[last] = value
        except (AttributeError, TypeError) as e:
            logger.error(f"設定更新エラー {path}: {e}")
            return False
        return self._save_config(self._config)

    @classmethod
    def get_instance(cls, config_file: Optional[Union[str, Path]] = None):
        """
        設定管理クラスの共有インスタンスを取得する（スレッドセーフ）

        config_fileは最初の呼び出し時のみ有効。
        """
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls(config_file)
        return cls._instance
