"""
デバイス管理モジュール

デバイス（Thing）の登録、状態取得、メソッド実行を一元管理するクラスを提供します。
インスタンスは所有者ごとに生成し、デバイスを他の所有者と共有しません。
"""
import json
from typing import Any, Dict, List, Tuple

from smart_home.iot.thing import Thing
from smart_home.utils.logging_config import get_logger

logger = get_logger(__name__)


class ThingManager:
    """デバイス管理クラス.

    登録されたデバイスの記述子・状態のJSON取得、名前によるメソッド実行、
    前回取得時からの状態変化の検出を行います。
    """

    def __init__(self):
        self.things: List[Thing] = []
        self.last_states: Dict[str, Dict] = {}  # 前回の状態を保存

    def add_thing(self, thing: Thing) -> None:
        """デバイスを管理対象に追加.

        Raises:
            ValueError: 同じ名前のデバイスが既に登録されている場合
        """
        if any(existing.name == thing.name for existing in self.things):
            raise ValueError(f"デバイスが既に登録されています: {thing.name}")
        self.things.append(thing)
        logger.debug(f"デバイスを登録しました: {thing.name}")

    def get_thing(self, name: str) -> Thing:
        for thing in self.things:
            if thing.name == name:
                return thing
        raise ValueError(f"デバイスが存在しません: {name}")

    def get_descriptors_json(self) -> str:
        descriptors = [thing.get_descriptor_json() for thing in self.things]
        return json.dumps(descriptors, ensure_ascii=False)

    def get_states_json(self, delta=False) -> Tuple[bool, str]:
        """すべてのデバイスの状態JSONを取得.

        Args:
            delta: Trueの場合、前回のdelta取得から変化したデバイスのみ返す

        Returns:
            Tuple[bool, str]: 状態変化があったかどうかとJSON文字列のタプル
        """
        if not delta:
            self.last_states.clear()

        changed = False
        states = []

        for thing in self.things:
            state_json = thing.get_state_json()

            if delta:
                if self.last_states.get(thing.name) == state_json:
                    continue
                changed = True
                self.last_states[thing.name] = state_json

            states.append(state_json)

        return changed, json.dumps(states, ensure_ascii=False)

    def invoke(self, command: Dict) -> Any:
        """デバイスメソッドを呼び出し.

        Args:
            command: name、method、parametersを含むコマンド辞書

        Raises:
            ValueError: 指定されたデバイスまたはメソッドが存在しない場合
        """
        thing_name = command.get("name")
        try:
            thing = self.get_thing(thing_name)
        except ValueError:
            logger.error(f"デバイスが存在しません: {thing_name}")
            raise

        return thing.invoke(command)
