"""
スマートホーム

照明・サーモスタット・ドアロックを1台ずつ持つ家をまとめるクラスです。
各デバイスは互いに独立しており、どの順序で操作しても他のデバイスには影響しません。
"""
from typing import Any, Dict, List, Tuple

from smart_home.iot.thing import Thing
from smart_home.iot.thing_manager import ThingManager
from smart_home.iot.things.door_lock import DoorLock
from smart_home.iot.things.light import Light
from smart_home.iot.things.thermostat import Thermostat
from smart_home.utils.logging_config import get_logger

logger = get_logger(__name__)


class SmartHome:
    def __init__(self):
        self.light = Light()
        self.thermostat = Thermostat()
        self.door_lock = DoorLock()

        self._thing_manager = ThingManager()
        for thing in (self.light, self.thermostat, self.door_lock):
            self._thing_manager.add_thing(thing)

        logger.info("スマートホームの初期化が完了しました")

    @property
    def things(self) -> List[Thing]:
        return list(self._thing_manager.things)

    def invoke(self, command: Dict) -> Any:
        return self._thing_manager.invoke(command)

    def get_descriptors_json(self) -> str:
        return self._thing_manager.get_descriptors_json()

    def get_states_json(self, delta=False) -> Tuple[bool, str]:
        return self._thing_manager.get_states_json(delta=delta)
