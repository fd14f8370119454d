"""
ドアロックデバイス

施錠/解錠の2状態を持つドアロックです。安全側に倒すため、生成時は施錠状態です。
"""
from smart_home.constants.constants import ResultStatus, ThingName
from smart_home.iot.thing import Thing
from smart_home.utils.logging_config import get_logger

logger = get_logger(__name__)


class DoorLock(Thing):
    def __init__(self):
        super().__init__(ThingName.DOOR_LOCK, "玄関のドアロック")
        self._locked = True

        self.add_property("locked", "施錠されているかどうか", self.is_locked)

        self.add_method("Lock", "ドアを施錠する", [], lambda params: self._lock())
        self.add_method("Unlock", "ドアを解錠する", [], lambda params: self._unlock())

    def lock(self) -> None:
        self._locked = True
        logger.info("ドアが施錠されました")

    def unlock(self) -> None:
        self._locked = False
        logger.info("ドアが解錠されました")

    def is_locked(self) -> bool:
        return self._locked

    def _lock(self):
        self.lock()
        return {"status": ResultStatus.SUCCESS, "message": "ドアが施錠されました"}

    def _unlock(self):
        self.unlock()
        return {"status": ResultStatus.SUCCESS, "message": "ドアが解錠されました"}
