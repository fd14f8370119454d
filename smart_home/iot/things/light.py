"""
照明デバイス

オン/オフの2状態だけを持つ照明デバイスです。生成時はオフです。
"""
from smart_home.constants.constants import ResultStatus, ThingName
from smart_home.iot.thing import Thing
from smart_home.utils.logging_config import get_logger

logger = get_logger(__name__)


class Light(Thing):
    """照明デバイスクラス.

    turn_on / turn_off はどちらの状態からでも呼び出せ、何度呼んでも結果は同じです。
    """

    def __init__(self):
        super().__init__(ThingName.LIGHT, "オン/オフを切り替えられる照明")
        self._power = False

        self.add_property("power", "照明の電源状態", self.is_on)

        self.add_method("TurnOn", "照明をオンにする", [], lambda params: self._turn_on())
        self.add_method("TurnOff", "照明をオフにする", [], lambda params: self._turn_off())

    def turn_on(self) -> None:
        self._power = True
        logger.info("照明がオンになりました")

    def turn_off(self) -> None:
        self._power = False
        logger.info("照明がオフになりました")

    def is_on(self) -> bool:
        return self._power

    def _turn_on(self):
        self.turn_on()
        return {"status": ResultStatus.SUCCESS, "message": "照明がオンになりました"}

    def _turn_off(self):
        self.turn_off()
        return {"status": ResultStatus.SUCCESS, "message": "照明がオフになりました"}
