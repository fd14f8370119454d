"""
サーモスタットデバイス

設定温度（整数）と、そこから導出される暖房状態を持つデバイスです。
暖房状態は設定温度がHEATING_THRESHOLDを超えている場合にのみ True になり、
set_temperature のたびに再計算されます。
"""
from smart_home.constants.constants import (
    DEFAULT_TEMPERATURE,
    HEATING_THRESHOLD,
    ResultStatus,
    ThingName,
)
from smart_home.iot.thing import Parameter, Thing, ValueType
from smart_home.utils.logging_config import get_logger

logger = get_logger(__name__)


class Thermostat(Thing):
    """サーモスタットデバイスクラス.

    温度の範囲チェックは行いません。負の値や極端な値も整数であれば受け付けます。

    Attributes:
        temperature (int): 現在の設定温度（読み取り専用）
    """

    def __init__(self):
        super().__init__(ThingName.THERMOSTAT, "室温を設定するサーモスタット")
        self._temperature = DEFAULT_TEMPERATURE
        self._heating = False

        self.add_property("temperature", "現在の設定温度", lambda: self.temperature)
        self.add_property("heating", "暖房中かどうか", self.is_heating)

        self.add_method(
            "SetTemperature",
            "設定温度を変更",
            [Parameter("temperature", "設定する温度（整数）", ValueType.NUMBER, True)],
            lambda params: self._set_temperature(params["temperature"]),
        )

    @property
    def temperature(self) -> int:
        return self._temperature

    def set_temperature(self, value: int) -> None:
        """設定温度を変更し、暖房状態を再計算.

        Raises:
            TypeError: 整数以外（boolを含む）が渡された場合
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"温度は整数でなければなりません: {value!r}")

        self._temperature = value
        self._heating = value > HEATING_THRESHOLD
        logger.info(f"設定温度を{value}に変更しました（暖房: {self._heating}）")

    def is_heating(self) -> bool:
        return self._heating

    def _set_temperature(self, value):
        self.set_temperature(value)
        return {
            "status": ResultStatus.SUCCESS,
            "message": f"設定温度を{value}に変更しました",
        }
