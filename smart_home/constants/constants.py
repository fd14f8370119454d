class ThingName:
    """デバイス名."""

    LIGHT = "Light"
    THERMOSTAT = "Thermostat"
    DOOR_LOCK = "DoorLock"


class ResultStatus:
    """メソッド呼び出し結果のステータス."""

    SUCCESS = "success"


# この温度を超えると暖房が入る（この温度ちょうどでは入らない）
HEATING_THRESHOLD = 68

DEFAULT_TEMPERATURE = 68
