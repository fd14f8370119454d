"""Unit tests for the Light device."""

from smart_home.constants.constants import ResultStatus


class TestLight:
    """Tests for Light state changes and predicate."""

    def test_is_off_by_default(self, light):
        """Test a fresh light is off."""
        assert not light.is_on()
        assert light.is_on() is False

    def test_can_be_turned_on(self, light):
        """Test turn_on switches the light on."""
        light.turn_on()
        assert light.is_on()

    def test_can_be_turned_off_after_being_on(self, light):
        """Test turn_on followed by turn_off returns to off."""
        light.turn_on()
        light.turn_off()
        assert light.is_on() is False

    def test_turn_on_is_idempotent(self, light):
        """Test turning on twice leaves the light on."""
        light.turn_on()
        light.turn_on()
        assert light.is_on() is True

    def test_turn_off_is_idempotent(self, light):
        """Test turning off an already-off light keeps it off."""
        light.turn_off()
        light.turn_off()
        assert light.is_on() is False

    def test_returns_a_boolean_from_is_on(self, light):
        """Test is_on returns a real bool, not just a truthy value."""
        assert light.is_on() in [True, False]
        assert isinstance(light.is_on(), bool)


class TestLightThing:
    """Tests for Light through the Thing interface."""

    def test_descriptor(self, light):
        """Test the descriptor lists the power property and both methods."""
        descriptor = light.get_descriptor_json()
        assert descriptor["name"] == "Light"
        assert descriptor["properties"]["power"]["type"] == "boolean"
        assert set(descriptor["methods"]) == {"TurnOn", "TurnOff"}

    def test_invoke_turn_on(self, light):
        """Test invoking TurnOn changes the state and reports success."""
        result = light.invoke({"method": "TurnOn"})
        assert result["status"] == ResultStatus.SUCCESS
        assert light.get_state_json() == {"name": "Light", "state": {"power": True}}

    def test_invoke_turn_off(self, light):
        """Test invoking TurnOff after TurnOn switches the light off."""
        light.invoke({"method": "TurnOn"})
        light.invoke({"method": "TurnOff", "parameters": {}})
        assert light.is_on() is False
