import pytest

from healthy_products.errors import ConfigurationError
from healthy_products.game.machine import GameController
from healthy_products.game.player import Direction
from healthy_products.game.state import Mode
from healthy_products.input import Action, Command, KeyMapper
from healthy_products.input.dispatcher import InputDispatcher


def test_default_mapping_movement_wasd_and_arrows():
    mapper = KeyMapper.default()

    assert mapper.translate_key("W").action is Action.MOVE_UP
    assert mapper.translate_key("up").action is Action.MOVE_UP
    assert mapper.translate_key("a").action is Action.MOVE_LEFT
    assert mapper.translate_key("LEFT").action is Action.MOVE_LEFT
    assert mapper.translate_key("S").action is Action.MOVE_DOWN
    assert mapper.translate_key("RIGHT").direction is Direction.RIGHT


def test_default_mapping_menu_keys():
    mapper = KeyMapper.default()

    assert mapper.translate_key("1") == Command.select_level(1)
    assert mapper.translate_key("KEY_2") == Command.select_level(2)
    assert mapper.translate_key("NUM_3") == Command.select_level(3)
    assert mapper.translate_key("p").action is Action.PAUSE
    assert mapper.translate_key("R").action is Action.RESUME
    assert mapper.translate_key("m").action is Action.MAIN_MENU
    assert mapper.translate_key("F13") is None
    assert mapper.translate_key("") is None


def test_overrides_replace_default_keys_of_that_action():
    mapper = KeyMapper.default({"pause": ["SPACE", "ESCAPE"]})

    assert mapper.translate_key("space").action is Action.PAUSE
    assert mapper.translate_key("ESCAPE").action is Action.PAUSE
    assert mapper.translate_key("P") is None


def test_rebinding_and_unbinding():
    mapper = KeyMapper.default()
    mapper.bind("Q", Command(Action.MAIN_MENU))
    assert mapper.translate_key("q").action is Action.MAIN_MENU

    mapper.unbind("Q")
    assert mapper.translate_key("Q") is None


def test_command_names():
    assert Command.from_name("select_level_2") == Command.select_level(2)
    assert Command.from_name("Move_Left") == Command(Action.MOVE_LEFT)
    assert Command.select_level(3).name == "select_level_3"
    assert Command(Action.PAUSE).name == "pause"

    with pytest.raises(ConfigurationError):
        Command.from_name("select_level")
    with pytest.raises(ConfigurationError):
        Command.from_name("jump")


def test_unknown_action_in_mapping_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        KeyMapper.from_mapping({"teleport": ["T"]})


def test_dispatcher_routes_keys_through_the_controller():
    dispatcher = InputDispatcher(GameController(seed=3))

    # Movement in the menu is ignored
    state = dispatcher.dispatch_key("W")
    assert state.mode is Mode.MAIN_MENU

    state = dispatcher.dispatch_keys(["2", "A", "P"])
    assert state.mode is Mode.PAUSED
    assert state.level_number == 2
    assert state.level.player.pos == (18, 7)

    # Unbound keys leave the state untouched
    assert dispatcher.dispatch_key("F13") is state

    state = dispatcher.dispatch_keys(["R", "M"])
    assert state.mode is Mode.PLAYING

    state = dispatcher.dispatch_keys(["P", "M"])
    assert state.mode is Mode.MAIN_MENU
