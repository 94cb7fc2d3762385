import pytest

from katarun.lessons.records import (
    ChangeColor,
    Echo,
    Move,
    Package,
    Point,
    Quit,
    State,
    Wrapper,
)


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", -2210)


def test_zero_weight_package_fails():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 0)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international() is True


def test_create_local_package():
    assert Package("Canada", "Canada", 1200).is_international() is False


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    cents_per_gram = 3
    assert package.get_fees(cents_per_gram) == 4500
    assert package.get_fees(cents_per_gram * 2) == 9000


def test_match_message_call():
    state = State(
        quit=False,
        position=Point(0, 0),
        color=(0, 0, 0),
        message="hello world",
    )
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert state.message == "hello world"


def test_echo_replaces_message():
    state = State()
    state.process(Echo("goodbye"))
    assert state.message == "goodbye"
    assert state.quit is False


def test_unknown_message_rejected():
    with pytest.raises(TypeError):
        State().process("jump")


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"