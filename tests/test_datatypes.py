import dataclasses

import pytest

from exlings.lessons.datatypes import (
    ChangeColor,
    ColorClassicStruct,
    ColorTupleStruct,
    Echo,
    Move,
    Order,
    Package,
    Point,
    Quit,
    State,
    UnitStruct,
    classify_character,
    create_order_template,
    describe_array,
    describe_cat,
    describe_point,
    drain_optionals,
    optional_numbers,
    print_number,
    second_of,
    slice_out_of_array,
    time_greetings,
)


def test_match_message_call(capsys):
    state = State(quit=False, position=Point(0, 0), color=(0, 0, 0))
    state.process(ChangeColor((255, 0, 255)))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert capsys.readouterr().out == "hello world\n"


def test_process_rejects_unknown_message():
    with pytest.raises(TypeError):
        State().process("not a message")


def test_classic_c_structs():
    green = ColorClassicStruct(name="green", hex="#00FF00")
    assert green.name == "green"
    assert green.hex == "#00FF00"


def test_tuple_structs():
    green = ColorTupleStruct("green", "#00FF00")
    assert green[0] == "green"
    assert green[1] == "#00FF00"


def test_unit_structs():
    unit_struct = UnitStruct()
    message = f"{unit_struct!r}s are fun!"
    assert message == "UnitStructs are fun!"


def test_your_order():
    order_template = create_order_template()
    your_order = dataclasses.replace(order_template, name="Hacker in Rust", count=1)
    assert your_order.name == "Hacker in Rust"
    assert your_order.year == order_template.year
    assert your_order.made_by_phone == order_template.made_by_phone
    assert your_order.made_by_mobile == order_template.made_by_mobile
    assert your_order.made_by_email == order_template.made_by_email
    assert your_order.item_number == order_template.item_number
    assert your_order.count == 1
    assert isinstance(your_order, Order)


def test_order_template_values():
    template = create_order_template()
    assert template.name == "Bob"
    assert template.year == 2019
    assert template.made_by_email is True
    assert template.item_number == 123


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError, match="weightless"):
        Package("Spain", "Austria", -2210)


def test_create_international_package():
    package = Package("Spain", "Russia", 1200)
    assert package.is_international()


def test_create_local_package():
    sender_country = "Canada"
    package = Package(sender_country, sender_country, 1200)
    assert not package.is_international()


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(3) == 4500


def test_slice_out_of_array():
    assert slice_out_of_array([1, 2, 3, 4, 5]) == [2, 3, 4]


def test_indexing_tuple():
    assert second_of((1, 2, 3)) == 2


def test_time_greetings():
    assert time_greetings(True, True) == ["Good morning!", "Good evening!"]
    assert time_greetings(True, False) == ["Good morning!"]
    assert time_greetings(False, False) == []


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("C", "Alphabetical!"),
        ("7", "Numerical!"),
        ("#", "Neither alphabetic nor numeric!"),
    ],
)
def test_classify_character(ch, expected):
    assert classify_character(ch) == expected


def test_classify_character_needs_one_character():
    with pytest.raises(ValueError):
        classify_character("ab")


def test_describe_array():
    assert describe_array(range(1001)) == "Wow, that's a big array!"
    assert describe_array([0]) == "Meh, I eat arrays like that for breakfast."


def test_describe_cat():
    assert describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."


def test_print_number(capsys):
    assert print_number(13) == "printing: 13"
    assert capsys.readouterr().out == "printing: 13\n"


def test_print_number_none():
    with pytest.raises(ValueError):
        print_number(None)


def test_optional_numbers_shape():
    numbers = optional_numbers()
    assert len(numbers) == 5
    assert numbers[0] == 0
    assert numbers == sorted(numbers)


def test_drain_optionals_pops_from_end():
    values = [1, 2, 3]
    assert drain_optionals(values) == [
        "current value: 3",
        "current value: 2",
        "current value: 1",
    ]
    assert values == []


def test_drain_optionals_stops_at_missing():
    values = [1, None, 2]
    assert drain_optionals(values) == ["current value: 2"]
    assert values == [1]


def test_describe_point():
    assert describe_point(Point(100, 200)) == "Co-ordinates are 100,200 "
    assert describe_point(None) == "no match"