import pytest

from level2_schema.options import OPTION_COLORS, OptionRegistry
from utils import SequentialIdGenerator


def test_palette_has_nine_colors_without_default():
    assert len(OPTION_COLORS) == 9
    assert "propColorDefault" not in OPTION_COLORS
    assert OPTION_COLORS[0] == "propColorGray"


def test_tenth_option_wraps_to_first_color():
    registry = OptionRegistry(SequentialIdGenerator())
    options = [registry.mint(f"v{i}") for i in range(10)]

    assert [o.color for o in options[:9]] == list(OPTION_COLORS)
    assert options[9].color == OPTION_COLORS[0]


def test_cursor_is_shared_across_columns():
    registry = OptionRegistry(SequentialIdGenerator())
    first = registry.register_options(["a", "b", "c"])
    second = registry.register_options(["d", "e"])

    assert [o.color for o in first] == list(OPTION_COLORS[:3])
    assert [o.color for o in second] == list(OPTION_COLORS[3:5])
    assert registry.cursor == 5


def test_register_options_dedupes_in_first_seen_order():
    registry = OptionRegistry(SequentialIdGenerator())
    options = registry.register_options(["b", "a", "b"])

    assert [o.value for o in options] == ["b", "a"]
    assert len({o.id for o in options}) == 2


def test_reset_restarts_rotation():
    registry = OptionRegistry(SequentialIdGenerator())
    registry.register_options(["a", "b"])
    registry.reset()

    assert registry.mint("c").color == OPTION_COLORS[0]


def test_fresh_registries_are_independent():
    first = OptionRegistry(SequentialIdGenerator())
    first.register_options(["a", "b", "c"])
    second = OptionRegistry(SequentialIdGenerator())

    assert second.mint("a").color == OPTION_COLORS[0]


def test_empty_palette_rejected():
    with pytest.raises(ValueError):
        OptionRegistry(palette=())
