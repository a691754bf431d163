from datetime import date
import pytest
from family_menu.config import Config
from family_menu.formatter import format_shopping_list, format_week
from family_menu.models import AppState, ShoppingListItem
from family_menu.shopping import build_shopping_list


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def items(guiso, sopa):
    return build_shopping_list([guiso, sopa], {"2026-02-20": {"lunch": "a"}, "2026-02-21": {"dinner": "b"}})


def test_groups_under_category_labels(items, config):
    output = format_shopping_list(items, config)
    assert "Frutas" in output
    assert "Verduras" in output
    assert output.index("Frutas") < output.index("Verduras")


def test_items_appear_under_their_category(items, config):
    output = format_shopping_list(items, config)
    frutas_pos = output.index("Frutas")
    verduras_pos = output.index("Verduras")
    assert frutas_pos < output.index("Manzana") < verduras_pos
    assert output.index("Cebolla") > verduras_pos


def test_line_shows_amount_unit_and_sources(items, config):
    output = format_shopping_list(items, config)
    assert "[ ] 3 unidad Cebolla  (Guiso, Sopa)" in output


def test_fractional_amounts(config):
    item = ShoppingListItem(id="s", name="Pollo", amount=1.5, unit="kg", category="carnes", recipe_names=["Pollo al horno"])
    assert "[ ] 1.5 kg Pollo" in format_shopping_list([item], config)


def test_checked_items_are_marked(items, config):
    items[0].checked = True
    output = format_shopping_list(items, config)
    assert "[x] 2 unidades Manzana" in output
    assert "1/4 checked" in output


def test_empty_list(config):
    assert format_shopping_list([], config) == "No items needed."


def test_unknown_label_falls_back_to_category(config):
    config.category_labels = {}
    item = ShoppingListItem(id="s", name="Sal", amount=1, unit="pizca", category="condimentos")
    assert "condimentos" in format_shopping_list([item], config)


def test_format_week_lists_seven_days(guiso):
    state = AppState(recipes=[guiso], calendar={"2026-02-20": {"lunch": "a"}})
    output = format_week(state, 0, today=date(2026, 2, 20))
    lines = output.splitlines()
    assert len(lines) == 7
    assert lines[0] == "2026-02-20  — | Guiso | —"
    assert lines[1] == "2026-02-21  — | — | —"


def test_format_week_second_week(guiso):
    state = AppState(recipes=[guiso], calendar={"2026-02-27": {"dinner": "a"}})
    output = format_week(state, 1, today=date(2026, 2, 20))
    assert output.splitlines()[0] == "2026-02-27  — | — | Guiso"
