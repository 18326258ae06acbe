from quetris.core.models import FallingOption
from quetris.core.services.fall_scheduler import FallScheduler

ROWS = 15


def _option(text, column, row=0):
    return FallingOption(text=text, column=column, row=row, key=f"k-{text}")


def test_tick_moves_every_option_down_one_row():
    fall = FallScheduler(ROWS)
    fall.load([_option("a", 0), _option("b", 3, row=4)])

    assert fall.tick(catcher_column=1, answer="a") is None

    assert [o.row for o in fall.options] == [1, 5]


def test_catch_happens_on_the_tick_that_reaches_the_last_row():
    fall = FallScheduler(ROWS)
    fall.load([_option("B", 2)])

    for _ in range(ROWS - 2):
        assert fall.tick(catcher_column=2, answer="B") is None
    caught = fall.tick(catcher_column=2, answer="B")

    assert caught is not None
    assert caught.is_correct
    assert caught.matched_text == "B"
    assert fall.is_exhausted()


def test_answer_comparison_is_case_sensitive():
    fall = FallScheduler(ROWS)
    fall.load([_option("b", 0, row=ROWS - 2)])

    caught = fall.tick(catcher_column=0, answer="B")

    assert caught is not None
    assert not caught.is_correct


def test_option_outside_catcher_column_stays_one_tick_then_leaves():
    fall = FallScheduler(ROWS)
    fall.load([_option("a", 0, row=ROWS - 2)])

    assert fall.tick(catcher_column=3, answer="a") is None
    assert [o.row for o in fall.options] == [ROWS - 1]

    assert fall.tick(catcher_column=3, answer="a") is None
    assert fall.is_exhausted()


def test_only_the_first_candidate_is_caught():
    fall = FallScheduler(ROWS)
    fall.load([
        _option("first", 1, row=ROWS - 2),
        _option("second", 1, row=ROWS - 1),
        _option("other", 2, row=3),
    ])

    caught = fall.tick(catcher_column=1, answer="second")

    assert caught is not None
    assert caught.matched_text == "first"
    assert not caught.is_correct
    assert [o.text for o in fall.options] == ["other"]


def test_drop_all_then_tick_resolves_immediately():
    fall = FallScheduler(ROWS)
    fall.load([_option("a", 0), _option("b", 1), _option("c", 2)])

    fall.drop_all()
    assert {o.row for o in fall.options} == {ROWS - 1}
    caught = fall.tick(catcher_column=1, answer="b")

    assert caught is not None
    assert caught.is_correct
    assert fall.is_exhausted()


def test_options_property_is_a_copy():
    fall = FallScheduler(ROWS)
    fall.load([_option("a", 0)])

    fall.options.clear()

    assert len(fall.options) == 1


def test_set_grid_rows_moves_the_catch_line():
    fall = FallScheduler(ROWS)
    fall.set_grid_rows(4)
    fall.load([_option("a", 0)])

    assert fall.last_row == 3
    assert fall.tick(0, "a") is None
    assert fall.tick(0, "a") is None
    assert fall.tick(0, "a") is not None
