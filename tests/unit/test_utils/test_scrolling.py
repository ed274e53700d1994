"""Tests for the infinite scroll trigger policy."""


def test_should_fetch_more_near_end():
    from ui.utils.scrolling import should_fetch_more

    assert should_fetch_more(20, 17, 3) is True


def test_should_fetch_more_far_from_end():
    from ui.utils.scrolling import should_fetch_more

    assert should_fetch_more(20, 10, 3) is False


def test_should_fetch_more_empty_list():
    from ui.utils.scrolling import should_fetch_more

    assert should_fetch_more(0, 0, 3) is False


def test_should_fetch_more_default_threshold():
    from ui.utils.scrolling import should_fetch_more

    assert should_fetch_more(20, 16) is False
    assert should_fetch_more(20, 17) is True


def test_should_fetch_more_short_list_always_triggers():
    from ui.utils.scrolling import should_fetch_more

    assert should_fetch_more(2, 0, 3) is True


def test_last_visible_index_top_of_list():
    from ui.utils.scrolling import last_visible_index

    # 10 rows of 100px, 350px viewport: rows 0-3 visible
    assert last_visible_index(0, 350, 1000, 10) == 3


def test_last_visible_index_exact_row_boundary():
    from ui.utils.scrolling import last_visible_index

    assert last_visible_index(0, 400, 1000, 10) == 3


def test_last_visible_index_scrolled_to_bottom():
    from ui.utils.scrolling import last_visible_index

    assert last_visible_index(650, 350, 1000, 10) == 9


def test_last_visible_index_viewport_taller_than_content():
    from ui.utils.scrolling import last_visible_index

    assert last_visible_index(0, 800, 300, 3) == 2


def test_last_visible_index_empty():
    from ui.utils.scrolling import last_visible_index

    assert last_visible_index(0, 800, 0, 0) == -1
