from nvstore.core.navigation import PathNavigator, VectorFrame


def _nav_at(*segments):
    nav = PathNavigator()
    for seg in segments:
        nav.change_path(seg)
    return nav


class TestResolve:
    def test_root_and_nested(self):
        nav = PathNavigator()
        assert nav.resolve("fsv") == "/fsv"
        nav.change_path("fsv")
        assert nav.current_path == "/fsv"
        assert nav.resolve("mode") == "/fsv/mode"

    def test_leading_slash_supplies_separator(self):
        nav = PathNavigator()
        assert nav.resolve("/fsv/mode") == "/fsv/mode"
        nav.change_path("a")
        assert nav.resolve("/b") == "/a/b"

    def test_no_other_normalisation(self):
        nav = PathNavigator()
        assert nav.resolve("a//b") == "/a//b"
        assert nav.resolve("a/../b") == "/a/../b"


class TestAscend:
    def test_ascend_drops_last_component(self):
        nav = _nav_at("a", "b", "c")
        nav.change_path("..")
        assert nav.current_path == "/a/b"
        nav.change_path("..")
        nav.change_path("..")
        assert nav.current_path == ""

    def test_ascend_at_root_is_noop(self):
        nav = PathNavigator()
        for _ in range(3):
            nav.change_path("..")
        assert nav.current_path == ""

    def test_ascend_ignores_vector_frame(self):
        nav = _nav_at("list")
        nav.vector_begin()
        nav.change_path("..")
        assert nav.current_path == ""
        assert nav.top_frame == VectorFrame(key_prefix=None, counter=0)


class TestVectorAddressing:
    def test_first_segment_names_the_field(self):
        nav = _nav_at("colors")
        nav.vector_begin()
        nav.change_path("item")
        assert nav.current_path == "/colors/item[0]"
        nav.change_path("..")
        nav.change_path("item")
        assert nav.current_path == "/colors/item[1]"

    def test_other_segments_append_normally(self):
        nav = PathNavigator()
        nav.vector_begin()
        nav.change_path("item")
        nav.change_path("name")
        assert nav.current_path == "/item[0]/name"
        assert nav.top_frame.counter == 1

    def test_repeated_descent_nests(self):
        nav = PathNavigator()
        nav.vector_begin()
        nav.change_path("items")
        nav.change_path("items")
        assert nav.current_path == "/items[0]/items[1]"

    def test_only_innermost_frame_applies(self):
        nav = PathNavigator()
        nav.vector_begin()
        nav.change_path("rows")
        nav.vector_begin()
        nav.change_path("cells")
        nav.change_path("..")
        nav.change_path("cells")
        assert nav.current_path == "/rows[0]/cells[1]"
        nav.vector_end()
        nav.change_path("..")
        nav.change_path("..")
        nav.change_path("rows")
        assert nav.current_path == "/rows[1]"

    def test_vector_end_on_empty_stack_is_noop(self):
        nav = PathNavigator()
        assert nav.vector_end() is None
        nav.vector_begin()
        nav.vector_end()
        nav.vector_end()
        assert nav.depth == 0


class TestProbe:
    def test_probe_outside_vector_is_resolve(self):
        nav = _nav_at("a")
        assert nav.probe("b") == "/a/b"
        assert nav.current_path == "/a"

    def test_probe_uses_current_index_without_advancing(self):
        nav = PathNavigator()
        nav.vector_begin()
        assert nav.probe("item") == "/item[0]"
        assert nav.probe("item") == "/item[0]"
        assert nav.current_path == ""
        assert nav.top_frame.key_prefix == "item"
        nav.change_path("item")
        assert nav.current_path == "/item[0]"
        nav.change_path("..")
        assert nav.probe("item") == "/item[1]"

    def test_probe_of_other_segment_is_plain(self):
        nav = PathNavigator()
        nav.vector_begin()
        nav.probe("item")
        assert nav.probe("count") == "/count"


def test_subtree_root():
    nav = _nav_at("x", "y")
    assert nav.subtree_root(".") == "/x/y"
    assert nav.subtree_root("z") == "/x/y/z"


def test_subtree_root_is_not_vector_aware():
    nav = PathNavigator()
    nav.vector_begin()
    assert nav.subtree_root("item") == "/item"


def test_reset_clears_path_and_frames():
    nav = _nav_at("a")
    nav.vector_begin()
    nav.reset()
    assert nav.current_path == ""
    assert nav.depth == 0
