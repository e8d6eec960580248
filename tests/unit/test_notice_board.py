from promptlab.services.notices import NoticeBoard
from tests.test_template import TestTemplate


class TestNoticeBoard(TestTemplate):
    def test_notices_kept_in_order(self):
        board = NoticeBoard()
        assert board.latest() is None

        board.notify("first", source="gallery")
        board.notify("second")

        assert len(board) == 2
        assert board.latest().message == "second"
        assert board.latest().source == "app"

        assert board.dismiss().message == "first"
        assert len(board) == 1

    def test_dismiss_and_clear_when_empty(self):
        board = NoticeBoard()
        assert board.dismiss() is None
        board.notify("x")
        board.clear()
        assert len(board) == 0

    def test_current_is_the_next_one_to_dismiss(self):
        board = NoticeBoard()
        assert board.current() is None
        board.notify("first")
        board.notify("second")

        assert board.current().message == "first"
        assert board.dismiss().message == "first"
        assert board.current().message == "second"
