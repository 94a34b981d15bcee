"""Tests for the prepared / completed status board."""

import uuid

from pancake_lab.services.status import OrderStatusBoard


class TestOrderStatusBoard:

    def test_starts_empty(self, status_board):
        assert status_board.prepared() == set()
        assert status_board.completed() == set()

    def test_mark_prepared_removes_from_completed(self, status_board):
        order_id = uuid.uuid4()
        status_board.mark_completed(order_id)
        status_board.mark_prepared(order_id)
        assert status_board.prepared() == {order_id}
        assert status_board.completed() == set()

    def test_mark_completed_keeps_prepared(self, status_board):
        """Completing is not symmetric with preparing."""
        order_id = uuid.uuid4()
        status_board.mark_prepared(order_id)
        status_board.mark_completed(order_id)
        assert status_board.prepared() == {order_id}
        assert status_board.completed() == {order_id}

    def test_forget_clears_both(self, status_board):
        order_id = uuid.uuid4()
        status_board.mark_prepared(order_id)
        status_board.mark_completed(order_id)
        status_board.forget(order_id)
        assert status_board.prepared() == set()
        assert status_board.completed() == set()

    def test_discard_prepared(self, status_board):
        order_id = uuid.uuid4()
        status_board.mark_prepared(order_id)
        assert status_board.is_prepared(order_id) is True
        status_board.discard_prepared(order_id)
        status_board.discard_prepared(order_id)
        assert status_board.is_prepared(order_id) is False

    def test_snapshots_are_copies(self):
        board = OrderStatusBoard()
        order_id = uuid.uuid4()
        snapshot = board.prepared()
        board.mark_prepared(order_id)
        assert snapshot == set()
        board.completed().add(order_id)
        assert board.completed() == set()
