"""
Concurrency tests for the pancake order service.

These run many threads against one service and check that per-order locking
keeps every order consistent.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from pancake_lab.errors import OrderNotFoundError
from pancake_lab.recipes import FixedRecipe, PancakeIngredient


INGREDIENTS = [
    PancakeIngredient.DARK_CHOCOLATE,
    PancakeIngredient.WHIPPED_CREAM,
    PancakeIngredient.HAZELNUTS,
]
FULL_CUSTOM = "Delicious pancake with dark chocolate, whipped cream, hazelnuts!"


class TestIndependentOrders:

    def test_full_lifecycle_in_parallel(self, service, order_log):
        """Each thread creates, assembles, prepares and delivers its own order."""

        def lifecycle(n):
            order = service.create_order(n, n)
            service.create_custom(order.id)
            for ingredient in INGREDIENTS:
                service.add_ingredient(order.id, ingredient)
            service.finish_custom(order.id)
            service.add_pancakes(order.id, FixedRecipe.MILK_CHOCOLATE, 2)
            service.prepare_order(order.id)
            return order, service.deliver_order(order.id)

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lifecycle, range(100)))

        for order, delivered in results:
            assert delivered is not None
            assert delivered.order == order
            assert delivered.pancakes == [
                FULL_CUSTOM,
                "Delicious pancake with milk chocolate!",
                "Delicious pancake with milk chocolate!",
            ]

        assert len(service.registry) == 0
        assert service.list_prepared_orders() == set()
        # 3 pancakes added and one delivery per order
        assert len(order_log.entries()) == 100 * 4


class TestSharedOrder:

    def test_viewers_never_see_partial_custom(self, service, order):
        """Once finish_custom returns, no view shows a partial ingredient set."""
        stop = threading.Event()
        bad_views = []

        def viewer():
            while not stop.is_set():
                for description in service.view_order(order.id):
                    if description != FULL_CUSTOM:
                        bad_views.append(description)

        viewers = [threading.Thread(target=viewer) for _ in range(4)]
        for t in viewers:
            t.start()
        try:
            for _ in range(50):
                service.create_custom(order.id)
                for ingredient in INGREDIENTS:
                    service.add_ingredient(order.id, ingredient)
                service.finish_custom(order.id)
        finally:
            stop.set()
            for t in viewers:
                t.join()

        assert bad_views == []
        assert service.view_order(order.id) == [FULL_CUSTOM] * 50

    def test_concurrent_fixed_adds_are_all_kept(self, service, order):
        def add(_):
            service.add_pancakes(order.id, FixedRecipe.DARK_CHOCOLATE, 5)

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(add, range(40)))

        assert len(service.view_order(order.id)) == 200

    def test_cancel_races_with_writers(self, service, order):
        """Writers either land before the cancel or see the order as gone."""
        errors = []

        def writer():
            for _ in range(200):
                try:
                    service.add_pancakes(order.id, FixedRecipe.MILK_CHOCOLATE, 1)
                except OrderNotFoundError:
                    return
                except Exception as exc:  # pragma: no cover - surfaced below
                    errors.append(exc)
                    return

        threads = [threading.Thread(target=writer) for _ in range(4)]
        for t in threads:
            t.start()
        service.cancel_order(order.id)
        for t in threads:
            t.join()

        assert errors == []
        assert order.id not in service.registry
        assert service.view_order(order.id) == []

    def test_prepare_and_complete_interleave(self, service):
        """Status moves stay atomic under contention."""
        orders = [service.create_order(1, i) for i in range(50)]

        def churn(order):
            for _ in range(20):
                service.complete_order(order.id)
                service.prepare_order(order.id)

        with ThreadPoolExecutor(max_workers=10) as pool:
            list(pool.map(churn, orders))

        ids = {o.id for o in orders}
        assert service.list_prepared_orders() == ids
        assert service.list_completed_orders() == set()
