import pytest

from pancake_lab.services.order_log import OrderLog
from pancake_lab.services.pancake_service import PancakeService
from pancake_lab.services.status import OrderStatusBoard


@pytest.fixture
def order_log():
    """Fresh in-memory order log that does not echo to the Python logger."""
    return OrderLog(echo=False, max_entries=0)


@pytest.fixture
def status_board():
    return OrderStatusBoard()


@pytest.fixture
def service(order_log, status_board):
    """PancakeService wired to the per-test log and status board."""
    return PancakeService(order_log, status=status_board)


@pytest.fixture
def order(service):
    """A freshly created order for building 10, room 5."""
    return service.create_order(10, 5)
