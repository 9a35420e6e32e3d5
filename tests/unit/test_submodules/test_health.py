"""Unit tests for HealthCell."""

import pytest

from src.submodules.health import HealthCell
from src.submodules.models import HealthCode


class TestHealthCell:
    """Tests for HealthCell class."""

    def test_initial_value_is_okay(self) -> None:
        """A new cell holds OKAY."""
        assert HealthCell().value == HealthCode.OKAY

    def test_set_assigns_value(self) -> None:
        """set replaces the value."""
        cell = HealthCell()
        cell.set(HealthCode.ERROR)

        assert cell.value == HealthCode.ERROR

    def test_observers_receive_old_and_new(self) -> None:
        """Observers are notified with (old, new)."""
        cell = HealthCell()
        changes: list[tuple[HealthCode, HealthCode]] = []
        cell.subscribe(lambda old, new: changes.append((old, new)))

        cell.set(HealthCode.WARNING)
        cell.set(HealthCode.ERROR)

        assert changes == [
            (HealthCode.OKAY, HealthCode.WARNING),
            (HealthCode.WARNING, HealthCode.ERROR),
        ]

    def test_every_set_notifies(self) -> None:
        """Setting the same value again still notifies."""
        cell = HealthCell()
        calls: list[HealthCode] = []
        cell.subscribe(lambda _old, new: calls.append(new))

        cell.set(HealthCode.OKAY)

        assert calls == [HealthCode.OKAY]

    def test_observers_called_in_order(self) -> None:
        """Observers run in subscription order."""
        cell = HealthCell()
        order: list[str] = []
        cell.subscribe(lambda _o, _n: order.append("first"))
        cell.subscribe(lambda _o, _n: order.append("second"))

        cell.set(HealthCode.UNKNOWN)

        assert order == ["first", "second"]

    def test_unsubscribe_stops_notifications(self) -> None:
        """An unsubscribed observer is no longer called."""
        cell = HealthCell()
        calls: list[HealthCode] = []
        unsubscribe = cell.subscribe(lambda _old, new: calls.append(new))

        cell.set(HealthCode.WARNING)
        unsubscribe()
        unsubscribe()
        cell.set(HealthCode.ERROR)

        assert calls == [HealthCode.WARNING]

    def test_rejects_non_health_code(self) -> None:
        """Only HealthCode values are accepted."""
        cell = HealthCell()

        with pytest.raises(TypeError):
            cell.set("WARNING")  # type: ignore[arg-type]
        assert cell.value == HealthCode.OKAY
