"""Observable health cell for out-of-band health signaling."""

from collections.abc import Callable

import structlog

from src.submodules.models import HealthCode


logger = structlog.get_logger()

HealthObserver = Callable[[HealthCode, HealthCode], None]


class HealthCell:
    """Single-value cell holding a HealthCode.

    Every ``set`` call notifies observers with ``(old, new)``, in
    subscription order. The value is independent of any status
    classification.
    """

    def __init__(
        self,
        initial: HealthCode = HealthCode.OKAY,
        name: str | None = None,
    ) -> None:
        """Initialize the cell.

        Args:
            initial: Initial health code.
            name: Optional submodule name bound to log messages.
        """
        self._value = initial
        self._observers: list[HealthObserver] = []
        self._log = logger.bind(component="submodules", name=name)

    @property
    def value(self) -> HealthCode:
        """Get the current health code."""
        return self._value

    def set(self, code: HealthCode) -> None:
        """Assign a new health code and notify observers.

        Args:
            code: New health code.

        Raises:
            TypeError: If code is not a HealthCode.
        """
        if not isinstance(code, HealthCode):
            raise TypeError(f"Expected HealthCode, got {type(code).__name__}")

        old = self._value
        self._value = code
        self._log.debug("health_changed", from_health=old.value, to_health=code.value)

        for observer in list(self._observers):
            observer(old, code)

    def subscribe(self, observer: HealthObserver) -> Callable[[], None]:
        """Register an observer for health changes.

        Args:
            observer: Callable receiving ``(old, new)``.

        Returns:
            Callable that removes the observer again.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe
