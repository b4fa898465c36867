"""
Builds element proxies for page objects.

An element implementation declares which constructor it has through its
``constructor_shape`` class attribute; the factory fills the arguments in
from the page's driver and timeouts.
"""

from enum import Enum
from typing import Any, Dict, Optional, Type

from screenplay.config.settings import get_settings
from screenplay.core.interfaces import Page
from screenplay.error_handling.exceptions import NoSuitableConstructorError
from screenplay.monitoring.logger import get_logger

logger = get_logger(__name__)


class ConstructorShape(str, Enum):
    """Constructor signatures an element implementation may have."""

    DRIVER_LOCATOR_TIMEOUT = "driver_locator_timeout"
    DRIVER_LOCATOR_TWO_TIMEOUTS = "driver_locator_two_timeouts"
    DRIVER_LOCATOR_ELEMENT_TIMEOUT = "driver_locator_element_timeout"
    DRIVER_LOCATOR_ELEMENT_TWO_TIMEOUTS = "driver_locator_element_two_timeouts"


_implementations: Dict[type, type] = {}


def register_element_implementation(interface_type: type, implementer: type) -> None:
    """Use ``implementer`` whenever a proxy for ``interface_type`` is needed."""
    _implementations[interface_type] = implementer


def clear_element_implementations() -> None:
    _implementations.clear()


def resolve_implementer(interface_type: type) -> type:
    """The interface itself when it declares a shape, else its registered implementer."""
    if getattr(interface_type, "constructor_shape", None) is not None:
        return interface_type
    return _implementations.get(interface_type, interface_type)


class SmartElementFactory:
    """Instantiates the element implementation for one locator on a page."""

    def __init__(self, interface_type: type, locator: Any, page: Page):
        """
        Args:
            interface_type: Element type requested by the page object
            locator: Locator handed to the element
            page: Page supplying the driver and timeouts
        """
        self.interface_type = interface_type
        self.implementer: Type[Any] = resolve_implementer(interface_type)
        self.locator = locator
        self.page = page

    def new_element_instance(self) -> Any:
        """
        Create the element.

        Raises:
            NoSuitableConstructorError: If the implementer declares no known shape
        """
        shape = _declared_shape(self.implementer)
        if shape is None:
            raise NoSuitableConstructorError(self.implementer)

        driver = self.page.get_driver()
        implicit_wait = self._implicit_wait_timeout_ms()
        logger.debug(f"Creating {self.implementer.__name__} with {shape.value} for {self.locator}")

        if shape is ConstructorShape.DRIVER_LOCATOR_TIMEOUT:
            return self.implementer(driver, self.locator, implicit_wait)
        if shape is ConstructorShape.DRIVER_LOCATOR_TWO_TIMEOUTS:
            return self.implementer(
                driver, self.locator, implicit_wait, self._wait_for_timeout_ms()
            )
        if shape is ConstructorShape.DRIVER_LOCATOR_ELEMENT_TIMEOUT:
            return self.implementer(driver, self.locator, None, implicit_wait)
        return self.implementer(
            driver, self.locator, None, implicit_wait, self._wait_for_timeout_ms()
        )

    def _implicit_wait_timeout_ms(self) -> int:
        timeout = self.page.get_implicit_wait_timeout_ms()
        if timeout is None:
            return get_settings().implicit_wait_timeout_ms
        return timeout

    def _wait_for_timeout_ms(self) -> int:
        timeout = self.page.get_wait_for_timeout_ms()
        if timeout is None:
            return get_settings().wait_for_timeout_ms
        return timeout


def _declared_shape(implementer: type) -> Optional[ConstructorShape]:
    shape = getattr(implementer, "constructor_shape", None)
    if shape is None:
        return None
    try:
        return ConstructorShape(shape)
    except ValueError:
        return None
