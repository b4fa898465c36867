"""
Element locator exports.
"""

from screenplay.locators.element_factory import (
    ConstructorShape,
    SmartElementFactory,
    clear_element_implementations,
    register_element_implementation,
    resolve_implementer,
)

__all__ = [
    "ConstructorShape",
    "SmartElementFactory",
    "register_element_implementation",
    "clear_element_implementations",
    "resolve_implementer",
]
