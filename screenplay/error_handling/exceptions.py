"""
Exception hierarchy for the screenplay engine.

The performance engine decides whether to continue or abort a performance by
the class of the error a task or consequence raises, so each outcome that is
not a plain failure has its own exception type.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class ScreenplayError(Exception):
    """Base exception for all screenplay errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
            "cause": str(self.cause) if self.cause else None
        }


class IgnoreStepError(ScreenplayError):
    """Abandon the current activity and report its step as ignored."""

    def __init__(self, message: str = "Step ignored", **kwargs):
        super().__init__(message, **kwargs)


class PendingStepError(ScreenplayError):
    """The activity is not implemented yet; report its step as pending."""

    def __init__(self, message: str = "Step not implemented yet", **kwargs):
        super().__init__(message, **kwargs)


class AssumptionFailure(ScreenplayError):
    """A precondition of the test does not hold; always aborts the performance."""

    def __init__(
        self,
        message: str,
        assumption: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.assumption = assumption
        self.details.update({
            "assumption": assumption
        })


class NoAbilityError(ScreenplayError):
    """Raised when an actor is asked to use an ability it was never given."""

    def __init__(self, actor_name: str, ability_kind: type, **kwargs):
        super().__init__(
            f"{actor_name} does not have the ability to {ability_kind.__name__}",
            **kwargs
        )
        self.actor_name = actor_name
        self.ability_kind = ability_kind
        self.details.update({
            "actor_name": actor_name,
            "ability_kind": ability_kind.__name__
        })


class NoSuitableConstructorError(ScreenplayError):
    """Raised when an element implementation declares no known constructor shape."""

    def __init__(self, target_class: type, **kwargs):
        class_name = target_class.__name__
        super().__init__(
            "No suitable constructor found.  "
            f"Expected:  {class_name}(WebDriver, ElementLocator, long, long) "
            f"or {class_name}(WebDriver, ElementLocator, WebElement, long, long)",
            **kwargs
        )
        self.target_class = target_class
        self.details.update({
            "target_class": class_name
        })
