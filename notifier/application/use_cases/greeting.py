"""Use case for producing the service greeting."""

from notifier.domain.entities import Greeting


DEFAULT_NAME = "World"


def create_greeting(name: str | None = None) -> Greeting:
    """Return a greeting for the provided name, or for ``World``."""

    return Greeting(message=f"Hello, {name or DEFAULT_NAME} from Notification Service!")
