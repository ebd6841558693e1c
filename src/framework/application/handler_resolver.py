import re
from typing import Any, Dict, Type


class HandlerResolver:
    """Resolves message handlers from a DI container by naming convention.

    ``CreateLocationCommand`` -> ``create_location_command_handler`` provider.
    Providers are cached per message type; a fresh handler is built per dispatch.
    """

    def __init__(self, container: Any) -> None:
        self.container = container
        self._providers_cache: Dict[Type, Any] = {}

    def resolve(self, message: Any) -> Any:
        message_type = type(message)
        provider = self._providers_cache.get(message_type)
        if provider is None:
            provider_name = self._camel_to_snake(f"{message_type.__name__}Handler")
            provider = getattr(self.container, provider_name, None)
            if provider is None:
                raise LookupError(f"No handler registered for {message_type.__name__} ({provider_name})")
            self._providers_cache[message_type] = provider
        return provider()

    @staticmethod
    def _camel_to_snake(name: str) -> str:
        s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
        return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()
