"""Plugin entry point - registers the DeepL engine with the host tool.

The host discovers connectors through the ``cat_tool.machine_translators``
entry point group and calls ``load_plugins`` with its engine registry.
"""

import logging
from importlib.metadata import entry_points
from typing import Dict, List, Type

from deepl_connector.services.translation import DeepLTranslationService, TranslationService

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "cat_tool.machine_translators"


class EngineRegistry:
    """Machine-translation engine classes known to the host, by name."""

    def __init__(self) -> None:
        self._engines: Dict[str, Type[TranslationService]] = {}

    def register(self, engine_class: Type[TranslationService]) -> None:
        name = engine_class.name
        if not name:
            raise ValueError(f"{engine_class.__name__} has no engine name")
        if name in self._engines:
            raise ValueError(f"Engine already registered for {name}")
        self._engines[name] = engine_class
        logger.info("Registered machine translation engine %s", name)

    def unregister(self, engine_class: Type[TranslationService]) -> None:
        if self._engines.get(engine_class.name) is engine_class:
            del self._engines[engine_class.name]
            logger.info("Unregistered machine translation engine %s", engine_class.name)

    def get(self, name: str) -> Type[TranslationService]:
        if name not in self._engines:
            raise KeyError(f"No engine registered for {name}")
        return self._engines[name]

    def names(self) -> List[str]:
        return sorted(self._engines)

    def __contains__(self, name: str) -> bool:
        return name in self._engines


def load_plugins(registry: EngineRegistry) -> None:
    """Register plugins into the host."""
    registry.register(DeepLTranslationService)


def unload_plugins(registry: EngineRegistry) -> None:
    registry.unregister(DeepLTranslationService)


def discover_plugins(registry: EngineRegistry, group: str = ENTRY_POINT_GROUP) -> List[str]:
    """
    Load every installed connector plugin in the entry point group.

    Each entry point must resolve to a ``load_plugins(registry)`` callable.
    A plugin that fails to load is logged and skipped.

    Returns:
        Names of the entry points that loaded successfully.
    """
    loaded = []
    for ep in entry_points(group=group):
        try:
            loader = ep.load()
            loader(registry)
        except Exception:
            logger.exception("Failed to load plugin %s", ep.name)
            continue
        loaded.append(ep.name)
    return loaded
