"""
OptionCache - Domain Service

In-process cache of enumerated-field options for one remote task list.

Responsibility:
    - Hold field id -> ordered FieldOption list
    - Rebuild wholesale from a single remote fetch (last refresh wins)
    - Degrade to an empty cache when the fetch fails

Architecture Notes:
    - Owned explicitly: created empty at app start, refreshed before each
      dependent operation, cleared on shutdown (see src/api/main.py)
    - Refreshes are not serialized. A lookup racing a refresh may observe
      the momentarily cleared cache, which callers treat as "no options".
    - The remote source is injected (FieldDefinitionSource protocol)
"""

import logging
from typing import Any, Protocol

from src.domain.applications.value_objects.field_option import FieldOption

logger = logging.getLogger(__name__)


class FieldDefinitionSource(Protocol):
    """Anything that can list the custom-field definitions of a task list."""

    async def list_fields(self, list_id: str) -> list[dict[str, Any]]:
        ...


class OptionCache:
    """
    Field id -> enumerated options cache.

    An entry exists for every field whose definition exposed a
    `type_config.options` list during the last successful refresh, even when
    that list is empty. That distinction drives `push_dropdown_or_text`:
    an entry means "enumerated", no entry means "plain text".

    Examples:
        >>> cache = OptionCache(source=clickup_client, list_id="901")
        >>> await cache.refresh()
        >>> cache.lookup("aec8f523-...")
        [FieldOption(id='o1', name='US Citizen or Permanent Resident'), ...]
    """

    def __init__(self, source: FieldDefinitionSource, list_id: str | None) -> None:
        self.source = source
        self.list_id = list_id
        self._options: dict[str, list[FieldOption]] = {}

    async def refresh(self) -> int:
        """
        Reload every enumerated field of the configured list.

        The previous contents are discarded before fetching. Any failure is
        logged and leaves the cache empty; this method never raises.

        Returns:
            Number of enumerated fields now cached
        """
        self._options = {}

        if not self.list_id:
            logger.warning("Option cache refresh skipped: no task list configured")
            return 0

        try:
            fields = await self.source.list_fields(self.list_id)
        except Exception as e:
            logger.warning(f"Could not warm dropdown options for list {self.list_id}: {e}")
            return 0

        fresh: dict[str, list[FieldOption]] = {}
        for field_def in fields or []:
            if not isinstance(field_def, dict):
                continue
            options = (field_def.get("type_config") or {}).get("options")
            if isinstance(options, list) and field_def.get("id"):
                fresh[str(field_def["id"])] = [
                    FieldOption.from_remote(o) for o in options if isinstance(o, dict)
                ]

        self._options = fresh
        logger.info(f"Loaded dropdown option maps for {len(fresh)} fields")
        return len(fresh)

    def lookup(self, field_id: str | None) -> list[FieldOption]:
        """Cached options of a field, or an empty list if unknown. Never blocks."""
        if not field_id:
            return []
        return list(self._options.get(field_id, []))

    def has_options(self, field_id: str | None) -> bool:
        """True if the last refresh saw `field_id` as an enumerated field."""
        return bool(field_id) and field_id in self._options

    def snapshot(self) -> dict[str, list[dict[str, str]]]:
        """Plain-dict copy of the cache for diagnostics."""
        return {
            field_id: [o.to_dict() for o in options]
            for field_id, options in self._options.items()
        }

    def clear(self) -> None:
        self._options = {}

    def __len__(self) -> int:
        return len(self._options)
