"""
Prototype template registry for Folio.

Stores named template items and produces independent copies of them on
demand. Registries are plain objects: construct one wherever it is needed and
pass it along.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..adapters import KIND_PREFIXES
from ..config import config
from ..exceptions import TemplateNotFoundError
from ..models import ContentItem, Decoration, copy_content_item


@dataclass
class PrototypeEntry:
    """
    A named template item.

    ``clone()`` never hands out the template itself: every clone gets its own
    id, a marked title, the ``new`` badge and fresh tag and badge lists.
    """
    name: str
    item: ContentItem
    id_infix: str = field(default_factory=lambda: config.clone_id_infix)
    title_suffix: str = field(default_factory=lambda: config.clone_title_suffix)

    def new_id(self) -> str:
        prefix = KIND_PREFIXES.get(self.item.kind, self.item.kind.value)
        return f"{prefix}-{self.id_infix}-{uuid.uuid4().hex[:12]}"

    def clone(self) -> ContentItem:
        """
        Produce an independent copy of the template.

        Returns:
            A new ContentItem; mutating it leaves the template and other clones untouched
        """
        decorations = list(self.item.decorations)
        if Decoration.NEW not in decorations:
            decorations.append(Decoration.NEW)

        clone = copy_content_item(
            self.item,
            id=self.new_id(),
            title=f"{self.item.title}{self.title_suffix}",
            decorations=decorations
        )
        logging.debug(f"Cloned template '{self.name}' as {clone.id}")
        return clone


class PrototypeRegistry:
    """
    Registry of template items keyed by name.
    """

    def __init__(self):
        self._entries: Dict[str, PrototypeEntry] = {}

    def register(self, name: str, item: ContentItem) -> PrototypeEntry:
        """
        Register a template, replacing any template with the same name.

        The registry keeps its own copy, so later changes to ``item`` do not
        leak into the template.

        Args:
            name: Unique template name
            item: The template item

        Returns:
            The stored entry
        """
        if name in self._entries:
            logging.debug(f"Replacing template '{name}'")
        entry = PrototypeEntry(name=name, item=copy_content_item(item))
        self._entries[name] = entry
        return entry

    def unregister(self, name: str) -> bool:
        """Remove a template. Returns False when it was not registered."""
        return self._entries.pop(name, None) is not None

    def get(self, name: str) -> Optional[PrototypeEntry]:
        """
        Get a template entry by name.

        Args:
            name: The name of the template

        Returns:
            The entry, or None if not found
        """
        return self._entries.get(name)

    def clone(self, name: str) -> ContentItem:
        """
        Clone the template registered under ``name``.

        Raises:
            TemplateNotFoundError: If no template has that name
        """
        entry = self._entries.get(name)
        if entry is None:
            raise TemplateNotFoundError(name)
        return entry.clone()

    def has(self, name: str) -> bool:
        return name in self._entries

    def size(self) -> int:
        return len(self._entries)

    def get_all_keys(self) -> List[str]:
        """
        Get a list of all registered template names.

        Returns:
            Template names in registration order
        """
        return list(self._entries.keys())
