"""Exceptions raised while building the content catalog."""

from typing import Optional


class CatalogError(Exception):
    """
    Base class for content-authoring defects found at load time.

    Attributes:
        message: Error description
        item_id: Id of the offending record, if known
    """

    def __init__(self, message: str, item_id: Optional[str] = None):
        self.message = message
        self.item_id = item_id

        parts = [message]
        if item_id:
            parts.append(f"Item: {item_id}")

        super().__init__("\n".join(parts))


class MissingDefaultContent(CatalogError):
    """
    Raised when an item has no localized record for the default locale.

    Attributes:
        item_id: Id of the item
        locale: The default locale that should have been present
    """

    def __init__(self, item_id: str, locale: str):
        self.locale = locale
        super().__init__(
            f"No content for default locale '{locale}'",
            item_id=item_id,
        )


class DuplicateItemError(CatalogError):
    """Raised when two records of one catalog share an id."""

    def __init__(self, item_id: str):
        super().__init__("Duplicate item id", item_id=item_id)
