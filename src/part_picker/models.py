"""Core data models for Part Picker."""

from uuid import UUID, uuid4

from pydantic import BaseModel, Field

UNCATEGORIZED = "Uncategorized"
ALL_CATEGORIES = "All"

# Shown before anything is imported.
SAMPLE_LABELS = [
    "[동물] 강아지",
    "[동물] 고양이",
    "[동물] 다람쥐",
    "[식물] 토마토",
    "[식물] 상추",
]


class Item(BaseModel):
    """A selectable catalog item."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    category: str = UNCATEGORIZED


class ImportedItem(Item):
    """An item fresh from ingestion, carrying an optional default quantity."""

    default_quantity: int | None = None

    def to_item(self) -> Item:
        """Drop the transient quantity hint."""
        return Item(id=self.id, name=self.name, category=self.category)


class Catalog(BaseModel):
    """The loaded items and the current selection (item id -> quantity)."""

    items: list[Item] = Field(default_factory=list)
    selection: dict[UUID, int] = Field(default_factory=dict)

    def get_item(self, item_id: UUID) -> Item | None:
        """Find an item by id."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    @property
    def selected_count(self) -> int:
        """Number of selected items."""
        return len(self.selection)
