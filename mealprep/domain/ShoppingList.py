"""ShoppingList aggregate: derived per-ingredient totals plus the session-local checked state."""
from typing import Dict, List, Optional
from mealprep.domain.Enums import Category, Unit


class ShoppingItem:
    def __init__(self, ingredient_id: str, name: str, unit: Unit, category: Category,
                 total_quantity: float = 0.0, checked: bool = False):
        self.ingredient_id = ingredient_id
        self.name = name
        self.unit = Unit(unit)
        self.category = Category(category)
        self.total_quantity = total_quantity
        self.checked = checked

    def add(self, quantity: float):
        '''Accumulates quantity into the running total.'''
        self.total_quantity += quantity

    def __str__(self) -> str:
        mark = "x" if self.checked else " "
        return f"[{mark}] {self.name} - {self.total_quantity:.1f} {self.unit.value}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "ingredient_id": self.ingredient_id,
            "name": self.name,
            "unit": self.unit.value,
            "category": self.category.value,
            "total_quantity": self.total_quantity,
            "checked": self.checked,
        }


class ShoppingList:
    def __init__(self, items: Optional[List[ShoppingItem]] = None):
        self.items: List[ShoppingItem] = items[:] if items else []

    def get_items(self):
        '''
        Returns the flat, category-sorted list of items.
        '''
        return self.items

    def grouped(self) -> Dict[str, List[ShoppingItem]]:
        '''
        Partitions the items by category label, keeping the flat order inside each group.
        '''
        groups: Dict[str, List[ShoppingItem]] = {}
        for item in self.items:
            groups.setdefault(item.category.value, []).append(item)
        return groups

    def toggle(self, ingredient_id: str) -> bool:
        '''
        Flips the checked flag of one item and returns the new value.
        '''
        for item in self.items:
            if item.ingredient_id == ingredient_id:
                item.checked = not item.checked
                return item.checked
        raise KeyError(f"Ingredient '{ingredient_id}' not in shopping list.")

    def unchecked(self) -> List[ShoppingItem]:
        return [item for item in self.items if not item.checked]

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Shopping List Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self):
        return {
            "items": [item.to_dict() for item in self.items],
            "groups": {label: [item.to_dict() for item in group] for label, group in self.grouped().items()},
            "count": len(self.items),
        }
