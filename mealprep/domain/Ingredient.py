"""Ingredient domain entity: id, name, unit of measure, category."""
from typing import Optional
from mealprep.domain.Enums import Unit, Category


class Ingredient:
    def __init__(self, id: str = "", name: str = "", unit: Unit = Unit.GRAMS,
                 category: Category = Category.SPICE):
        self.id = id
        self.name = name
        self.unit = Unit(unit)
        self.category = Category(category)

    def matches(self, term: Optional[str]) -> bool:
        '''Case-insensitive search on name or category label. Empty term matches everything.'''
        if not term:
            return True
        t = term.strip().lower()
        return t in self.name.lower() or t in self.category.value.lower()

    def __str__(self) -> str:
        return f"{self.name} ({self.unit.value}) - {self.category.value}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "name", "unit", "category"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered.setdefault("id", "")
        filtered.setdefault("name", "")
        return Ingredient(**filtered)

    def to_dict(self):
        '''Converts the Ingredient object to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "unit": self.unit.value,
            "category": self.category.value,
        }
