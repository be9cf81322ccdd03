"""Closed enumerations shared by the domain: units, categories, owners, weekdays."""
from enum import Enum


class Unit(str, Enum):
    GRAMS = "g"
    MILLILITERS = "ml"
    UNIT = "pcs"
    SPOON = "spoon"
    CUP = "cup"


class Category(str, Enum):
    PROTEIN = "Protein"
    CARB = "Carbohydrate"
    VEGETABLE = "Vegetable"
    FRUIT = "Fruit"
    SPICE = "Spice/Other"
    DAIRY = "Dairy"


class RecipeOwner(str, Enum):
    LUIZA = "Luiza"
    GUSTAVO = "Gustavo"


class DayOfWeek(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"


__all__ = ["Unit", "Category", "RecipeOwner", "DayOfWeek"]
