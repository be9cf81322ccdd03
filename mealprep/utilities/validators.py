"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional

from mealprep.domain.Enums import Category, RecipeOwner, Unit


class IngredientInput(BaseModel):
    """Schema for ingredient creation."""
    name: str = Field(..., min_length=1, max_length=100)
    unit: Unit
    category: Category

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        v = v.strip()
        if not v:
            raise ValueError('Ingredient name cannot be empty')
        return v


class IngredientUpdate(BaseModel):
    """Schema for ingredient edits (rename / recategorize)."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    unit: Optional[Unit] = None
    category: Optional[Category] = None

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip() if isinstance(v, str) else v


class RecipeIngredientInput(BaseModel):
    ingredient_id: str = Field(..., min_length=1)
    quantity: float = Field(..., gt=0)


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    name: str = Field(..., min_length=1, max_length=200)
    servings: int = Field(1, ge=1, le=100)
    prep_time_minutes: int = Field(30, ge=0)
    instructions: str = ""
    owner: RecipeOwner = RecipeOwner.GUSTAVO
    ingredients: List[RecipeIngredientInput] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()


class RecipeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    servings: Optional[int] = Field(None, ge=1, le=100)
    prep_time_minutes: Optional[int] = Field(None, ge=0)
    instructions: Optional[str] = None
    owner: Optional[RecipeOwner] = None
    ingredients: Optional[List[RecipeIngredientInput]] = None


class DayPlanInput(BaseModel):
    """Schema for replacing one day of the plan."""
    recipe_ids: List[str] = Field(default_factory=list)
    servings: Dict[str, int] = Field(default_factory=dict)

    @field_validator('servings')
    @classmethod
    def validate_servings(cls, v):
        """Servings must be at least 1."""
        for rid, amount in v.items():
            if amount < 1:
                raise ValueError(f'Servings for {rid} must be at least 1')
        return v


class ScheduleRecipeInput(BaseModel):
    recipe_id: str = Field(..., min_length=1)
    servings: int = Field(1, ge=1)


class ServingsAdjustInput(BaseModel):
    delta: int


class InstructionsRequest(BaseModel):
    recipe_id: str = Field(..., min_length=1)
