"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from caterly.catalogue.recipe import Recipe

# --- Request Schemas ---


class CreateRecipeRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Jollof Rice",
                    "description": "Smoky party-style jollof with fried plantain",
                    "ingredients": ["rice", "tomato", "pepper", "plantain"],
                    "category": "Mains",
                    "price": 12.5,
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    ingredients: list[str] = Field(default_factory=list)
    category: str | None = Field(None, max_length=100)
    image: str | None = None


class UpdateRecipeRequest(BaseModel):
    name: str | None = Field(None, max_length=200)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    ingredients: list[str] | None = None
    category: str | None = Field(None, max_length=100)
    image: str | None = None


# --- Response Schemas ---


class RecipeResponse(BaseModel):
    recipe_id: str
    name: str
    description: str
    ingredients: list[str]
    category: str
    image: str | None = None
    price: float
    owner_id: str
    created_at: datetime | None = None

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> RecipeResponse:
        return cls(
            recipe_id=str(recipe.id),
            name=recipe.name,
            description=recipe.description,
            ingredients=recipe.ingredient_list,
            category=recipe.category,
            image=recipe.image,
            price=recipe.price,
            owner_id=str(recipe.owner_id),
            created_at=recipe.created_at,
        )


class RecipeIdResponse(BaseModel):
    recipe_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
