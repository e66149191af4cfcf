"""FastAPI endpoints for the Catalogue context."""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from caterly.catalogue.api.schemas import (
    CreateRecipeRequest,
    RecipeIdResponse,
    RecipeResponse,
    StatusResponse,
    UpdateRecipeRequest,
)
from caterly.catalogue.management import (
    CreateRecipe,
    DeleteRecipe,
    UpdateRecipe,
    list_recipes,
    list_recipes_by_category,
    list_recipes_by_owner,
)
from caterly.catalogue.recipe import Recipe
from caterly.identity.api.dependencies import require_role
from caterly.identity.authentication import Identity

router = APIRouter(prefix="/recipes", tags=["recipes"])

caterer_only = require_role("caterer")


@router.get("", response_model=list[RecipeResponse])
async def get_recipes() -> list[RecipeResponse]:
    return [RecipeResponse.from_recipe(recipe) for recipe in list_recipes()]


@router.get("/category/{category}", response_model=list[RecipeResponse])
async def get_recipes_by_category(category: str) -> list[RecipeResponse]:
    return [RecipeResponse.from_recipe(recipe) for recipe in list_recipes_by_category(category)]


@router.get("/mine", response_model=list[RecipeResponse])
async def get_my_recipes(identity: Identity = Depends(caterer_only)) -> list[RecipeResponse]:
    return [RecipeResponse.from_recipe(recipe) for recipe in list_recipes_by_owner(identity.identity_id)]


@router.get("/caterer/{caterer_id}", response_model=list[RecipeResponse])
async def get_caterer_recipes(caterer_id: str) -> list[RecipeResponse]:
    return [RecipeResponse.from_recipe(recipe) for recipe in list_recipes_by_owner(caterer_id)]


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(recipe_id: str) -> RecipeResponse:
    recipe = current_domain.repository_for(Recipe).get(recipe_id)
    return RecipeResponse.from_recipe(recipe)


@router.post("", status_code=201, response_model=RecipeIdResponse)
async def create_recipe(body: CreateRecipeRequest, identity: Identity = Depends(caterer_only)) -> RecipeIdResponse:
    command = CreateRecipe(
        owner_id=identity.identity_id,
        name=body.name,
        description=body.description,
        price=body.price,
        ingredients=json.dumps(body.ingredients),
        category=body.category,
        image=body.image,
    )
    result = current_domain.process(command, asynchronous=False)
    return RecipeIdResponse(recipe_id=result)


@router.put("/{recipe_id}", response_model=StatusResponse)
async def update_recipe(
    recipe_id: str, body: UpdateRecipeRequest, identity: Identity = Depends(caterer_only)
) -> StatusResponse:
    command = UpdateRecipe(
        recipe_id=recipe_id,
        owner_id=identity.identity_id,
        name=body.name,
        description=body.description,
        price=body.price,
        ingredients=json.dumps(body.ingredients) if body.ingredients is not None else None,
        category=body.category,
        image=body.image,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.delete("/{recipe_id}", response_model=StatusResponse)
async def delete_recipe(recipe_id: str, identity: Identity = Depends(caterer_only)) -> StatusResponse:
    current_domain.process(DeleteRecipe(recipe_id=recipe_id, owner_id=identity.identity_id), asynchronous=False)
    return StatusResponse()
