"""FastAPI endpoints for accounts, login and favorites."""

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from caterly.catalogue.api.schemas import RecipeResponse
from caterly.identity.account import Account, Role
from caterly.identity.api.dependencies import current_identity
from caterly.identity.api.schemas import (
    AccountResponse,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    StatusResponse,
    TokenResponse,
)
from caterly.identity.authentication import Identity, authenticate, hash_password
from caterly.identity.favorites import AddFavorite, RemoveFavorite, list_favorites
from caterly.identity.registration import RegisterAccount

auth_router = APIRouter(prefix="/auth", tags=["auth"])
accounts_router = APIRouter(tags=["accounts"])
favorites_router = APIRouter(prefix="/favorites", tags=["favorites"])


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------
@auth_router.post("/register", status_code=201, response_model=RegisterResponse)
async def register(body: RegisterRequest) -> RegisterResponse:
    command = RegisterAccount(
        username=body.username,
        phone=body.phone,
        password_hash=hash_password(body.password),
        role=body.role,
        business_name=body.business_name,
        business_address=body.business_address,
    )
    result = current_domain.process(command, asynchronous=False)
    return RegisterResponse(account_id=result)


@auth_router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest) -> TokenResponse:
    token, account = authenticate(body.phone, body.password)
    return TokenResponse(token=token, account=AccountResponse.from_account(account))


@auth_router.get("/me", response_model=AccountResponse)
async def me(identity: Identity = Depends(current_identity)) -> AccountResponse:
    account = current_domain.repository_for(Account).get(identity.identity_id)
    return AccountResponse.from_account(account)


# ---------------------------------------------------------------------------
# Account lookups
# ---------------------------------------------------------------------------
@accounts_router.get("/caterers", response_model=list[AccountResponse])
async def list_caterers() -> list[AccountResponse]:
    repo = current_domain.repository_for(Account)
    caterers = repo._dao.query.filter(role=Role.CATERER.value).limit(None).all().items
    return [AccountResponse.from_account(account) for account in caterers]


@accounts_router.get("/caterers/{caterer_id}", response_model=AccountResponse)
async def get_caterer(caterer_id: str) -> AccountResponse:
    account = current_domain.repository_for(Account).get(caterer_id)
    if not account.is_caterer:
        raise ObjectNotFoundError(f"Caterer with id {caterer_id} does not exist")
    return AccountResponse.from_account(account)


@accounts_router.get("/users/{account_id}", response_model=AccountResponse)
async def get_account(account_id: str) -> AccountResponse:
    account = current_domain.repository_for(Account).get(account_id)
    return AccountResponse.from_account(account)


# ---------------------------------------------------------------------------
# Favorites
# ---------------------------------------------------------------------------
@favorites_router.get("", response_model=list[RecipeResponse])
async def get_favorites(identity: Identity = Depends(current_identity)) -> list[RecipeResponse]:
    return [RecipeResponse.from_recipe(recipe) for recipe in list_favorites(identity.identity_id)]


@favorites_router.post("/{recipe_id}", status_code=201, response_model=StatusResponse)
async def add_favorite(recipe_id: str, identity: Identity = Depends(current_identity)) -> StatusResponse:
    current_domain.process(AddFavorite(account_id=identity.identity_id, recipe_id=recipe_id), asynchronous=False)
    return StatusResponse()


@favorites_router.delete("/{recipe_id}", response_model=StatusResponse)
async def remove_favorite(recipe_id: str, identity: Identity = Depends(current_identity)) -> StatusResponse:
    current_domain.process(RemoveFavorite(account_id=identity.identity_id, recipe_id=recipe_id), asynchronous=False)
    return StatusResponse()
