import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy import select

from core.exception.exceptions import ConstraintViolationException
from domains.favorite.models import Favorite
from domains.favorite.repository import FavoriteRepository
from domains.favorite.service import FavoriteService
from domains.recipe.exceptions import RecipeNotFoundException
from domains.recipe.repository import RecipeRepository


def _service(session) -> FavoriteService:
    return FavoriteService(FavoriteRepository(session), RecipeRepository(session))


async def _favorite_keys(session):
    rows = (await session.execute(select(Favorite.user_id, Favorite.recipe_id))).all()
    return [tuple(row) for row in rows]


@pytest.mark.asyncio
async def test_toggle_once_inserts_one_row(db_session, make_recipe):
    """[Service] first toggle marks the recipe as favorite"""
    service = _service(db_session)
    recipe_id = await make_recipe("Pasta")

    result = await service.toggle_favorite("user-123", recipe_id)

    assert result.is_favorite is True
    assert result.favorite_count == 1
    assert await _favorite_keys(db_session) == [("user-123", recipe_id)]


@pytest.mark.asyncio
async def test_toggle_twice_restores_state(db_session, make_recipe):
    service = _service(db_session)
    recipe_id = await make_recipe("Pasta")

    await service.toggle_favorite("user-123", recipe_id)
    result = await service.toggle_favorite("user-123", recipe_id)

    assert result.is_favorite is False
    assert result.favorite_count == 0
    assert await _favorite_keys(db_session) == []


@pytest.mark.asyncio
async def test_favorite_count_across_users(db_session, make_recipe):
    service = _service(db_session)
    recipe_id = await make_recipe("Pasta")

    await service.toggle_favorite("user-1", recipe_id)
    result = await service.toggle_favorite("user-2", recipe_id)

    assert result.favorite_count == 2


@pytest.mark.asyncio
async def test_toggle_unknown_recipe(db_session):
    service = _service(db_session)

    with pytest.raises(RecipeNotFoundException):
        await service.toggle_favorite("user-123", 999)


@pytest.mark.asyncio
async def test_toggle_recovers_from_concurrent_insert():
    """[Service] a concurrent insert of the same row still ends as favorite"""
    favorite_repo = AsyncMock()
    recipe_repo = AsyncMock()
    recipe_repo.get_recipe_by_id.return_value = MagicMock(id=1)
    favorite_repo.get_favorite.side_effect = [None, MagicMock()]
    favorite_repo.add_favorite.side_effect = ConstraintViolationException()
    favorite_repo.count_favorites.return_value = 1

    result = await FavoriteService(favorite_repo, recipe_repo).toggle_favorite("user-123", 1)

    assert result.is_favorite is True
    assert result.favorite_count == 1
    favorite_repo.delete_favorite.assert_not_called()
