from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.application.errors import OffspringNotFound
from src.application.use_cases.offspring import (
    delete_offspring,
    record_death,
    record_weaning,
    update_offspring,
)
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.offspring import OffspringResponse, OffspringUpdate

router = APIRouter(prefix="/offspring", tags=["offspring"])


@router.get("/{offspring_id}", response_model=OffspringResponse)
async def get_offspring(offspring_id: str, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    offspring = await uow.offspring.get(offspring_id)
    if not offspring:
        raise OffspringNotFound(f"Offspring with ID '{offspring_id}' not found")
    return OffspringResponse.model_validate(offspring)


@router.patch("/{offspring_id}", response_model=OffspringResponse)
async def patch_offspring(
    offspring_id: str, payload: OffspringUpdate, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    offspring = await update_offspring.execute(
        uow,
        offspring_id,
        update_offspring.UpdateOffspringInput(
            new_offspring_id=payload.id,
            litter_id=payload.litter_id,
            sex=payload.sex,
            notes=payload.notes,
        ),
    )
    return OffspringResponse.model_validate(offspring)


@router.post("/{offspring_id}/weaning", response_model=OffspringResponse)
async def wean_offspring(offspring_id: str, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    offspring = await record_weaning.execute(uow, offspring_id)
    return OffspringResponse.model_validate(offspring)


@router.post("/{offspring_id}/death", response_model=OffspringResponse)
async def record_offspring_death(
    offspring_id: str, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    offspring = await record_death.execute(uow, offspring_id)
    return OffspringResponse.model_validate(offspring)


@router.delete("/{offspring_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_offspring(offspring_id: str, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_offspring.execute(uow, offspring_id)
    return None
