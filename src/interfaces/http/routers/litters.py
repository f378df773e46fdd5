from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.application.errors import LitterNotFound
from src.application.use_cases.litters import delete_litter, record_litter, update_litter
from src.application.use_cases.offspring import list_offspring, record_offspring
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.litters import LitterCreate, LitterResponse, LitterUpdate
from src.interfaces.http.schemas.offspring import OffspringCreate, OffspringResponse

router = APIRouter(prefix="/litters", tags=["litters"])


@router.post("/", response_model=LitterResponse, status_code=status.HTTP_201_CREATED)
async def create_litter(payload: LitterCreate, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    litter = await record_litter.execute(
        uow,
        record_litter.RecordLitterInput(
            mother_id=payload.mother_id,
            birth_date=payload.birth_date,
            reported_litter_size=payload.reported_litter_size,
            father_id=payload.father_id,
            notes=payload.notes,
            litter_id=payload.id,
        ),
    )
    return LitterResponse.from_domain(litter)


@router.get("/{litter_id}", response_model=LitterResponse)
async def get_litter(litter_id: str, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise LitterNotFound(f"Litter with ID '{litter_id}' not found")
    return LitterResponse.from_domain(litter)


@router.patch("/{litter_id}", response_model=LitterResponse)
async def patch_litter(
    litter_id: str, payload: LitterUpdate, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    litter = await update_litter.execute(
        uow,
        litter_id,
        update_litter.UpdateLitterInput(
            mother_id=payload.mother_id,
            father_id=payload.father_id,
            clear_father=payload.clear_father,
            birth_date=payload.birth_date,
            reported_litter_size=payload.reported_litter_size,
            notes=payload.notes,
        ),
    )
    return LitterResponse.from_domain(litter)


@router.delete("/{litter_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_litter(litter_id: str, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_litter.execute(uow, litter_id)
    return None


@router.get("/{litter_id}/offspring", response_model=list[OffspringResponse])
async def get_litter_offspring(litter_id: str, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    items = await list_offspring.execute(uow, litter_id)
    return [OffspringResponse.model_validate(x) for x in items]


@router.post(
    "/{litter_id}/offspring",
    response_model=OffspringResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_offspring(
    litter_id: str, payload: OffspringCreate, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    offspring = await record_offspring.execute(
        uow,
        record_offspring.RecordOffspringInput(
            litter_id=litter_id,
            offspring_id=payload.id,
            sex=payload.sex,
            notes=payload.notes,
        ),
    )
    return OffspringResponse.model_validate(offspring)
