from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.application.use_cases.litters import list_litters
from src.application.use_cases.mothers import add_mother, list_mothers, remove_mother
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.litters import LitterResponse
from src.interfaces.http.schemas.mothers import MotherCreate, MotherResponse

router = APIRouter(prefix="/mothers", tags=["mothers"])


@router.get("/", response_model=list[MotherResponse])
async def get_mothers(uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    mothers = await list_mothers.execute(uow)
    return [MotherResponse.model_validate(m) for m in mothers]


@router.post("/", response_model=MotherResponse, status_code=status.HTTP_201_CREATED)
async def create_mother(payload: MotherCreate, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    mother = await add_mother.execute(
        uow, add_mother.AddMotherInput(mother_id=payload.id, notes=payload.notes)
    )
    return MotherResponse.model_validate(mother)


@router.delete("/{mother_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_mother(mother_id: str, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await remove_mother.execute(uow, mother_id)
    return None


@router.get("/{mother_id}/litters", response_model=list[LitterResponse])
async def get_mother_litters(mother_id: str, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    litters = await list_litters.execute(uow, mother_id)
    return [LitterResponse.from_domain(x) for x in litters]
