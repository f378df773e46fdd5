from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from src.application.errors import (
    AlreadyDeceased,
    AlreadyWeaned,
    DuplicateLitter,
    DuplicateMother,
    DuplicateOffspring,
    LitterNotFound,
    MotherNotFound,
    NotAlive,
    OffspringNotFound,
    ValidationError,
)
from src.application.use_cases.litters import (
    delete_litter,
    list_litters,
    record_litter,
    update_litter,
)
from src.application.use_cases.mothers import add_mother, list_mothers, remove_mother
from src.application.use_cases.offspring import (
    delete_offspring,
    list_offspring,
    record_death,
    record_offspring,
    record_weaning,
    update_offspring,
)


async def _litter(uow, mother_id="M1", birth_date=date(2024, 3, 1), **kwargs):
    return await record_litter.execute(
        uow,
        record_litter.RecordLitterInput(
            mother_id=mother_id,
            birth_date=birth_date,
            reported_litter_size=kwargs.pop("reported_litter_size", 5),
            **kwargs,
        ),
    )


async def _pup(uow, litter_id, offspring_id="P1", sex="female"):
    return await record_offspring.execute(
        uow,
        record_offspring.RecordOffspringInput(
            litter_id=litter_id, offspring_id=offspring_id, sex=sex
        ),
    )


async def test_add_mother_rejects_duplicates(uow):
    await add_mother.execute(uow, add_mother.AddMotherInput(mother_id="M1", notes="first"))
    with pytest.raises(DuplicateMother):
        await add_mother.execute(uow, add_mother.AddMotherInput(mother_id="M1"))
    mothers = await list_mothers.execute(uow)
    assert [m.id for m in mothers] == ["M1"]
    assert mothers[0].notes == "first"


async def test_add_mother_requires_id(uow):
    with pytest.raises(ValidationError):
        await add_mother.execute(uow, add_mother.AddMotherInput(mother_id="   "))


async def test_remove_mother_keeps_litters(uow):
    litter = await _litter(uow)
    await remove_mother.execute(uow, "M1")
    assert await uow.mothers.get("M1") is None
    assert await uow.litters.get(litter.id) is not None
    with pytest.raises(MotherNotFound):
        await remove_mother.execute(uow, "M1")


async def test_record_litter_registers_mother_implicitly(uow):
    litter = await _litter(uow, father_id="F1")
    assert await uow.mothers.get("M1") is not None
    assert litter.father.father_id == "F1"
    assert uow.commits


async def test_record_litter_rejects_same_triple_with_unknown_father(uow):
    await _litter(uow)
    with pytest.raises(DuplicateLitter) as exc_info:
        await _litter(uow, reported_litter_size=3)
    assert "father none" in exc_info.value.message
    assert len(uow.litters.items) == 1


async def test_record_litter_allows_different_fathers_same_day(uow):
    await _litter(uow)
    await _litter(uow, father_id="F1")
    assert len(uow.litters.items) == 2


async def test_record_litter_normalizes_datetime_to_utc_date(uow):
    birth = datetime(2024, 3, 1, 22, 30, tzinfo=timezone(timedelta(hours=-5)))
    litter = await _litter(uow, birth_date=birth)
    assert litter.birth_date == date(2024, 3, 2)


async def test_record_litter_rejects_negative_size(uow):
    with pytest.raises(ValidationError):
        await _litter(uow, reported_litter_size=-1)
    assert uow.litters.items == {}


async def test_update_litter_cannot_collide_with_existing_triple(uow):
    await _litter(uow, father_id="F1")
    second = await _litter(uow, father_id="F2")
    with pytest.raises(DuplicateLitter):
        await update_litter.execute(
            uow, second.id, update_litter.UpdateLitterInput(father_id="F1")
        )
    stored = await uow.litters.get(second.id)
    assert stored.father.father_id == "F2"


async def test_update_litter_moves_to_new_mother_and_clears_father(uow):
    litter = await _litter(uow, father_id="F1")
    updated = await update_litter.execute(
        uow,
        litter.id,
        update_litter.UpdateLitterInput(mother_id="M2", clear_father=True, notes="moved"),
    )
    assert updated.mother_id == "M2"
    assert updated.father.is_unknown
    assert await uow.mothers.get("M2") is not None


async def test_update_missing_litter(uow):
    with pytest.raises(LitterNotFound):
        await update_litter.execute(uow, "nope", update_litter.UpdateLitterInput(notes="x"))


async def test_delete_litter_removes_its_offspring(uow):
    litter = await _litter(uow)
    other = await _litter(uow, birth_date=date(2024, 9, 1))
    await _pup(uow, litter.id, "P1")
    await _pup(uow, litter.id, "P2")
    await _pup(uow, other.id, "P3")

    await delete_litter.execute(uow, litter.id)

    assert await uow.litters.get(litter.id) is None
    assert sorted(uow.offspring.items) == ["P3"]
    with pytest.raises(LitterNotFound):
        await delete_litter.execute(uow, litter.id)


async def test_list_litters_requires_registered_mother(uow):
    await _litter(uow, birth_date=date(2024, 9, 1))
    await _litter(uow, birth_date=date(2024, 1, 1))
    litters = await list_litters.execute(uow, "M1")
    assert [x.birth_date for x in litters] == [date(2024, 1, 1), date(2024, 9, 1)]
    with pytest.raises(MotherNotFound):
        await list_litters.execute(uow, "M9")


async def test_record_offspring_requires_litter_and_unique_id(uow):
    litter = await _litter(uow)
    with pytest.raises(LitterNotFound):
        await _pup(uow, "missing")
    await _pup(uow, litter.id, "P1")
    with pytest.raises(DuplicateOffspring):
        await _pup(uow, litter.id, "P1")


async def test_record_offspring_rejects_unknown_sex(uow):
    litter = await _litter(uow)
    with pytest.raises(ValidationError):
        await _pup(uow, litter.id, sex="unknown")


async def test_weaning_transitions(uow):
    litter = await _litter(uow)
    await _pup(uow, litter.id, "P1")

    weaned = await record_weaning.execute(uow, "P1")
    assert weaned.is_weaned
    with pytest.raises(AlreadyWeaned):
        await record_weaning.execute(uow, "P1")
    with pytest.raises(OffspringNotFound):
        await record_weaning.execute(uow, "P9")


async def test_death_revokes_weaning_and_blocks_further_changes(uow):
    litter = await _litter(uow)
    await _pup(uow, litter.id, "P1")
    await record_weaning.execute(uow, "P1")

    dead = await record_death.execute(uow, "P1")
    assert not dead.is_alive
    assert not dead.is_weaned

    with pytest.raises(AlreadyDeceased):
        await record_death.execute(uow, "P1")
    with pytest.raises(NotAlive):
        await record_weaning.execute(uow, "P1")


async def test_update_offspring_rename_and_move(uow):
    first = await _litter(uow)
    second = await _litter(uow, birth_date=date(2024, 9, 1))
    await _pup(uow, first.id, "P1")
    await _pup(uow, first.id, "P2")

    with pytest.raises(DuplicateOffspring):
        await update_offspring.execute(
            uow, "P1", update_offspring.UpdateOffspringInput(new_offspring_id="P2")
        )
    with pytest.raises(LitterNotFound):
        await update_offspring.execute(
            uow, "P1", update_offspring.UpdateOffspringInput(litter_id="missing")
        )

    updated = await update_offspring.execute(
        uow,
        "P1",
        update_offspring.UpdateOffspringInput(
            new_offspring_id="P1-renamed", litter_id=second.id, sex="neutered"
        ),
    )
    assert updated.id == "P1-renamed"
    assert updated.litter_id == second.id
    assert await uow.offspring.get("P1") is None
    assert [x.id for x in await list_offspring.execute(uow, second.id)] == ["P1-renamed"]


async def test_delete_offspring(uow):
    litter = await _litter(uow)
    await _pup(uow, litter.id, "P1")
    await delete_offspring.execute(uow, "P1")
    assert await list_offspring.execute(uow, litter.id) == []
    with pytest.raises(OffspringNotFound):
        await delete_offspring.execute(uow, "P1")
    with pytest.raises(LitterNotFound):
        await list_offspring.execute(uow, "missing")
