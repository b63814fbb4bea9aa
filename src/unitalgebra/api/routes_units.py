"""FastAPI router exposing catalogue lookup and conversion."""

from __future__ import annotations

import math
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from unitalgebra.core.convert import compatible as units_compatible
from unitalgebra.core.convert import convert
from unitalgebra.core.unit import Unit
from unitalgebra.observability import log_event
from unitalgebra.units.catalogue import UnknownUnitError, default_catalogue


router = APIRouter(prefix="/v1/units", tags=["units"])


def _lookup(name: str) -> Unit:
    try:
        return default_catalogue().get(name)
    except UnknownUnitError as exc:
        raise HTTPException(
            status_code=422,
            detail={"unit": name, "message": str(exc), "suggestions": exc.suggestions},
        )


class UnitEntry(BaseModel):
    name: str
    dimension: str


class UnitsListResp(BaseModel):
    units: List[UnitEntry]


@router.get("", response_model=UnitsListResp)
def list_units() -> UnitsListResp:
    entries = [UnitEntry(name=name, dimension=str(unit.dimension)) for name, unit in default_catalogue().items()]
    return UnitsListResp(units=entries)


class ConvertReq(BaseModel):
    quantity: float
    from_unit: str = Field(..., description="Registered unit name or alias")
    to_unit: str = Field(..., description="Registered unit name or alias")


class ConvertResp(BaseModel):
    ok: bool
    result: Optional[float] = None
    reason: Optional[str] = None


@router.post("/convert", response_model=ConvertResp)
def convert_quantity(req: ConvertReq) -> ConvertResp:
    source = _lookup(req.from_unit)
    target = _lookup(req.to_unit)
    result = convert(req.quantity, source, target)
    if result is None:
        reason = f"incompatible dimensions: {source.dimension} vs {target.dimension}"
        return ConvertResp(ok=False, reason=reason)
    if not math.isfinite(result):
        return ConvertResp(ok=False, reason="non-finite")

    log_event("unit conversion", quantity=req.quantity, source=req.from_unit, target=req.to_unit, result=result)
    return ConvertResp(ok=True, result=result)


class CompatibleReq(BaseModel):
    a: str
    b: str


class CompatibleResp(BaseModel):
    compatible: bool
    a_dimension: str
    b_dimension: str


@router.post("/compatible", response_model=CompatibleResp)
def check_compatible(req: CompatibleReq) -> CompatibleResp:
    first = _lookup(req.a)
    second = _lookup(req.b)
    return CompatibleResp(
        compatible=units_compatible(first, second),
        a_dimension=str(first.dimension),
        b_dimension=str(second.dimension),
    )


__all__ = ["router"]
