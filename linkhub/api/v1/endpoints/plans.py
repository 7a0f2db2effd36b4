"""Public plan catalog endpoints."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter

from linkhub.core.exceptions import NotFoundError
from linkhub.schemas.entitlements import PlanRead
from linkhub.services import plan_catalog


router = APIRouter(prefix="/plans", tags=["plans"])


@router.get("", response_model=List[PlanRead])
async def list_plans():
    return [PlanRead.model_validate(plan.model_dump()) for plan in plan_catalog.all_plans()]


@router.get("/{plan_id}", response_model=PlanRead)
async def get_plan(plan_id: str):
    plan = plan_catalog.get(plan_id)
    if plan is None:
        raise NotFoundError("Plan not found")
    return PlanRead.model_validate(plan.model_dump())
