"""Aggregate API router."""
from fastapi import APIRouter

from linkhub.api.v1.endpoints import limits, links, plans


api_router = APIRouter()
api_router.include_router(plans.router)
api_router.include_router(limits.router)
api_router.include_router(links.router)
