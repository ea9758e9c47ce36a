from fastapi import APIRouter

from remote_days.api.calendar import calendar_router
from remote_days.api.requests import requests_router
from remote_days.api.users import users_router

api_router = APIRouter()
api_router.include_router(users_router)
api_router.include_router(requests_router)
api_router.include_router(calendar_router)
