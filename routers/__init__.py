from fastapi import APIRouter

from routers import health, restaurant

ROUTERS: list[APIRouter] = [health.router]
VERSIONED_ROUTERS: list[APIRouter] = [restaurant.router]
