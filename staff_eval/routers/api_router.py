from fastapi import APIRouter
from staff_eval.routers import companies, periods, evaluations, goals, questions, comments

# Centralized API router hub: main.py only imports this module.
api_router = APIRouter()

api_router.include_router(companies.router, tags=["Companies"])
api_router.include_router(periods.router, tags=["Fiscal Periods"])
api_router.include_router(evaluations.router, tags=["Evaluations"])
api_router.include_router(goals.router, tags=["Goals"])
api_router.include_router(questions.router, tags=["Questions"])
api_router.include_router(comments.router, tags=["Comments"])
