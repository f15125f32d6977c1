from fastapi import APIRouter

from . import analytics, attempts, content, dashboard, quizzes, users

api_router = APIRouter()
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(content.router, prefix="/content", tags=["content"])
api_router.include_router(quizzes.router, prefix="/quizzes", tags=["quizzes"])
api_router.include_router(quizzes.questions_router, prefix="/questions", tags=["questions"])
api_router.include_router(attempts.router, prefix="/attempts", tags=["attempts"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
