"""
Health Check Router
Service status and static category metadata
"""
from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends

from expense_tracker.core.config import settings
from expense_tracker.db import TransactionStore, get_store
from expense_tracker.models.transaction import EXPENSE_CATEGORIES, CategoryInfo

router = APIRouter()


@router.get("/health")
def health_check(store: TransactionStore = Depends(get_store)):
    """
    Health check endpoint.
    Returns API status and the active storage backend.
    """
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "storage": store.backend,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/categories", response_model=List[CategoryInfo])
def list_categories():
    return list(EXPENSE_CATEGORIES.values())
