"""
Coaching insight endpoints.

Includes generating a new insight from a night of sleep.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError

from dreamweaver.api.dependencies import get_data_manager, get_insight_generator
from dreamweaver.schemas.coaching_insight import (CoachingInsight, CoachingInsightCreate, CoachingInsightUpdate,
                                                  InsightRequest, )
from dreamweaver.services.data_manager import DataManager
from dreamweaver.services.insight_generator import InsightGenerator

router = APIRouter()


@router.get("", summary="List coaching insights.", response_model=list[CoachingInsight])
async def list_insights(limit: Optional[int] = Query(None, ge=1, le=100, description="Most recent N"),
                        manager: DataManager = Depends(get_data_manager), ):
    return await manager.get_coaching_insights(limit)


@router.post("", summary="Store a coaching insight.", response_model=CoachingInsight,
             status_code=status.HTTP_201_CREATED, )
async def create_insight(data: CoachingInsightCreate, manager: DataManager = Depends(get_data_manager)):
    insight = data.to_entity()
    await manager.save_coaching_insight(insight)
    return insight


@router.post("/generate", summary="Generate and store a coaching insight.", response_model=CoachingInsight,
             status_code=status.HTTP_201_CREATED, )
async def generate_insight(data: InsightRequest, manager: DataManager = Depends(get_data_manager),
                           generator: InsightGenerator = Depends(get_insight_generator), ):
    recommendation = await generator.generate(data)
    insight = CoachingInsightCreate(user_id=data.user_id, session_id=data.session_id,
                                    recommendation=recommendation).to_entity()
    await manager.save_coaching_insight(insight)
    return insight


@router.get("/{insight_id}", summary="Get a coaching insight.", response_model=CoachingInsight)
async def get_insight(insight_id: str, manager: DataManager = Depends(get_data_manager)):
    insight = await manager.get_coaching_insight(insight_id)
    if insight is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Coaching insight not found")
    return insight


@router.delete("/{insight_id}", summary="Delete a coaching insight.", status_code=status.HTTP_204_NO_CONTENT)
async def delete_insight(insight_id: str, manager: DataManager = Depends(get_data_manager)):
    await manager.delete_coaching_insight(insight_id)


@router.patch("/{insight_id}", summary="Partially update a coaching insight.", response_model=CoachingInsight)
async def update_insight(insight_id: str, data: CoachingInsightUpdate, manager: DataManager = Depends(get_data_manager)):
    try:
        insight = await manager.update_coaching_insight(insight_id, data)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=f"Invalid update: {e}")
    if insight is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Coaching insight not found")
    return insight
