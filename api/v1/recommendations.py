"""
Recommendations endpoints.

Friend recommendations for a user with one or all strategies.
"""

from typing import Optional, List, Dict

from fastapi import APIRouter, Query
from pydantic import BaseModel

from friendrec.graph import RecommendationStrategy
from ..deps import ServicesDep

router = APIRouter()


# Response models

class RecommendationItem(BaseModel):
    """Single recommended user."""
    user_id: int
    score: int


class RecommendationsResponse(BaseModel):
    """Recommendations from one strategy."""
    user_id: int
    strategy: RecommendationStrategy
    metric: str
    max_distance: int
    recommendations: List[RecommendationItem]


class AllRecommendationsResponse(BaseModel):
    """Recommendations from every strategy."""
    user_id: int
    max_distance: int
    recommendations: Dict[str, List[RecommendationItem]]


def _max_distance(services, max_distance: Optional[int]) -> int:
    if max_distance is None:
        return services.config.recommendation.max_distance
    return max_distance


# Endpoints

@router.get("/{user_id}/recommendations", response_model=AllRecommendationsResponse)
def get_all_recommendations(
    user_id: int,
    services: ServicesDep,
    max_distance: Optional[int] = Query(None, ge=0, description="Maximum hop distance")
):
    """
    Recommend friends with every strategy.

    Unknown users get empty lists.
    """
    bound = _max_distance(services, max_distance)
    results = services.recommendations.recommend_all(user_id, bound)

    return AllRecommendationsResponse(
        user_id=user_id,
        max_distance=bound,
        recommendations={
            strategy.value: [RecommendationItem(**r.to_dict()) for r in recs]
            for strategy, recs in results.items()
        }
    )


@router.get("/{user_id}/recommendations/{strategy}", response_model=RecommendationsResponse)
def get_recommendations(
    user_id: int,
    strategy: RecommendationStrategy,
    services: ServicesDep,
    max_distance: Optional[int] = Query(None, ge=0, description="Maximum hop distance")
):
    """
    Recommend friends with a single strategy.

    Strategy is one of common-friends, distance or weighted.
    """
    bound = _max_distance(services, max_distance)
    recs = services.recommendations.recommend(user_id, strategy, bound)

    return RecommendationsResponse(
        user_id=user_id,
        strategy=strategy,
        metric=strategy.metric_label,
        max_distance=bound,
        recommendations=[RecommendationItem(**r.to_dict()) for r in recs]
    )
