"""
Text rendering of the network and its recommendations.
"""

from typing import Dict, List

from .graph import Recommendation, RecommendationStrategy


def format_network(adjacency: Dict[int, List[int]]) -> List[str]:
    """Render one line per user listing their friends."""
    lines = ["Social Network Structure:"]
    for user_id, friends in adjacency.items():
        friend_list = " ".join(str(f) for f in friends)
        lines.append(f"User {user_id} is connected to: {friend_list}".rstrip())
    return lines


def format_recommendations(
    strategy: RecommendationStrategy,
    recommendations: List[Recommendation]
) -> List[str]:
    """Render a titled recommendation list for one strategy."""
    lines = [f"{strategy.section_title}:"]
    for rec in recommendations:
        lines.append(f"User {rec.user_id} ({strategy.metric_label}: {rec.score})")
    return lines


def format_user_report(
    user_id: int,
    results: Dict[RecommendationStrategy, List[Recommendation]]
) -> List[str]:
    """Render every strategy's recommendations for a user."""
    lines = [f"Friend Recommendations for {user_id}"]
    for i, strategy in enumerate(RecommendationStrategy):
        if i > 0:
            lines.append("")
        lines.extend(format_recommendations(strategy, results.get(strategy, [])))
    return lines
