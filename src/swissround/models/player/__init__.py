from swissround.models.player.competitor import Competitor
from swissround.models.player.factory import CompetitorFactory, create_competitor

__all__ = [
    "Competitor",
    "CompetitorFactory",
    "create_competitor",
]
