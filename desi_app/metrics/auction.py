"""IPL auction purse calculations"""

from collections.abc import Sequence

from ..data.models import Player, Team
from ..models.summaries import AuctionSummary
from ..utils.numbers import round_half_up


def find_costliest(players: Sequence[Player]) -> Player:
    """Player with the highest price; the earliest one wins ties."""
    costliest = players[0]
    for player in players[1:]:
        if player.price > costliest.price:
            costliest = player
    return costliest


def find_cheapest(players: Sequence[Player]) -> Player:
    """Player with the lowest price; the earliest one wins ties."""
    cheapest = players[0]
    for player in players[1:]:
        if player.price < cheapest.price:
            cheapest = player
    return cheapest


def count_by_role(players: Sequence[Player]) -> dict:
    """Count players per role, keyed in first-seen order."""
    counts: dict = {}
    for player in players:
        counts[player.role] = counts.get(player.role, 0) + 1
    return counts


def summarize_purchases(team: Team, players: Sequence[Player]) -> AuctionSummary:
    """
    Build the auction summary for a team.

    Args:
        team: Validated team with a positive purse
        players: Validated, non-empty player list

    Returns:
        AuctionSummary; remaining goes negative when the team overspends
    """
    total_spent = sum(player.price for player in players)
    player_count = len(players)

    return AuctionSummary(
        team_name=team.name,
        total_spent=total_spent,
        remaining=team.purse - total_spent,
        player_count=player_count,
        costliest_player=find_costliest(players),
        cheapest_player=find_cheapest(players),
        average_price=round_half_up(total_spent / player_count),
        by_role=count_by_role(players),
        is_over_budget=total_spent > team.purse,
    )
