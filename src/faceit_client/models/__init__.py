"""Typed records deserialized from FACEIT API responses."""

from faceit_client.models.championships import (
    Championship,
    ChampionshipList,
    ChampionshipSchedule,
    ChampionshipScreening,
    ChampionshipStream,
    JoinCheck,
    Prize,
    SubstitutionConfiguration,
)
from faceit_client.models.common import FaceitModel, ItemPage
from faceit_client.models.games import Game, GameAssets, GameList, MatchmakingList, MatchmakingQueue, MatchmakingSlim
from faceit_client.models.hubs import CompetitionPlayerStats, Hub, HubList, HubMemberList, HubStats, HubUser
from faceit_client.models.matches import (
    DetailedMatchResult,
    Faction,
    FactionResult,
    FactionStats,
    HistoryFaction,
    Match,
    MatchHistory,
    MatchHistoryList,
    MatchHistoryPlayer,
    MatchList,
    MatchResult,
    MatchStats,
    PlayerRoundStats,
    RosterMember,
    RoundStats,
    SkillLevel,
    SkillLevelRange,
    TeamRoundStats,
)
from faceit_client.models.organizers import Organizer
from faceit_client.models.players import GameDetail, Player, PlayerBan, PlayerBanList, PlayerStats, UserSettings
from faceit_client.models.rankings import GlobalRanking, GlobalRankingList, PlayerGlobalRanking
from faceit_client.models.search import (
    CompetitionSearch,
    CompetitionSearchList,
    GameUserSearch,
    TeamSearch,
    TeamSearchList,
    UserSearch,
    UserSearchList,
)
from faceit_client.models.teams import Team, TeamList, TournamentList, TournamentSimple, UserSimple

__all__ = [
    "Championship",
    "ChampionshipList",
    "ChampionshipSchedule",
    "ChampionshipScreening",
    "ChampionshipStream",
    "CompetitionPlayerStats",
    "CompetitionSearch",
    "CompetitionSearchList",
    "DetailedMatchResult",
    "FaceitModel",
    "Faction",
    "FactionResult",
    "FactionStats",
    "Game",
    "GameAssets",
    "GameDetail",
    "GameList",
    "GameUserSearch",
    "GlobalRanking",
    "GlobalRankingList",
    "HistoryFaction",
    "Hub",
    "HubList",
    "HubMemberList",
    "HubStats",
    "HubUser",
    "ItemPage",
    "JoinCheck",
    "Match",
    "MatchHistory",
    "MatchHistoryList",
    "MatchHistoryPlayer",
    "MatchList",
    "MatchResult",
    "MatchStats",
    "MatchmakingList",
    "MatchmakingQueue",
    "MatchmakingSlim",
    "Organizer",
    "Player",
    "PlayerBan",
    "PlayerBanList",
    "PlayerGlobalRanking",
    "PlayerRoundStats",
    "PlayerStats",
    "Prize",
    "RosterMember",
    "RoundStats",
    "SkillLevel",
    "SkillLevelRange",
    "SubstitutionConfiguration",
    "Team",
    "TeamList",
    "TeamRoundStats",
    "TeamSearch",
    "TeamSearchList",
    "TournamentList",
    "TournamentSimple",
    "UserSearch",
    "UserSearchList",
    "UserSettings",
]
