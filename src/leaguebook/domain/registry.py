"""Reference entity domain service.

Teams, staff, competitions, seasons and weeks are flat collections. Removing
one of them never touches the transactions that reference it; those keep
their cached names and resolve to a fallback label where a name is looked up.
"""

import uuid
from dataclasses import replace
from typing import Optional

from leaguebook.domain.entities import Competition, Season, StaffMember, StaffRole, Team, Week
from leaguebook.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_entity_id,
    entity_not_found,
)
from leaguebook.domain.session import LeagueSession
from leaguebook.logging_config import get_logger

logger = get_logger()


def _require_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Name cannot be empty")
    return name


class RegistryService:
    """Service for managing the league's reference entities."""

    def __init__(self, session: LeagueSession):
        """Initialize registry service.

        Args:
            session: LeagueSession holding the current state
        """
        self.session = session

    def _new_id(self, existing, entity_id: Optional[str], kind: str) -> str:
        if entity_id is None:
            return uuid.uuid4().hex
        if any(item.id == entity_id for item in existing):
            raise ConflictError(duplicate_entity_id(kind, entity_id))
        return entity_id

    # Teams
    def list_teams(self) -> list[Team]:
        return list(self.session.state.teams)

    def get_team(self, team_id: str) -> Optional[Team]:
        return self.session.state.find_team(team_id)

    def require_team(self, team_id: str) -> Team:
        team = self.get_team(team_id)
        if team is None:
            raise NotFoundError(entity_not_found("Team", team_id))
        return team

    def create_team(self, name: str, image: Optional[str] = None, team_id: Optional[str] = None) -> Team:
        """Create a team.

        Raises:
            ValidationError: If the name is empty
            ConflictError: If ``team_id`` is already taken
        """
        state = self.session.state
        team = Team(id=self._new_id(state.teams, team_id, "Team"), name=_require_name(name), image=image)
        self.session.apply(state.add_team(team))
        logger.info(f"Created team '{team.name}' ({team.id})")
        return team

    def update_team(self, team_id: str, name: Optional[str] = None, image: Optional[str] = None) -> Team:
        """Update a team; a new name is copied onto the team's transactions.

        Raises:
            NotFoundError: If the team does not exist
            ValidationError: If the new name is empty
        """
        team = self.require_team(team_id)
        updated = replace(
            team,
            name=_require_name(name) if name is not None else team.name,
            image=image if image is not None else team.image,
        )
        self.session.apply(self.session.state.update_team(updated))
        logger.info(f"Updated team {team_id}")
        return updated

    def delete_team(self, team_id: str) -> bool:
        """Delete a team. Returns False if it did not exist."""
        if self.get_team(team_id) is None:
            return False
        self.session.apply(self.session.state.remove_team(team_id))
        logger.info(f"Deleted team {team_id}")
        return True

    # Staff
    def list_staff(self) -> list[StaffMember]:
        return list(self.session.state.staff)

    def get_staff(self, staff_id: str) -> Optional[StaffMember]:
        return self.session.state.find_staff(staff_id)

    def require_staff(self, staff_id: str) -> StaffMember:
        member = self.get_staff(staff_id)
        if member is None:
            raise NotFoundError(entity_not_found("Staff member", staff_id))
        return member

    def create_staff(
        self,
        name: str,
        default_role: StaffRole = StaffRole.ARBITRO,
        image: Optional[str] = None,
        staff_id: Optional[str] = None,
    ) -> StaffMember:
        """Create a staff member."""
        state = self.session.state
        member = StaffMember(
            id=self._new_id(state.staff, staff_id, "Staff member"),
            name=_require_name(name),
            default_role=default_role,
            image=image,
        )
        self.session.apply(state.add_staff(member))
        logger.info(f"Created staff member '{member.name}' ({member.id})")
        return member

    def update_staff(
        self,
        staff_id: str,
        name: Optional[str] = None,
        default_role: Optional[StaffRole] = None,
        image: Optional[str] = None,
    ) -> StaffMember:
        """Update a staff member; a new name is copied onto their transactions."""
        member = self.require_staff(staff_id)
        updated = replace(
            member,
            name=_require_name(name) if name is not None else member.name,
            default_role=default_role if default_role is not None else member.default_role,
            image=image if image is not None else member.image,
        )
        self.session.apply(self.session.state.update_staff(updated))
        logger.info(f"Updated staff member {staff_id}")
        return updated

    def delete_staff(self, staff_id: str) -> bool:
        if self.get_staff(staff_id) is None:
            return False
        self.session.apply(self.session.state.remove_staff(staff_id))
        logger.info(f"Deleted staff member {staff_id}")
        return True

    # Competitions
    def list_competitions(self) -> list[Competition]:
        return list(self.session.state.competitions)

    def get_competition(self, competition_id: str) -> Optional[Competition]:
        return self.session.state.find_competition(competition_id)

    def require_competition(self, competition_id: str) -> Competition:
        competition = self.get_competition(competition_id)
        if competition is None:
            raise NotFoundError(entity_not_found("Competition", competition_id))
        return competition

    def _check_season(self, season_id: Optional[str]) -> Optional[str]:
        if season_id:
            self.require_season(season_id)
        return season_id or None

    def create_competition(
        self,
        name: str,
        season_id: Optional[str] = None,
        rounds: tuple[str, ...] = (),
        image: Optional[str] = None,
        competition_id: Optional[str] = None,
    ) -> Competition:
        """Create a competition.

        Raises:
            NotFoundError: If the season does not exist
        """
        state = self.session.state
        competition = Competition(
            id=self._new_id(state.competitions, competition_id, "Competition"),
            name=_require_name(name),
            season_id=self._check_season(season_id),
            rounds=tuple(label.strip() for label in rounds if label.strip()),
            image=image,
        )
        self.session.apply(state.add_competition(competition))
        logger.info(f"Created competition '{competition.name}' ({competition.id})")
        return competition

    def update_competition(
        self,
        competition_id: str,
        name: Optional[str] = None,
        season_id: Optional[str] = None,
        rounds: Optional[tuple[str, ...]] = None,
        image: Optional[str] = None,
    ) -> Competition:
        """Update a competition.

        Transactions keep the season they were recorded with.
        """
        competition = self.require_competition(competition_id)
        updated = replace(
            competition,
            name=_require_name(name) if name is not None else competition.name,
            season_id=self._check_season(season_id) if season_id is not None else competition.season_id,
            rounds=(
                tuple(label.strip() for label in rounds if label.strip())
                if rounds is not None
                else competition.rounds
            ),
            image=image if image is not None else competition.image,
        )
        self.session.apply(self.session.state.update_competition(updated))
        logger.info(f"Updated competition {competition_id}")
        return updated

    def delete_competition(self, competition_id: str) -> bool:
        if self.get_competition(competition_id) is None:
            return False
        self.session.apply(self.session.state.remove_competition(competition_id))
        logger.info(f"Deleted competition {competition_id}")
        return True

    # Seasons
    def list_seasons(self) -> list[Season]:
        return list(self.session.state.seasons)

    def get_season(self, season_id: str) -> Optional[Season]:
        return self.session.state.find_season(season_id)

    def require_season(self, season_id: str) -> Season:
        season = self.get_season(season_id)
        if season is None:
            raise NotFoundError(entity_not_found("Season", season_id))
        return season

    def create_season(self, name: str, season_id: Optional[str] = None) -> Season:
        state = self.session.state
        season = Season(id=self._new_id(state.seasons, season_id, "Season"), name=_require_name(name))
        self.session.apply(state.add_season(season))
        logger.info(f"Created season '{season.name}' ({season.id})")
        return season

    def update_season(self, season_id: str, name: str) -> Season:
        updated = replace(self.require_season(season_id), name=_require_name(name))
        self.session.apply(self.session.state.update_season(updated))
        return updated

    def delete_season(self, season_id: str) -> bool:
        if self.get_season(season_id) is None:
            return False
        self.session.apply(self.session.state.remove_season(season_id))
        logger.info(f"Deleted season {season_id}")
        return True

    # Weeks
    def list_weeks(self) -> list[Week]:
        return list(self.session.state.weeks)

    def get_week(self, week_id: str) -> Optional[Week]:
        return self.session.state.find_week(week_id)

    def require_week(self, week_id: str) -> Week:
        week = self.get_week(week_id)
        if week is None:
            raise NotFoundError(entity_not_found("Week", week_id))
        return week

    def create_week(self, name: str, week_id: Optional[str] = None) -> Week:
        state = self.session.state
        week = Week(id=self._new_id(state.weeks, week_id, "Week"), name=_require_name(name))
        self.session.apply(state.add_week(week))
        logger.info(f"Created week '{week.name}' ({week.id})")
        return week

    def update_week(self, week_id: str, name: str) -> Week:
        updated = replace(self.require_week(week_id), name=_require_name(name))
        self.session.apply(self.session.state.update_week(updated))
        return updated

    def delete_week(self, week_id: str) -> bool:
        if self.get_week(week_id) is None:
            return False
        self.session.apply(self.session.state.remove_week(week_id))
        logger.info(f"Deleted week {week_id}")
        return True
