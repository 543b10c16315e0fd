"""Default reference data used for a fresh league and for absent collections."""

from leaguebook.domain.entities import Competition, Season, StaffMember, StaffRole, Team, Week

INITIAL_TEAMS = (
    Team(id="1", name="Orange Ballers"),
    Team(id="2", name="Black Mambas"),
)

INITIAL_STAFF = (StaffMember(id="1", name="Carlos Juiz", default_role=StaffRole.ARBITRO),)

INITIAL_SEASONS = (
    Season(id="1", name="2025 I"),
    Season(id="2", name="2025 II"),
)

INITIAL_WEEKS = (
    Week(id="1", name="#Week 1"),
    Week(id="2", name="#Week 2"),
    Week(id="3", name="#SuperWeek"),
)

INITIAL_COMPETITIONS = (
    Competition(
        id="1",
        name="Liga Orange 2025",
        season_id="1",
        rounds=("Rodada 1", "Rodada 2", "Rodada 3", "Semifinal", "Final"),
    ),
)
