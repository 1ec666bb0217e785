from typing import List

from sqlalchemy.orm import Session

from eventhub.models import event as event_model
from eventhub.models import team as team_model
from eventhub.models import team_member as member_model
from eventhub.models import user as user_model
from eventhub.schemas import team_member_schemas

TeamMember = member_model.TeamMember


def _team_members_overview_query(db: Session):
    return db.query(
        user_model.User.name,
        user_model.User.email,
        user_model.User.phone,
        team_model.Team.name.label("team_name"),
        TeamMember.role,
        event_model.Event.title.label("event_title"),
    )\
        .select_from(TeamMember)\
        .join(user_model.User, TeamMember.user_id == user_model.User.id)\
        .join(team_model.Team, TeamMember.team_id == team_model.Team.id)\
        .join(event_model.Event, team_model.Team.event_id == event_model.Event.id)\
        .filter(TeamMember.status == member_model.MemberStatus.ACCEPTED.value)


def count_team_members(db: Session) -> int:
    return _team_members_overview_query(db).count()


def get_team_members_overview(db: Session) -> List[team_member_schemas.TeamMemberOverview]:
    rows = _team_members_overview_query(db)\
        .order_by(event_model.Event.title, team_model.Team.name, TeamMember.role, user_model.User.name)\
        .all()
    return [team_member_schemas.TeamMemberOverview(**row._mapping) for row in rows]
