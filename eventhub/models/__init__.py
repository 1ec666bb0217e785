from eventhub.core.database import Base

# Import all models here to ensure they are registered with Base
from .user import User
from .event import Event
from .event_session import EventSession
from .team import Team
from .team_member import TeamMember, MemberRole, MemberStatus, InvalidTransition
from .registration import Registration
