"""Team directory."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from processor.models import TeamMember


@dataclass
class TeamDirectory:
    """Board officials and moderators from team.json."""
    board_officials: List[TeamMember] = field(default_factory=list)
    moderators: List[TeamMember] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TeamDirectory':
        return cls(
            board_officials=[
                TeamMember.from_dict(m)
                for m in data.get('boardOfficials') or []
                if isinstance(m, dict)
            ],
            moderators=[
                TeamMember.from_dict(m)
                for m in data.get('moderaTeam') or []
                if isinstance(m, dict)
            ]
        )

    def members(self) -> List[TeamMember]:
        return self.board_officials + self.moderators

    def find(self, member_id: str) -> Optional[TeamMember]:
        """Look up a member by id, board officials first."""
        for member in self.members():
            if member.id == member_id:
                return member
        return None

    def to_dict(self) -> Dict[str, List[dict]]:
        return {
            'boardOfficials': [m.to_dict() for m in self.board_officials],
            'moderaTeam': [m.to_dict() for m in self.moderators]
        }
