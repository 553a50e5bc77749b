# boardlab_picker/core/domain/match_result.py

"""Board name match result domain model"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from boardlab_picker.core.domain.enums import MatchKind
from boardlab_picker.core.domain.identity import BoardIdentifier


class BoardNameMatch(BaseModel):
    """Outcome of matching a board name against a catalog

    Produced fresh for every query and never persisted.
    """

    model_config = ConfigDict(frozen=True)

    board: BoardIdentifier
    kind: MatchKind
    score: float = Field(ge=0.0, le=1.0, description="Confidence of the match")
