"""Search result data model."""

from pydantic import BaseModel, ConfigDict, Field

from rulebook.models.manual import Rule, RuleGroup


class SearchHit(BaseModel):
    """A rule matched by a query, with the group it came from."""

    model_config = ConfigDict(frozen=True)

    rule: Rule
    group: RuleGroup
    score: int = Field(ge=1, le=4)  # 4 code, 3 title, 2 category, 1 body
