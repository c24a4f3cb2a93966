from pydantic import BaseModel, ConfigDict
from typing import Any, Optional, Union
import math

Number = Union[int, float]

def whole(value: Number) -> Number:
    # 5.0 from upstream is rendered as 5
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value

class VerifyRequest(BaseModel):
    token: Any = None

    @property
    def has_token(self) -> bool:
        """JavaScript truthiness: null, false, 0, NaN and "" are missing; {} and [] are not."""
        t = self.token
        if t is None or isinstance(t, bool):
            return bool(t)
        if isinstance(t, (int, float)):
            return t != 0 and not math.isnan(t)
        if isinstance(t, str):
            return t != ""
        return True

class AgentProfile(BaseModel):
    id: str
    name: str
    karma: Number
    posts: Number = 0
    comments: Number = 0
    owner_x_handle: str = "Unknown"
    is_claimed: bool = False

class VerifyResponse(BaseModel):
    success: bool
    agent: Optional[AgentProfile] = None
    message: Optional[str] = None
    error: Optional[str] = None

# Shapes returned by the Moltbook identity API

class UpstreamStats(BaseModel):
    posts: Optional[Number] = None
    comments: Optional[Number] = None

class UpstreamOwner(BaseModel):
    x_handle: Optional[str] = None

class UpstreamAgent(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: str
    karma: Number = 0
    stats: Optional[UpstreamStats] = None
    owner: Optional[UpstreamOwner] = None
    is_claimed: Optional[bool] = None

    def to_profile(self) -> AgentProfile:
        stats = self.stats or UpstreamStats()
        owner = self.owner or UpstreamOwner()
        return AgentProfile(
            id=self.id,
            name=self.name,
            karma=whole(self.karma),
            posts=whole(stats.posts or 0),
            comments=whole(stats.comments or 0),
            owner_x_handle=owner.x_handle or "Unknown",
            is_claimed=bool(self.is_claimed),
        )

class UpstreamVerifyResponse(BaseModel):
    success: Any = None
    valid: Any = None
    # left raw; only parsed as UpstreamAgent once the token is accepted
    agent: Any = None

    @property
    def accepted(self) -> bool:
        return self.success is True and self.valid is True
