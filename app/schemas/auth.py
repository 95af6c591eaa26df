from pydantic import BaseModel, Field


class AnonymousSignInRequest(BaseModel):
    name: str | None = Field(default=None, max_length=128)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str


class AdminCodeRequest(BaseModel):
    code: str = Field(..., min_length=1, max_length=128)


class AdminVerifyResponse(BaseModel):
    success: bool
    name: str


class AdminStatusResponse(BaseModel):
    is_admin: bool


class AdminNameResponse(BaseModel):
    name: str | None
