from pydantic import BaseModel, Field

# Request DTOs
class ShortenURLRequest(BaseModel):
    long_url: str = Field(..., examples=["http://www.google.com"])

class RetrieveLongURLRequest(BaseModel):
    short_url: str = Field(..., examples=["abc1234"])

# Response DTOs
class ShortenURLResponse(BaseModel):
    short_url: str = Field(..., examples=["abc1234"])

class RetrieveLongURLResponse(BaseModel):
    long_url: str = Field(..., examples=["http://www.google.com"])

class ErrorResponse(BaseModel):
    # 'Error' is the JSON key clients already consume
    error: str = Field(..., alias="Error")

    class Config:
        populate_by_name = True
