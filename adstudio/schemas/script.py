from pydantic import BaseModel, ConfigDict, Field


class ScriptRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    business_name: str = Field("", alias="businessName")
    service: str = ""
    target_audience: str = Field("", alias="targetAudience")


class ScriptResponse(BaseModel):
    script: str
