from typing import Optional

from fastapi import APIRouter, Depends

from adstudio.api.deps import get_script_writer
from adstudio.schemas.script import ScriptRequest, ScriptResponse
from adstudio.services.script_service import ScriptWriter

router = APIRouter()


@router.post("/generate-script", response_model=ScriptResponse)
async def generate_script(
    request: Optional[ScriptRequest] = None,
    writer: ScriptWriter = Depends(get_script_writer)
):
    """
    Generates the ad script. Always answers 200; falls back to the fixed
    template when the model is unavailable.
    """
    request = request or ScriptRequest()
    script = await writer.write_script(
        request.business_name,
        request.service,
        request.target_audience
    )
    return ScriptResponse(script=script)
