# metadata/routes.py
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from errors import StoreUnreadable
from metadata.models import MetadataDocument
from metadata.store import read_raw

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Metadata"])


# -----------------------------
# GET META-DATA (re-read per request)
# -----------------------------
@router.get("/meta-data")
def get_meta_data(request: Request):
    meta_path = request.app.state.settings.meta_path

    try:
        data = read_raw(meta_path)
        MetadataDocument.model_validate(data)
    except (StoreUnreadable, ValueError) as e:
        logger.error("Failed to read %s: %s", meta_path.name, e)
        return JSONResponse(status_code=500, content={"error": "Failed to read meta-data"})

    return data
