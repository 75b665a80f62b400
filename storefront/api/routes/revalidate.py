"""
Revalidation à la demande du cache des pages publiées.
POST /api/revalidate?path=/page/marketing-1
POST /api/revalidate?tag=marketing-pages
Le Referer doit provenir du même hôte.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...core.clock import utcnow
from ..deps import Services, get_services

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/revalidate", tags=["Revalidation"])


@router.post("")
def revalidate(
    request: Request,
    path: Optional[str] = None,
    tag: Optional[str] = None,
    services: Services = Depends(get_services),
):
    try:
        referer = request.headers.get("referer")
        host = request.headers.get("host", "")
        if not referer or host not in referer:
            return JSONResponse({"message": "Unauthorized"}, status_code=401)

        timestamp = utcnow().isoformat()
        if path:
            services.cache.revalidate_path(path)
            log.info("Revalidation path=%s", path)
            return {"revalidated": True, "path": path,
                    "message": f"Path {path} revalidated successfully", "timestamp": timestamp}
        if tag:
            purged = services.cache.revalidate_tag(tag)
            log.info("Revalidation tag=%s (%d page(s))", tag, len(purged))
            return {"revalidated": True, "tag": tag,
                    "message": f"Tag {tag} revalidated successfully", "timestamp": timestamp}
        return JSONResponse({"message": "Missing path or tag parameter"}, status_code=400)
    except Exception as e:
        log.exception("Erreur de revalidation")
        return JSONResponse({"message": "Error revalidating", "error": str(e)}, status_code=500)


@router.get("")
def usage():
    return {
        "message": "Revalidation API",
        "usage": {
            "POST /api/revalidate?path=/page/[id]": "Revalidate specific page",
            "POST /api/revalidate?tag=marketing-pages": "Revalidate all marketing pages",
        },
    }
