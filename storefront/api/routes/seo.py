"""Sitemap + robots — GET /sitemap.xml, GET /robots.txt"""
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from ...sitemap import build_robots, build_sitemap
from ..deps import Services, get_services

router = APIRouter(tags=["SEO"])


@router.get("/sitemap.xml")
def sitemap(services: Services = Depends(get_services)):
    xml = build_sitemap(services.pages, services.settings.base_url)
    return Response(xml, media_type="application/xml")


@router.get("/robots.txt", response_class=PlainTextResponse)
def robots(services: Services = Depends(get_services)):
    return PlainTextResponse(build_robots(services.settings.base_url))
