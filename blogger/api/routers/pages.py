"""
Static page endpoints.

Routes:
- GET / - Homepage
- GET /profile - Profile page for logged-in users, redirect otherwise

Dependencies: fastapi, blogger.api.deps
System role: HTML entry points of the bundled client
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse, RedirectResponse

from blogger.api.deps import AuthContext, get_auth_context, get_settings_dependency
from blogger.configs import Settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"], include_in_schema=False)


def _view(settings: Settings, name: str) -> FileResponse:
    path = Path(settings.blog.public_dir) / "views" / name
    if not path.is_file():
        logger.error("Missing view file", extra={"path": str(path)})
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return FileResponse(path, media_type="text/html")


@router.get("/")
async def homepage(settings: Settings = Depends(get_settings_dependency)) -> FileResponse:
    """Serve the homepage."""
    return _view(settings, "index.html")


@router.get("/profile", response_model=None)
async def profile(
    auth: AuthContext = Depends(get_auth_context),
    settings: Settings = Depends(get_settings_dependency),
) -> FileResponse | RedirectResponse:
    """Serve the profile page to logged-in users; everyone else goes home."""
    if not auth.is_authenticated:
        return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    return _view(settings, "profile.html")
