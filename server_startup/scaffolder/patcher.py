"""Auth wiring for the application file.

With JWT security the auth router has to be imported right after the health
router and registered right after the health route.  The wiring is applied to
the ``AppSections`` before rendering, anchored on section names rather than on
rendered text.
"""

from __future__ import annotations

from ..errors import PatchFailure
from .app_file import IMPORT_EXT, AppSections, Section

HEALTH_ANCHOR = "health"

AUTH_IMPORT = Section(
    "auth", f"import authRouter from './routes/v1/auth.routes.{IMPORT_EXT}';"
)
AUTH_ROUTE = Section("auth", "app.use('/api/v1/auth', authRouter);")


def apply_auth_wiring(sections: AppSections) -> AppSections:
    """Insert the auth router import and registration after the health ones.

    Raises:
        PatchFailure: If a health anchor is missing or auth is already wired.
    """
    for group in ("imports", "routes"):
        if sections.index_of(group, HEALTH_ANCHOR) < 0:
            raise PatchFailure(HEALTH_ANCHOR, f"No '{HEALTH_ANCHOR}' section in app {group}")
        if sections.index_of(group, AUTH_IMPORT.name) >= 0:
            raise PatchFailure(HEALTH_ANCHOR, f"Auth router already present in app {group}")

    sections.insert_after("imports", HEALTH_ANCHOR, AUTH_IMPORT)
    sections.insert_after("routes", HEALTH_ANCHOR, AUTH_ROUTE)
    return sections
