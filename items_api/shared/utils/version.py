"""
Version Information

Build and version metadata reported by the /version endpoint, the
startup log and the CLI --version flag.
"""

import platform

from items_api.config.settings import Settings
from items_api.shared.schemas.version import VersionInfo


def build_version_info(settings: Settings) -> VersionInfo:
    """Collect version metadata from settings and the running interpreter."""
    return VersionInfo(
        name=settings.APP_NAME,
        version=settings.APP_VERSION,
        deploy_tag=settings.DEPLOY_TAG,
        build_time=settings.BUILD_TIME,
        branch=settings.GIT_BRANCH,
        commit=settings.GIT_COMMIT,
        python_version=platform.python_version(),
    )


def version_string(settings: Settings) -> str:
    """Single line version string: name version build_time branch commit."""
    return " ".join(
        (
            settings.APP_NAME,
            settings.APP_VERSION,
            settings.BUILD_TIME,
            settings.GIT_BRANCH,
            settings.GIT_COMMIT,
        )
    )
