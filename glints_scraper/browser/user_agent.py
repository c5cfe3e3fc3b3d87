import logging
from typing import Optional

from fake_useragent import UserAgent

from glints_scraper.config.settings import settings

logger = logging.getLogger(__name__)

# Desktop Chrome on Windows, used when no random UA can be produced
FALLBACK_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


class UserAgentProvider:
    """
    Picks the user-agent string each browsing context presents.
    """

    _ua: Optional[UserAgent] = None

    @classmethod
    def initialize(cls):
        """
        Initialize the UserAgent provider if not already done.
        """
        if cls._ua is None:
            try:
                cls._ua = UserAgent(
                    browsers=["Chrome"],
                    os=["Windows", "Mac OS X"],
                    platforms=["desktop"],
                    fallback=FALLBACK_UA,
                )
            except Exception as e:
                logger.warning(
                    f"Failed to initialize fake_useragent, using fallback: {e}"
                )

    @classmethod
    def get(cls) -> str:
        """
        Return the configured user agent, else a random desktop one, else the fallback.
        """
        if settings.USER_AGENT:
            return settings.USER_AGENT

        cls.initialize()
        if cls._ua:
            return cls._ua.random
        return FALLBACK_UA
