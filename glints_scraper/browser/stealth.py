import logging
from playwright.async_api import BrowserContext

logger = logging.getLogger(__name__)


def _platform_for(user_agent: str) -> str:
    if "Windows" in user_agent:
        return "Win32"
    if "Mac" in user_agent:
        return "MacIntel"
    return "Linux x86_64"


async def apply_stealth_scripts(context: BrowserContext, user_agent: str):
    """
    Register an init script that makes navigator properties agree with the
    spoofed user agent and hides the webdriver flag.
    """
    platform = _platform_for(user_agent)
    await context.add_init_script(f"""
        Object.defineProperty(navigator, 'platform', {{
            get: () => '{platform}'
        }});

        Object.defineProperty(navigator, 'webdriver', {{
            get: () => undefined
        }});

        Object.defineProperty(navigator, 'languages', {{
            get: () => ['id-ID', 'id', 'en-US', 'en']
        }});

        window.chrome = window.chrome || {{ runtime: {{}} }};
    """)

    logger.debug(f"Stealth init script registered (platform: {platform}).")
