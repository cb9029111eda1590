"""
Browser Launcher - Open URLs with the desktop's default browser.

Uses xdg-open in its own session, detached from the launcher process.
The event loop reaps the child when it exits.
"""

import asyncio
import subprocess

from loguru import logger


class XdgOpenLauncher:
    """Default BrowserLauncher backed by xdg-open."""

    def __init__(self, command: str = "xdg-open"):
        self.command = command

    async def open(self, url: str) -> bool:
        try:
            await asyncio.create_subprocess_exec(
                self.command, url,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except FileNotFoundError:
            logger.warning(f"{self.command} not found, cannot open URL")
            return False

        logger.debug(f"Opened {url}")
        return True
