import asyncio
import json
import os
import shlex
import signal
from typing import List

from app.features.scan.schemas.scan import LighthouseReport
from app.features.scan.services.providers.base import (
    AuditProvider,
    UpstreamError,
    parse_lighthouse_result,
)
from app.platform.config import settings
from app.platform.logger import get_logger

logger = get_logger(__name__)


class LighthouseCliProvider(AuditProvider):
    """
    Runs the local `lighthouse` CLI against headless Chrome.

    Needs Node, the lighthouse package and a Chrome install on the host;
    the PageSpeed provider is the default because it needs none of those.
    """

    name = "lighthouse"

    def __init__(
        self,
        binary: str = settings.LIGHTHOUSE_PATH,
        chrome_flags: str = settings.LIGHTHOUSE_CHROME_FLAGS,
        timeout: float = settings.LIGHTHOUSE_TIMEOUT,
    ):
        self.binary = binary
        self.chrome_flags = chrome_flags
        self.timeout = timeout

    def build_command(self, url: str) -> List[str]:
        return [
            *shlex.split(self.binary),
            url,
            "--only-categories=accessibility",
            "--output=json",
            "--output-path=stdout",
            "--quiet",
            f"--chrome-flags={self.chrome_flags}",
        ]

    async def run(self, url: str) -> LighthouseReport:
        command = self.build_command(url)
        logger.info(f"Running Lighthouse CLI for {url}")

        try:
            # Own process group so Chrome, spawned by lighthouse, dies with it
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=True,
            )
        except OSError as e:
            raise UpstreamError(f"Could not start Lighthouse ({command[0]}): {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            kill_process_group(process)
            await process.wait()
            raise UpstreamError(f"Lighthouse timed out after {self.timeout}s") from e
        except BaseException:
            kill_process_group(process)
            raise

        if process.returncode != 0:
            message = stderr.decode(errors="replace").strip().splitlines()
            raise UpstreamError(
                f"Lighthouse exited with code {process.returncode}: "
                f"{message[-1] if message else 'no output'}"
            )

        try:
            lhr = json.loads(stdout)
        except ValueError as e:
            raise UpstreamError("Lighthouse returned invalid JSON") from e

        return parse_lighthouse_result(lhr)


def kill_process_group(process: asyncio.subprocess.Process) -> None:
    """SIGKILL lighthouse and every browser it started."""
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        logger.debug(f"Lighthouse process group {process.pid} already exited")
