"""Start the external test runner for a launch descriptor."""

import asyncio
import logging
import os
import sys

from spec_launcher.models.descriptor import LaunchDescriptor

log = logging.getLogger(__name__)


async def launch(descriptor: LaunchDescriptor, python: str = sys.executable) -> int:
    """Run the test runner described by ``descriptor`` and return its exit code.

    The runner inherits the current environment with the descriptor's
    variables layered on top, and its output goes to this process's streams.
    """
    env = {**os.environ, **descriptor.environment}
    log.info("Launching: %s", descriptor.shell_line(python))

    process = await asyncio.create_subprocess_exec(
        *descriptor.command(python),
        cwd=descriptor.working_directory,
        env=env,
    )
    returncode = await process.wait()

    log.info("Test runner exited with code %d", returncode)
    return returncode
