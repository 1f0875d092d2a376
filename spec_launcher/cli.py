"""CLI entry point for building test runner launches."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, get_args

from pydantic import ValidationError

from spec_launcher.launcher import launch
from spec_launcher.models.descriptor import LaunchDescriptor
from spec_launcher.models.scope import TestKind, TestScope
from spec_launcher.producers.loading import (
    DEFAULT_PRODUCER,
    available_producers,
    load_producer_manifest,
)
from spec_launcher.translator import OutOfProjectError, TestSpecTranslator


def format_output(descriptor: LaunchDescriptor, python: str) -> dict[str, Any]:
    """Format a descriptor for JSON output."""
    output = descriptor.model_dump(mode="json")
    output["command"] = list(descriptor.command(python))
    output["shell"] = descriptor.shell_line(python)
    return output


async def run(
    scope: TestScope,
    project_root: str,
    producer_key: str = DEFAULT_PRODUCER,
    producer_config_json: str = "{}",
    launch_runner: bool = False,
    python: str = sys.executable,
) -> int:
    """Print the launch for ``scope`` and optionally run it; return exit code."""
    log = logging.getLogger("spec_launcher")

    log.info("Loading producer: %s", producer_key)
    manifest = load_producer_manifest(producer_key)
    settings = manifest.runner_settings(json.loads(producer_config_json))
    translator = TestSpecTranslator(settings=settings)

    try:
        descriptor = translator.build_launch_descriptor(scope, project_root)
    except OutOfProjectError as e:
        log.warning("Not producing a launch: %s", e)
        print(json.dumps(None))
        return 1

    log.info("Test spec: %s", descriptor.test_spec)
    print(json.dumps(format_output(descriptor, python), indent=2))

    if not launch_runner:
        return 0

    return await launch(descriptor, python)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Build the test runner launch for a folder, script, class or test"
    )
    parser.add_argument(
        "--project-root",
        required=True,
        help="Absolute path of the project; specs are relative to it",
    )
    parser.add_argument(
        "--kind",
        required=True,
        choices=get_args(TestKind.__value__),
        help="Granularity of the tests to run",
    )
    parser.add_argument(
        "--path",
        required=True,
        help="Absolute path of the folder or script containing the tests",
    )
    parser.add_argument(
        "--class-name",
        help="Test class name (class and method kinds)",
    )
    parser.add_argument(
        "--method-name",
        help="Test method or function name (method and function kinds)",
    )
    parser.add_argument(
        "--producer",
        default=DEFAULT_PRODUCER,
        help=f"Producer key ({', '.join(available_producers())})",
    )
    parser.add_argument(
        "--producer-config",
        default="{}",
        help="JSON configuration for the producer",
    )
    parser.add_argument(
        "--run",
        action="store_true",
        help="Start the test runner after printing the launch",
    )
    parser.add_argument(
        "--python",
        default=sys.executable,
        help="Interpreter used to start the test runner",
    )

    args = parser.parse_args()

    try:
        scope = TestScope(
            kind=args.kind,
            path=args.path,
            class_name=args.class_name,
            method_name=args.method_name,
        )
    except ValidationError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            scope=scope,
            project_root=args.project_root,
            producer_key=args.producer,
            producer_config_json=args.producer_config,
            launch_runner=args.run,
            python=args.python,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
