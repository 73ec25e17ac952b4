import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from xeus_cling_setup.errors import SetupError
from xeus_cling_setup.install import InstallDriver
from xeus_cling_setup.logging import configure_logging
from xeus_cling_setup.session import SessionResult, SessionSetup

from .config import ProjectConfig

logger = logging.getLogger(__name__)


def _generate(args: argparse.Namespace) -> Tuple[SessionSetup, Optional[SessionResult]]:
    config = ProjectConfig.from_path(args.config, args.source_dir, args.binary_dir)
    setup = SessionSetup(config.graph(), config.context())
    result = setup.generate(config.session)
    if result is None:
        print("xeus-cling interpreter not found, nothing to do.")
    return setup, result


def generate(args: argparse.Namespace):
    """Generate the bootstrap header, kernel manifest and documentation files."""
    _, result = _generate(args)
    if result is None:
        return
    print(f"Kernel:     {result.display_name}")
    print(f"- Id:       {result.kernel_id}")
    print(f"- Header:   {result.header_path}")
    print(f"- Manifest: {result.manifest_path}")


def install(args: argparse.Namespace):
    """Generate the session, then install its documentation and register the kernel."""
    setup, result = _generate(args)
    if result is None:
        return
    driver = InstallDriver.for_toolchain(setup.toolchain)
    if driver.install(result, documentation=not args.no_docs):
        print(f"Installed kernel '{result.display_name}' as {result.kernel_id}")
    else:
        print(f"Installation of kernel '{result.display_name}' is suppressed (NO_INSTALL).")


def install_docs(args: argparse.Namespace):
    """Generate the session and install only its documentation files."""
    setup, result = _generate(args)
    if result is None:
        return
    if result.documentation is None:
        raise SetupError(
            "No documentation configured: set DOXYGEN_URLS and DOXYGEN_TAGFILES in the session"
        )
    installed = InstallDriver.for_toolchain(setup.toolchain).install_documentation(
        result.documentation
    )
    for path in installed:
        print(f"- {path}")


def _add_common_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("config", type=Path, help="JSON project file describing the session.")
    parser.add_argument(
        "--source-dir", type=Path, default=None, help="Override the declaring source directory."
    )
    parser.add_argument(
        "--binary-dir", type=Path, default=None, help="Override the build output directory."
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Defaults to $XEUS_CLING_SETUP_LOG_LEVEL or INFO.",
    )


def cli(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="xeus-cling kernel setup", formatter_class=argparse.RawTextHelpFormatter
    )

    command_subparsers = parser.add_subparsers(
        dest="command", required=True, help="Primary commands"
    )

    generate_parser = command_subparsers.add_parser(
        "generate", help="Generate the kernel files into the build output directory."
    )
    _add_common_arguments(generate_parser)
    generate_parser.set_defaults(func=generate)

    install_parser = command_subparsers.add_parser(
        "install", help="Generate the kernel files and register the kernel with Jupyter."
    )
    _add_common_arguments(install_parser)
    install_parser.add_argument(
        "--no-docs", action="store_true", help="Do not install the Doxygen documentation files."
    )
    install_parser.set_defaults(func=install)

    docs_parser = command_subparsers.add_parser(
        "install-docs", help="Install only the Doxygen documentation files."
    )
    _add_common_arguments(docs_parser)
    docs_parser.set_defaults(func=install_docs)

    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))
    try:
        args.func(args)
    except (SetupError, FileNotFoundError) as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    cli()
