"""Command-line entry point for the MVI scaffolder.

Every generation command accepts the request either as flags, as a YAML
document (``--request``), or both; flags given on the command line override
values from the document.

Examples::

    python -m mvi_scaffold.cli viewmodel "Forget Password" --refresh --use-cases "GetUser, SaveUser"
    python -m mvi_scaffold.cli screen Profile --navigation type_safe --nav-param id:String
    python -m mvi_scaffold.cli repo Profile --method "getProfile|Profile|id: String"
    python -m mvi_scaffold.cli feature --request profile.yaml --target app/src/main/kotlin/com/acme
    python -m mvi_scaffold.cli settings write --settings mvi-scaffold.json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from mvi_scaffold.config import TypePathSettings
from mvi_scaffold.manager import GenerationManager
from mvi_scaffold.scaffolder.models import (
    EmptyMethodPolicy,
    FeatureConfig,
    NavigationStyle,
    RepositoryConfig,
    ScreenConfig,
    StateContainerConfig,
    parse_dependency_names,
    parse_nav_parameter,
    parse_repo_method,
)
from mvi_scaffold.scaffolder.packages import DirectoryHandle, LocalDirectory, MemoryDirectory, PackageResolver
from mvi_scaffold.scaffolder.sink import LocalFileSink, MemoryFileSink
from mvi_scaffold.utils import print_error, print_header, print_success, print_summary_table

DEFAULT_SETTINGS_FILE = "mvi-scaffold.json"

REQUEST_MODELS: dict[str, type[BaseModel]] = {
    "screen": ScreenConfig,
    "viewmodel": StateContainerConfig,
    "repo": RepositoryConfig,
    "feature": FeatureConfig,
}


# ---------------------------------------------------------------------------
# Request and settings loading
# ---------------------------------------------------------------------------


def load_request(path: str | Path) -> dict[str, Any]:
    """Read a YAML request document into a plain mapping.

    Raises:
        ValueError: If the document is not a mapping.
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Request file {path} must contain a mapping")
    return data


def build_request(command: str, args: argparse.Namespace) -> BaseModel:
    """Merge the YAML request (if any) with the flags given for *command*."""
    model = REQUEST_MODELS[command]
    data: dict[str, Any] = load_request(args.request) if args.request else {}
    for field_name, value in vars(args).items():
        if field_name in model.model_fields and value is not None:
            data[field_name] = value
    return model.model_validate(data)


def load_settings(path: str | None) -> TypePathSettings:
    """Settings from a JSON file, or defaults plus ``MVI_*`` environment overrides."""
    if path is None:
        return TypePathSettings.from_env()
    return TypePathSettings.load(Path(path))


def target_directory(target: str, dry_run: bool) -> DirectoryHandle:
    resolved = Path(target).resolve()
    if dry_run:
        return MemoryDirectory(resolved.as_posix())
    return LocalDirectory(resolved)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _add_state_container_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("view-model options")
    group.add_argument("--events", dest="events_enabled", action=argparse.BooleanOptionalAction, default=None,
                       help="Declare an Event type (default: on)")
    group.add_argument("--refresh", dest="refresh_enabled", action=argparse.BooleanOptionalAction, default=None,
                       help="Make the UI state refreshable (default: on)")
    group.add_argument("--ui-state", dest="ui_state_enabled", action=argparse.BooleanOptionalAction, default=None,
                       help="Declare a UIState type (default: on)")
    group.add_argument("--load", dest="include_load_method", action=argparse.BooleanOptionalAction, default=None,
                       help="Dispatch the load intent from an init block (default: off)")
    group.add_argument("--use-cases", dest="dependency_names", type=parse_dependency_names, default=None,
                       help="Comma-separated use-case names, e.g. 'GetUser, SaveUser'")


def _add_repository_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("repository options")
    group.add_argument("--method", dest="methods", type=parse_repo_method, action="append", default=None,
                       help="Repository method as 'name|ReturnType|params' (repeatable)")
    group.add_argument("--http-client", dest="needs_http_client", action=argparse.BooleanOptionalAction,
                       default=None, help="Inject an HttpClient into the implementation (default: on)")


def _add_screen_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("screen options")
    group.add_argument("--nav-back", dest="has_navigation_back", action=argparse.BooleanOptionalAction,
                       default=None, help="Add a navigationBack callback (default: on)")
    group.add_argument("--navigation", dest="navigation_style", choices=[s.value for s in NavigationStyle],
                       default=None, help="Navigation wiring style (default: none)")
    group.add_argument("--nav-param", dest="nav_parameters", type=parse_nav_parameter, action="append",
                       default=None, help="Type-safe navigation parameter as 'name:Type' (repeatable)")


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--settings", default=None,
                        help="Type path settings JSON file (default: built-in paths + MVI_* env vars)")

    generation = argparse.ArgumentParser(add_help=False, parents=[common])
    generation.add_argument("feature_name", nargs="?", default=None, help="Feature name, e.g. 'Forget Password'")
    generation.add_argument("--request", default=None, help="YAML file holding the request fields")
    generation.add_argument("--target", "-t", default=".", help="Directory to generate into (default: .)")
    generation.add_argument("--source-root", action="append", default=[],
                            help="Source root used to derive the package (repeatable)")
    generation.add_argument("--dry-run", action="store_true", help="Render without writing any file")

    parser = argparse.ArgumentParser(
        prog="mvi-scaffold",
        description="MVI Scaffold -- Kotlin MVI feature scaffolding generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  mvi-scaffold viewmodel 'Forget Password' --refresh\n"
            "  mvi-scaffold screen Profile --navigation type_safe --nav-param id:String\n"
            "  mvi-scaffold feature --request profile.yaml -t app/src/main/kotlin/com/acme\n"
        ),
    )
    sub = parser.add_subparsers(dest="command", required=True)

    screen = sub.add_parser("screen", parents=[generation], help="Generate a Compose screen")
    _add_screen_args(screen)
    screen.add_argument("--inject-view-model", dest="inject_controller", action=argparse.BooleanOptionalAction,
                        default=None, help="Inject the feature's view-model into the route (default: off)")
    screen.add_argument("--ui-state", dest="ui_state_enabled", action=argparse.BooleanOptionalAction,
                        default=None, help="The injected view-model exposes a UIState (default: on)")

    viewmodel = sub.add_parser("viewmodel", parents=[generation], help="Generate state types and a view-model")
    _add_state_container_args(viewmodel)

    repo = sub.add_parser("repo", parents=[generation], help="Generate a repository interface and implementation")
    _add_repository_args(repo)
    repo.add_argument("--allow-empty", action="store_true",
                      help="Skip instead of failing when no method is given")

    feature = sub.add_parser("feature", parents=[generation], help="Generate a full feature")
    feature.add_argument("--screen", dest="generate_screen", action=argparse.BooleanOptionalAction, default=None,
                         help="Generate the screen (default: on)")
    feature.add_argument("--view-model", dest="generate_controller", action=argparse.BooleanOptionalAction,
                         default=None, help="Generate the state container (default: on)")
    feature.add_argument("--repository", dest="generate_repository", action=argparse.BooleanOptionalAction,
                         default=None, help="Generate the repository (default: off)")
    feature.add_argument("--empty-methods", dest="empty_method_policy",
                         choices=[p.value for p in EmptyMethodPolicy], default=None,
                         help="Repository without methods: skip it or fail (default: skip)")
    _add_screen_args(feature)
    _add_state_container_args(feature)
    _add_repository_args(feature)

    settings = sub.add_parser("settings", parents=[common], help="Show, validate or write type path settings")
    settings.add_argument("action", choices=["show", "validate", "write"])

    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def run_settings(args: argparse.Namespace) -> bool:
    if args.action == "write":
        target = TypePathSettings.from_env().save(Path(args.settings or DEFAULT_SETTINGS_FILE))
        print_success(f"Settings written to {target}")
        return True

    settings = load_settings(args.settings)
    if args.action == "show":
        print_summary_table(settings.as_dict(), title="Type path settings")
        return True
    if settings.is_valid():
        print_success("All required type paths are configured")
        return True
    print_error(settings.validation_message())
    return False


def run_generation(args: argparse.Namespace) -> bool:
    settings = load_settings(args.settings)
    request = build_request(args.command, args)

    directory = target_directory(args.target, args.dry_run)
    if not args.dry_run and not Path(directory.path).is_dir():
        print_error(f"Error: Target directory not found: {directory.path}")
        return False

    manager = GenerationManager(
        settings,
        directory,
        sink=MemoryFileSink() if args.dry_run else LocalFileSink(),
        resolver=PackageResolver([Path(root).resolve() for root in args.source_root]),
    )
    print_header(f"{args.command} {request.feature_name}" + (" (dry run)" if args.dry_run else ""))

    if args.command == "screen":
        return manager.generate_screen(request)
    if args.command == "viewmodel":
        return manager.generate_view_model(request)
    if args.command == "repo":
        policy = EmptyMethodPolicy.SKIP if args.allow_empty else EmptyMethodPolicy.FAIL
        return manager.generate_repository(request, policy)
    return manager.generate_feature(request)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m mvi_scaffold.cli``."""
    args = build_parser().parse_args(argv)

    try:
        if args.command == "settings":
            ok = run_settings(args)
        else:
            ok = run_generation(args)
    except ValidationError as exc:
        print_error(f"Error: Invalid input:\n{exc}")
        sys.exit(1)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
