"""Repository generation: a domain interface and its data-layer skeleton.

Generates, below the target directory::

    domain/repo/<Feature>Repo.kt
    data/repo/<Feature>RepoImpl.kt

Every method returns ``Flow<ReturnType>``; implementation bodies are
``TODO("Not yet implemented")`` stubs that fail fast when called.
"""

from __future__ import annotations

from mvi_scaffold.naming import to_pascal

from .models import GeneratedFile, RepoMethod, RepositoryConfig
from .packages import join_package
from .templates import TemplateRenderer, default_renderer

FLOW_IMPORT = "kotlinx.coroutines.flow.Flow"
HTTP_CLIENT_IMPORT = "io.ktor.client.HttpClient"


class EmptyMethodListError(ValueError):
    """Raised when a repository is requested without any method and skipping is not allowed."""

    def __init__(self, feature_name: str) -> None:
        self.feature_name = feature_name
        super().__init__(
            f"Repository for '{feature_name}' needs at least one method"
        )


def build_repo_interface(
    stem: str,
    package: str,
    methods: list[RepoMethod],
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render ``<Feature>Repo.kt``: one Flow-returning signature per method, in order."""
    renderer = renderer or default_renderer()
    return renderer.render(
        "repo/Repo.kt.j2",
        {
            "package": package,
            "imports": [FLOW_IMPORT],
            "stem": stem,
            "methods": methods,
        },
    )


def build_repo_impl(
    stem: str,
    package: str,
    interface_package: str,
    methods: list[RepoMethod],
    needs_http_client: bool,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render ``<Feature>RepoImpl.kt`` implementing the interface with stubs."""
    renderer = renderer or default_renderer()
    imports = [join_package(interface_package, f"{stem}Repo")]
    if needs_http_client:
        imports.append(HTTP_CLIENT_IMPORT)
    imports.append(FLOW_IMPORT)
    return renderer.render(
        "repo/RepoImpl.kt.j2",
        {
            "package": package,
            "imports": imports,
            "stem": stem,
            "methods": methods,
            "needs_http_client": needs_http_client,
        },
    )


class RepoGenerator:
    """Builds the repository interface and implementation for one feature."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or default_renderer()

    def build_files(self, config: RepositoryConfig, base_package: str) -> list[GeneratedFile]:
        """Render both files without touching the file system.

        Raises:
            EmptyMethodListError: If *config* has no methods; an interface
                without members is never emitted.
        """
        if not config.methods:
            raise EmptyMethodListError(config.feature_name)

        stem = to_pascal(config.feature_name)
        domain_pkg = join_package(base_package, "domain", "repo")
        data_pkg = join_package(base_package, "data", "repo")

        return [
            GeneratedFile(
                directories=("domain", "repo"),
                file_name=f"{stem}Repo.kt",
                content=build_repo_interface(stem, domain_pkg, config.methods, self.renderer),
            ),
            GeneratedFile(
                directories=("data", "repo"),
                file_name=f"{stem}RepoImpl.kt",
                content=build_repo_impl(
                    stem,
                    data_pkg,
                    domain_pkg,
                    config.methods,
                    config.needs_http_client,
                    self.renderer,
                ),
            ),
        ]
