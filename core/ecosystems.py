"""Registry of supported ecosystems."""

from types import MappingProxyType

from . import tables
from .exceptions import InvalidRequest
from .models import EcosystemDescriptor
from .parse_dart import parse_pubspec_yaml
from .parse_docker import parse_dockerfile
from .parse_dotnet import parse_packages_config
from .parse_elixir import parse_mix_exs
from .parse_go import parse_go_mod
from .parse_java import parse_pom_xml
from .parse_node import parse_package_json
from .parse_php import parse_composer_json
from .parse_python import parse_requirements
from .parse_ruby import parse_gemfile
from .parse_rust import parse_cargo_toml

ECOSYSTEMS: tuple[EcosystemDescriptor, ...] = (
    EcosystemDescriptor("node", "package.json", parse_package_json, tables.NODE_TECH),
    EcosystemDescriptor("python", "requirements.txt", parse_requirements, tables.PYTHON_TECH),
    EcosystemDescriptor("java", "pom.xml", parse_pom_xml, tables.JAVA_TECH),
    EcosystemDescriptor("dotnet", "packages.config", parse_packages_config, tables.DOTNET_TECH),
    EcosystemDescriptor("ruby", "Gemfile", parse_gemfile, tables.RUBY_TECH),
    EcosystemDescriptor("php", "composer.json", parse_composer_json, tables.PHP_TECH),
    EcosystemDescriptor("go", "go.mod", parse_go_mod, tables.GO_TECH),
    EcosystemDescriptor("rust", "Cargo.toml", parse_cargo_toml, tables.RUST_TECH),
    EcosystemDescriptor("dart", "pubspec.yaml", parse_pubspec_yaml, tables.DART_TECH),
    EcosystemDescriptor("elixir", "mix.exs", parse_mix_exs, tables.ELIXIR_TECH),
    EcosystemDescriptor("docker", "Dockerfile", parse_dockerfile, tables.DOCKER_TECH),
)

ECOSYSTEMS_BY_ID = MappingProxyType({descriptor.ecosystem_id: descriptor for descriptor in ECOSYSTEMS})


def select_ecosystems(ecosystem_ids: list[str] | None = None) -> tuple[EcosystemDescriptor, ...]:
    """Return the descriptors for ``ecosystem_ids`` (all of them when None).

    Raises:
        InvalidRequest: An id is not a supported ecosystem
    """
    if not ecosystem_ids:
        return ECOSYSTEMS
    unknown = [eid for eid in ecosystem_ids if eid not in ECOSYSTEMS_BY_ID]
    if unknown:
        raise InvalidRequest(f"Unsupported ecosystem(s): {', '.join(unknown)}")
    return tuple(ECOSYSTEMS_BY_ID[eid] for eid in ecosystem_ids)
