"""YAML export of a parsed registry."""

import io
from pathlib import Path

import ruamel.yaml

from pen.models import Entry, IdentifierPrefix
from pen.registry import Registry


def _entry_to_dict(entry: Entry, prefix: IdentifierPrefix | None) -> dict:
    """Convert an Entry to a dictionary, omitting empty optional fields.

    Args:
        entry: The entry to convert
        prefix: Identifier prefix of the owning registry

    Returns:
        Dictionary with number, oid and any non-empty details
    """
    result: dict = {"number": entry.number, "oid": entry.oid(prefix)}

    if entry.organization:
        result["organization"] = entry.organization
    if entry.contact:
        result["contact"] = entry.contact
    if entry.emails:
        result["emails"] = list(entry.emails)

    return result


def generate_yaml_dict(registry: Registry) -> dict:
    """Generate a dictionary from a Registry ready for YAML serialization.

    Args:
        registry: The parsed registry

    Returns:
        Dictionary with header fields, prefixes and entries
    """
    prefix = registry.prefix
    return {
        "title": registry.title,
        "section": registry.section,
        "source": registry.uri(),
        "last_updated": (
            registry.last_updated.isoformat() if registry.last_updated else None
        ),
        "prefix": {
            "oid": prefix.oid if prefix else None,
            "iri": prefix.iri if prefix else None,
        },
        "entries": [_entry_to_dict(entry, prefix) for entry in registry.entries],
    }


def save_yaml(registry: Registry, output_file: Path) -> Path:
    """Save a Registry as a YAML file.

    Args:
        registry: The registry to save
        output_file: Destination file

    Returns:
        Path to the saved file
    """
    output_file.parent.mkdir(parents=True, exist_ok=True)

    yaml = ruamel.yaml.YAML()
    yaml.default_flow_style = False
    yaml.indent(mapping=2, sequence=4, offset=2)
    yaml.width = 100
    yaml.explicit_start = True

    # ruamel.yaml leaves trailing spaces on wrapped values
    buffer = io.StringIO()
    yaml.dump(generate_yaml_dict(registry), buffer)
    content = "\n".join(line.rstrip() for line in buffer.getvalue().splitlines()) + "\n"

    with open(output_file, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)

    return output_file
