"""Docker compose override handling for mounting the plugin into a site.

The override file is read, merged, and written back so unrelated services,
volumes, and keys survive, and re-running the mount adds nothing twice.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)

CONTAINER_PLUGINS_DIR = "/var/www/html/wp-content/plugins"
COMPOSE_SERVICE = "web"


def plugin_volume(plugin_path: Union[str, Path]) -> str:
    """Build the volume declaration mounting ``plugin_path`` into the container."""
    plugin_path = str(plugin_path).rstrip("/")
    return f"{plugin_path}:{CONTAINER_PLUGINS_DIR}/{plugin_path.split('/')[-1]}"


def compose_template(plugin_path: Union[str, Path]) -> Dict[str, Any]:
    """Return a minimal compose mapping that mounts ``plugin_path``."""
    return {"services": {COMPOSE_SERVICE: {"volumes": [plugin_volume(plugin_path)]}}}


def load_compose(compose_file: Path) -> Dict[str, Any]:
    """Read a compose file, returning an empty mapping when it does not exist.

    Raises:
        ValueError: If the file does not hold a YAML mapping
    """
    if not compose_file.exists():
        return {}
    loaded = yaml.safe_load(compose_file.read_text(encoding="utf-8")) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Compose file {compose_file} does not contain a mapping")
    return loaded


def merge_plugin_mount(compose_file: Path, plugin_path: Union[str, Path]) -> bool:
    """Ensure ``compose_file`` mounts ``plugin_path`` into the web service.

    Args:
        compose_file: Compose override file to update (created if missing)
        plugin_path: Host directory of the plugin

    Returns:
        True if the file was written, False if the mount was already declared

    Raises:
        ValueError: If existing content has an unexpected shape
    """
    document = load_compose(compose_file)
    volume = plugin_volume(plugin_path)

    services = document.get("services") or {}
    if not isinstance(services, dict):
        raise ValueError(f"services in {compose_file} is not a mapping")
    service = services.get(COMPOSE_SERVICE) or {}
    if not isinstance(service, dict):
        raise ValueError(f"services.{COMPOSE_SERVICE} in {compose_file} is not a mapping")
    volumes = service.get("volumes") or []
    if not isinstance(volumes, list):
        raise ValueError(f"services.{COMPOSE_SERVICE}.volumes in {compose_file} is not a list")

    service["volumes"] = volumes
    services[COMPOSE_SERVICE] = service
    document["services"] = services

    if volume in volumes:
        logger.debug("Mount already declared in %s", compose_file)
        return False

    volumes.append(volume)
    compose_file.parent.mkdir(parents=True, exist_ok=True)
    compose_file.write_text(yaml.safe_dump(document, sort_keys=False), encoding="utf-8")
    logger.info("Added mount %s to %s", volume, compose_file)
    return True
