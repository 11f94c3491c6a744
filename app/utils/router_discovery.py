import importlib
import inspect
import pkgutil

from fastapi import APIRouter, FastAPI
from loguru import logger


def discover_routers(package_name: str = "app.api", recursive: bool = True) -> list[APIRouter]:
    """
    Discover all router instances in a package.

    Args:
        package_name: The package to scan for routers.
        recursive: Whether to recursively scan subpackages.

    Returns:
        The routers found, in module name order.
    """
    routers: list[APIRouter] = []

    package = importlib.import_module(package_name)
    package_path = getattr(package, "__path__", None)

    if not package_path:
        logger.warning(f"Cannot scan {package_name} for routers as it's not a package")
        return routers

    modules = sorted(pkgutil.iter_modules(package_path), key=lambda m: m.name)
    for _, module_name, is_pkg in modules:
        full_module_name = f"{package_name}.{module_name}"

        if is_pkg and recursive:
            routers.extend(discover_routers(package_name=full_module_name, recursive=recursive))
            continue

        try:
            module = importlib.import_module(full_module_name)
        except (ImportError, AttributeError) as e:
            logger.error(f"Error importing module {full_module_name}: {e}")
            continue

        for _, obj in inspect.getmembers(module):
            if isinstance(obj, APIRouter):
                routers.append(obj)
                logger.info(f"Discovered router {obj.prefix or '/'} in {full_module_name}")

    return routers


def register_routers(app: FastAPI, prefix: str = "/api") -> None:
    """
    Register every router under app.api with the FastAPI app.

    Args:
        app: The FastAPI app.
        prefix: The prefix to add to all routes.
    """
    for router in discover_routers():
        app.include_router(router, prefix=prefix)
