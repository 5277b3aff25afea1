"""Extraction of custom SVG icons from the "Icons" page.

Icon components named "icon/custom/<name>" are rendered to SVG by Figma in
one batched request, then every SVG is downloaded and optimized
concurrently.
"""

import asyncio
from dataclasses import dataclass

from ..api import FigmaClient
from ..errors import IconOptimizationError
from ..models import FigmaNode
from ..reporter import ErrorReporter
from ..svg import SVGOptimizer
from ..tokens_logging import get_logger
from ..tree import find_components

logger = get_logger("icons")

ICON_PREFIX = "icon/custom/"


@dataclass
class IconComponent:
    """An icon component to render, by node id."""

    id: str
    name: str


def find_icon_components(canvas: FigmaNode) -> list[IconComponent]:
    """Icon components on the page, with the prefix stripped from their names."""
    return [
        IconComponent(id=node.id, name=node.name[len(ICON_PREFIX):].strip())
        for node in find_components(canvas)
        if node.name.startswith(ICON_PREFIX)
    ]


async def process_icon(
    client: FigmaClient, optimizer: SVGOptimizer, name: str, url: str
) -> tuple[str, str]:
    """Download one rendered icon and optimize it.

    Raises:
        IconOptimizationError: If the SVG cannot be optimized.
    """
    markup = await client.fetch_text(url)
    result = await asyncio.to_thread(optimizer.optimize, markup)
    if not result.ok:
        raise IconOptimizationError(name, result.error or "unknown error")
    return name, result.data


async def get_icons(
    client: FigmaClient,
    file_key: str,
    canvas: FigmaNode,
    reporter: ErrorReporter | None = None,
    optimizer: SVGOptimizer | None = None,
    image_format: str = "svg",
    scale: float = 1,
) -> dict[str, str]:
    """Render, download and optimize all custom icons of a page.

    Icons with an empty name, or that Figma could not render, are reported
    and skipped. An optimization failure aborts the whole import.

    Returns:
        Icon names mapped to optimized SVG markup.
    """
    icons = find_icon_components(canvas)
    if not icons:
        return {}

    reporter = reporter or ErrorReporter()
    optimizer = optimizer or SVGOptimizer()
    names = {icon.id: icon.name for icon in icons}

    image_urls = await client.get_images(
        file_key, [icon.id for icon in icons], format=image_format, scale=scale
    )
    logger.debug(f"Rendered {len(image_urls)} of {len(icons)} icons")

    pending: list[tuple[str, str]] = []
    for node_id, url in image_urls.items():
        name = names.get(node_id, "")
        if name == "":
            reporter.report(
                "Found a custom icon with an invalid name, skipping...",
                f'- Please find any components in the Figma file named "{ICON_PREFIX}" '
                f'and give them a proper name (e.g. "{ICON_PREFIX}close-button")',
            )
            continue
        if not url:
            reporter.report(
                f'Figma could not render the icon "{name}", skipping...',
                "- Please check that the icon component contains visible vector layers.",
            )
            continue
        pending.append((name, url))

    # The first failure cancels the downloads still in flight
    try:
        async with asyncio.TaskGroup() as group:
            tasks = [
                group.create_task(process_icon(client, optimizer, name, url))
                for name, url in pending
            ]
    except ExceptionGroup as errors:
        raise errors.exceptions[0] from None

    svgs = dict(task.result() for task in tasks)
    logger.info(f"Imported {len(svgs)} icons")
    return svgs
