"""
Main CLI entry point for cordova-config.

Every command loads the file, applies one edit and writes it back.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

import click

from ..core.config import ToolSettings, load_settings
from ..core.constants import HOOK_TYPES
from ..core.exceptions import ConfigXmlError
from ..core.widget_config import WidgetConfig
from ..logging import install_unified_record_factory, setup_logging

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _fail(message: str) -> None:
    click.echo(f"❌ {message}", err=True)
    sys.exit(1)


def _edit(ctx: click.Context, action: Callable[[WidgetConfig], Any]) -> Any:
    """
    Load the document, apply action and write the result.

    Nothing is written when action returns False.
    """
    settings: ToolSettings = ctx.obj["settings"]
    try:
        config = WidgetConfig(ctx.obj["file_path"], settings=settings)
        result = action(config)
        if result is not False:
            config.write_sync()
    except ConfigXmlError as e:
        _fail(e.message)
    return result


def _parse_options(options: Tuple[str, ...]) -> Dict[str, str]:
    parsed: Dict[str, str] = {}
    for item in options:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(
                f"expected KEY=VALUE, got {item!r}", param_hint="--option"
            )
        parsed[key] = value
    return parsed


@click.group()
@click.option(
    "--file",
    "-f",
    "file_path",
    default="config.xml",
    show_default=True,
    type=click.Path(dir_okay=False),
    help="config.xml file to edit",
)
@click.option(
    "--config",
    "settings_path",
    type=click.Path(dir_okay=False),
    help="JSON settings file (indent, encoding, logging)",
)
@click.option(
    "--log-level",
    type=click.Choice(_LEVELS, case_sensitive=False),
    help="Override the log level from settings",
)
@click.pass_context
def cli(
    ctx: click.Context,
    file_path: str,
    settings_path: Optional[str],
    log_level: Optional[str],
) -> None:
    """Edit Cordova config.xml files."""
    try:
        settings = load_settings(Path(settings_path) if settings_path else None)
    except ConfigXmlError as e:
        _fail(e.message)
    if log_level:
        settings = settings.model_copy(update={"log_level": log_level.upper()})

    install_unified_record_factory()
    setup_logging(settings.log_level_value, settings.log_file)
    ctx.obj = {"file_path": file_path, "settings": settings}


@cli.command("set-id")
@click.argument("widget_id")
@click.pass_context
def set_id(ctx: click.Context, widget_id: str) -> None:
    """Set the widget id."""
    _edit(ctx, lambda c: c.set_id(widget_id))
    click.echo(f"✅ id set to {widget_id}")


@cli.command("set-name")
@click.argument("name")
@click.pass_context
def set_name(ctx: click.Context, name: str) -> None:
    """Set the <name> element."""
    _edit(ctx, lambda c: c.set_name(name))
    click.echo(f"✅ name set to {name}")


@cli.command("set-description")
@click.argument("description")
@click.pass_context
def set_description(ctx: click.Context, description: str) -> None:
    """Set the <description> element."""
    _edit(ctx, lambda c: c.set_description(description))
    click.echo("✅ description updated")


@cli.command("set-author")
@click.argument("name")
@click.option("--email", help="Author email address")
@click.option("--website", help="Author website")
@click.pass_context
def set_author(
    ctx: click.Context, name: str, email: Optional[str], website: Optional[str]
) -> None:
    """Set the <author> element."""
    _edit(ctx, lambda c: c.set_author(name, email, website))
    click.echo(f"✅ author set to {name}")


@cli.command("set-version")
@click.argument("version")
@click.pass_context
def set_version(ctx: click.Context, version: str) -> None:
    """Set the MAJOR.MINOR.PATCH version."""
    _edit(ctx, lambda c: c.set_version(version))
    click.echo(f"✅ version set to {version}")


@cli.command("set-android-version-code")
@click.argument("version_code")
@click.pass_context
def set_android_version_code(ctx: click.Context, version_code: str) -> None:
    """Set android-versionCode."""
    _edit(ctx, lambda c: c.set_android_version_code(version_code))
    click.echo(f"✅ android-versionCode set to {version_code}")


@cli.command("set-ios-bundle-version")
@click.argument("version")
@click.pass_context
def set_ios_bundle_version(ctx: click.Context, version: str) -> None:
    """Set ios-CFBundleVersion."""
    _edit(ctx, lambda c: c.set_ios_bundle_version(version))
    click.echo(f"✅ ios-CFBundleVersion set to {version}")


@cli.command("set-preference")
@click.argument("name")
@click.argument("value")
@click.option("--platform", "-p", help="Platform the preference applies to (e.g. ios)")
@click.pass_context
def set_preference(
    ctx: click.Context, name: str, value: str, platform: Optional[str]
) -> None:
    """Add or replace a preference."""
    _edit(ctx, lambda c: c.set_preference(name, value, platform))
    scope = f" for {platform}" if platform else ""
    click.echo(f"✅ preference {name}={value}{scope}")


@cli.command("set-access")
@click.argument("origin")
@click.option(
    "--option",
    "-o",
    "options",
    multiple=True,
    help="Extra attribute as KEY=VALUE (repeatable)",
)
@click.pass_context
def set_access(ctx: click.Context, origin: str, options: Tuple[str, ...]) -> None:
    """Add or replace an <access> origin."""
    parsed = _parse_options(options)
    _edit(ctx, lambda c: c.set_access_origin(origin, parsed))
    click.echo(f"✅ access origin {origin}")


@cli.command("remove-access")
@click.argument("origin", required=False)
@click.option("--all", "remove_all", is_flag=True, help="Remove every access origin")
@click.pass_context
def remove_access(ctx: click.Context, origin: Optional[str], remove_all: bool) -> None:
    """Remove one <access> origin, or all of them with --all."""
    if bool(origin) == remove_all:
        raise click.UsageError("Pass either ORIGIN or --all")
    if remove_all:
        _edit(ctx, lambda c: c.remove_access_origins())
        click.echo("✅ all access origins removed")
    else:
        _edit(ctx, lambda c: c.remove_access_origin(origin))
        click.echo(f"✅ access origin {origin} removed")


@cli.command("add-hook")
@click.argument("hook_type", type=click.Choice(sorted(HOOK_TYPES)))
@click.argument("src")
@click.pass_context
def add_hook(ctx: click.Context, hook_type: str, src: str) -> None:
    """Append a lifecycle hook."""
    _edit(ctx, lambda c: c.add_hook(hook_type, src))
    click.echo(f"✅ hook {hook_type} -> {src}")


@cli.command("add-raw")
@click.argument("raw")
@click.option("--at", "at_xpath", help="Path of the parent element")
@click.option(
    "--if-missing",
    "if_xpath_does_not_exist",
    help="Skip when this path already matches",
)
@click.pass_context
def add_raw(
    ctx: click.Context,
    raw: str,
    at_xpath: Optional[str],
    if_xpath_does_not_exist: Optional[str],
) -> None:
    """Append a raw XML element."""
    added = _edit(ctx, lambda c: c.add_raw_xml(raw, at_xpath, if_xpath_does_not_exist))
    if added:
        click.echo("✅ raw XML added")
    else:
        click.echo("ℹ️  raw XML not added (parent missing or element already present)")


if __name__ == "__main__":
    cli()
