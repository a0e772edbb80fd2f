"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    azct -i inventory.yaml          # 대화형 브라우저
    azct --version                  # 버전 표시
    azct types                      # 핸들러가 등록된 리소스 타입 목록
    azct types --json               # JSON 출력
    azct validate -i inventory.yaml # 인벤토리 파일 검증

환경변수:
    AZCT_INVENTORY, AZCT_LANG, AZCT_DEBUG (core.config 참고)

Usage:
    $ azct --inventory inventory.yaml --lang en
    $ python -m cli.app
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from click import Context

from cli.i18n import set_lang, t
from core.config import get_default_lang, get_inventory_path, get_version, is_debug, settings
from core.exceptions import AZCTError, ConfigError, format_error_for_user
from core.inventory import StaticProvider, call_provider

# WARNING 레벨로 설정하여 INFO 로그가 브라우저 출력에 섞이지 않도록 함
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

VERSION = get_version()

inventory_option = click.option(
    "-i",
    "--inventory",
    "inventory",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="인벤토리 YAML 파일 (기본: AZCT_INVENTORY)",
)


def _configure_logging(debug: bool) -> None:
    """--debug 또는 AZCT_DEBUG이면 DEBUG 레벨 + Rich 핸들러"""
    if not debug:
        return
    from cli.ui.console import get_logger

    logging.getLogger().setLevel(logging.DEBUG)
    get_logger("core", level=logging.DEBUG)
    get_logger("cli", level=logging.DEBUG)


def _resolve_inventory(inventory: Path | None) -> Path:
    path = inventory or get_inventory_path()
    if path is None:
        click.echo(t("common.inventory_required"), err=True)
        raise SystemExit(2)
    if not path.exists():
        click.echo(t("common.file_not_found", path=path), err=True)
        raise SystemExit(2)
    return path


def _load_provider(inventory: Path | None) -> StaticProvider:
    path = _resolve_inventory(inventory)
    try:
        return StaticProvider.from_file(path)
    except AZCTError as e:
        click.echo(t("common.inventory_invalid", error=format_error_for_user(e)), err=True)
        raise SystemExit(1) from e


@click.group(invoke_without_command=True)
@click.version_option(VERSION, prog_name="azct")
@inventory_option
@click.option(
    "--lang",
    type=click.Choice(list(settings.SUPPORTED_LANGS)),
    default=None,
    help="UI 언어 설정 / UI language (ko: 한국어, en: English)",
)
@click.option("--debug", is_flag=True, default=False, help="디버그 로그 출력")
@click.pass_context
def cli(ctx: Context, inventory: Path | None, lang: str | None, debug: bool) -> None:
    """azct - 클라우드 인벤토리 브라우저"""
    if lang is None:
        try:
            lang = get_default_lang()
        except ConfigError as e:
            click.echo(format_error_for_user(e), err=True)
            raise SystemExit(2) from e
    set_lang(lang)
    _configure_logging(debug or is_debug())

    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang
    ctx.obj["inventory"] = inventory

    if ctx.invoked_subcommand is None:
        from cli.ui import Browser
        from core.navigation import Navigator

        provider = _load_provider(inventory)
        try:
            Browser(Navigator(provider)).run()
        finally:
            provider.close()


@cli.command("types")
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
def types_command(as_json: bool) -> None:
    """핸들러가 등록된 리소스 타입 목록

    \b
    Examples:
        azct types            # 테이블 출력
        azct types --json     # JSON 출력
    """
    from core.resource import create_default_registry

    registry = create_default_registry()
    rows = []
    for resource_type in registry.list_resource_types():
        handler = registry.lookup_exact(resource_type)
        rows.append(
            {
                "type": resource_type,
                "name": handler.display_name,
                "explore": handler.can_explore(),
                "actions": [action.key for action in handler.actions()],
            }
        )

    if as_json:
        click.echo(json.dumps(rows, ensure_ascii=False, indent=2))
        return

    from rich.table import Table

    from cli.ui.console import SYMBOL_SUCCESS, console

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Resource Type", style="cyan")
    table.add_column("Name")
    table.add_column("Explore", justify="center")
    table.add_column("Actions")
    for row in rows:
        table.add_row(row["type"], row["name"], SYMBOL_SUCCESS if row["explore"] else "", ", ".join(row["actions"]))
    console.print(table)


@cli.command("validate")
@inventory_option
@click.pass_context
def validate_command(ctx: Context, inventory: Path | None) -> None:
    """인벤토리 파일 검증 (구독/리소스 그룹/리소스 수 출력)"""
    provider = _load_provider(inventory or ctx.obj.get("inventory"))
    try:
        subs = call_provider("list_subscriptions", provider.list_subscriptions)
        group_count = 0
        resource_count = 0
        for sub in subs:
            group_count += len(call_provider("list_resource_groups", provider.list_resource_groups, sub.id))
            resource_count += len(call_provider("list_resources", provider.list_resources, sub.id))
    except AZCTError as e:
        click.echo(t("common.inventory_invalid", error=format_error_for_user(e)), err=True)
        raise SystemExit(1) from e
    finally:
        provider.close()

    click.echo(
        t(
            "browser.validate_summary",
            subscriptions=len(subs),
            groups=group_count,
            resources=resource_count,
        )
    )


if __name__ == "__main__":
    cli()
