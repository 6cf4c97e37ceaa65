"""
Management commands for local checks and deployment tasks
"""
import click
from flask import current_app
from flask.cli import with_appcontext

from .services.calculator_catalog import group_by_category
from .services.sitemap_service import build_sitemap_entries, render_sitemap_xml
from .services.unit_conversion import ConversionEngine
from .utils.number_format import format_number


@click.command('convert')
@click.argument('value', type=float)
@click.argument('from_unit')
@click.argument('to_unit')
@click.option('--quantity', '-q', default='length', show_default=True,
              type=click.Choice(ConversionEngine.quantities()),
              help='Quantity both units belong to')
@with_appcontext
def convert_command(value, from_unit, to_unit, quantity):
    """Convert VALUE from one unit to another"""
    try:
        converted = ConversionEngine.convert_quantity(quantity, value, from_unit, to_unit)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    decimals = ConversionEngine.decimals_for(quantity)
    click.echo(f"{format_number(value)} {from_unit} = {format_number(converted, decimals)} {to_unit}")


@click.command('calculators')
@with_appcontext
def list_calculators_command():
    """List every calculator page grouped by category"""
    for category, entries in group_by_category().items():
        click.echo(f"{category}:")
        for entry in entries:
            click.echo(f"  /{entry['slug']:<32} {entry['name']}")


@click.command('sitemap')
@click.option('--base-url', default=None, help='Override APP_BASE_URL')
@with_appcontext
def sitemap_command(base_url):
    """Print the XML sitemap"""
    base = base_url or current_app.config.get('APP_BASE_URL')
    if not base:
        raise click.UsageError('APP_BASE_URL is not configured; pass --base-url.')
    click.echo(render_sitemap_xml(build_sitemap_entries(base)), nl=False)


def register_commands(app):
    """Register CLI commands"""
    app.cli.add_command(convert_command)
    app.cli.add_command(list_calculators_command)
    app.cli.add_command(sitemap_command)
