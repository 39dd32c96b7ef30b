"""tilejson: cli."""

import sys

import click
from pydantic import ValidationError

from tilejson import __version__ as tilejson_version
from tilejson.backends import MemoryBackend, TileJSONBackend
from tilejson.codec import decode as decode_tilejson
from tilejson.codec import encode as encode_tilejson
from tilejson.errors import TileJSONError
from tilejson.model import Scheme, TileJSON


class FloatList(click.ParamType):
    """Comma separated list of floats."""

    name = "floatlist"

    def convert(self, value, param, ctx):
        """Split and convert."""
        if isinstance(value, (list, tuple)):
            return list(value)

        try:
            return [float(v) for v in value.split(",")]
        except ValueError:
            self.fail(f"{value!r} is not a comma separated list of numbers", param, ctx)


@click.group()
@click.version_option(version=tilejson_version, message="%(version)s")
def tilejson_cli():
    """tilejson cli."""
    pass


@tilejson_cli.command(short_help="Read a TileJSON document")
@click.argument("input", type=str, default="-")
@click.option(
    "--json",
    "to_json",
    default=False,
    is_flag=True,
    help="Print as TileJSON.",
)
def decode(input, to_json):
    """Read a TileJSON document from a file, an url or stdin."""
    try:
        if input == "-":
            backend = MemoryBackend(tilejson_def=decode_tilejson(sys.stdin.read()))
        else:
            backend = TileJSONBackend(input)
    except (TileJSONError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    with backend as src:
        doc = src.tilejson_def

    if to_json:
        click.echo(encode_tilejson(doc))
        return

    sep = 25
    click.echo(
        f"""{click.style('Path:', bold=True)} {input}
{click.style('Backend:', bold=True)} {backend._backend_name}

{click.style('Profile', bold=True)}
    {click.style("TileJSON:", bold=True):<{sep}} {doc.tilejson}
    {click.style("Version:", bold=True):<{sep}} {doc.version}
    {click.style("Name:", bold=True):<{sep}} {doc.name}
    {click.style("Description:", bold=True):<{sep}} {doc.description}
    {click.style("Attribution:", bold=True):<{sep}} {doc.attribution}

{click.style('Geo', bold=True)}
    {click.style("Scheme:", bold=True):<{sep}} {doc.scheme.value}
    {click.style("BoundingBox:", bold=True):<{sep}} {doc.bounds}
    {click.style("Center:", bold=True):<{sep}} {doc.center}
    {click.style("Min Zoom:", bold=True):<{sep}} {doc.minzoom}
    {click.style("Max Zoom:", bold=True):<{sep}} {doc.maxzoom}

{click.style('Endpoints', bold=True)}
    {click.style("Tiles:", bold=True):<{sep}} {len(doc.tiles)}
    {click.style("Grids:", bold=True):<{sep}} {len(doc.grids)}
    {click.style("Data:", bold=True):<{sep}} {len(doc.data)}"""
    )


@tilejson_cli.command(short_help="Create a TileJSON document")
@click.option("--output", "-o", type=click.Path(exists=False), help="Output file name")
@click.option("--tilejson", "tilejson_version", type=str, help="TileJSON spec version")
@click.option("--name", type=str, help="Tileset name")
@click.option("--description", type=str, help="Tileset description")
@click.option("--version", "dataset_version", type=str, help="Tileset version")
@click.option("--attribution", type=str, help="Tileset attribution")
@click.option("--template", type=str, help="Interaction template")
@click.option("--legend", type=str, help="Map legend")
@click.option(
    "--scheme",
    type=click.Choice([s.value for s in Scheme]),
    help="Tile Y-axis direction.",
)
@click.option("--tile", "tiles", type=str, multiple=True, help="Tile url template")
@click.option("--grid", "grids", type=str, multiple=True, help="Grid url template")
@click.option("--data", type=str, multiple=True, help="GeoJSON url template")
@click.option("--minzoom", type=int, help="Minimum zoom level.")
@click.option("--maxzoom", type=int, help="Maximum zoom level.")
@click.option(
    "--bounds", type=FloatList(), help="Bounds as `left,bottom,right,top`."
)
@click.option("--center", type=FloatList(), help="Center as `lon,lat,zoom`.")
def encode(
    output,
    tilejson_version,
    name,
    description,
    dataset_version,
    attribution,
    template,
    legend,
    scheme,
    tiles,
    grids,
    data,
    minzoom,
    maxzoom,
    bounds,
    center,
):
    """Create a TileJSON document from options."""
    options = {
        "tilejson": tilejson_version,
        "name": name,
        "description": description,
        "version": dataset_version,
        "attribution": attribution,
        "template": template,
        "legend": legend,
        "scheme": scheme,
        "tiles": list(tiles),
        "grids": list(grids),
        "data": list(data),
        "minzoom": minzoom,
        "maxzoom": maxzoom,
        "bounds": bounds,
        "center": center,
    }
    try:
        doc = TileJSON(**{k: v for k, v in options.items() if v is not None})
    except ValidationError as e:
        raise click.ClickException(str(e)) from e

    if output:
        try:
            with TileJSONBackend(output, tilejson_def=doc) as dst:
                dst.write(overwrite=True)
        except (TileJSONError, ValueError, TypeError) as e:
            raise click.ClickException(f"Can't write to {output}: {e}") from e
    else:
        click.echo(encode_tilejson(doc))
