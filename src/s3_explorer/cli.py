"""Command-line interface for s3-explorer.

Commands:
    - list: List the folders and files directly under an S3 URI

The CLI binds a single client at startup (an AWS profile or explicit keys),
which mirrors how the browser runs in unattended mode.
"""

import json
from typing import Annotated, Optional

import typer

from . import __version__
from .objectstorage import ListingView, S3ClientConfig, parse_s3_uri
from .service import ListingService

app = typer.Typer(
    name="s3-explorer",
    help="Browse S3 buckets as folders and files.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"s3-explorer {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    S3 Explorer: folder-style listings of S3 buckets.
    """
    pass


def _format_size(size: int) -> str:
    if size >= 1024**3:
        return f"{size / (1024**3):.2f} GB"
    if size >= 1024**2:
        return f"{size / (1024**2):.2f} MB"
    if size >= 1024:
        return f"{size / 1024:.2f} KB"
    return f"{size} bytes"


def _view_to_dict(view: ListingView) -> dict:
    return {
        "folders": [
            {"type": "folder", "name": f.name, "fullPath": f.full_path}
            for f in view.folders
        ],
        "files": [
            {
                "type": "file",
                "name": f.name,
                "fullPath": f.full_path,
                "size": f.size,
                "lastModified": f.last_modified.isoformat() if f.last_modified else None,
            }
            for f in view.files
        ],
        "prefix": view.prefix,
    }


def _create_service(
    s3_uri: str,
    aws_profile: Optional[str],
    access_key_id: Optional[str],
    secret_access_key: Optional[str],
    session_token: Optional[str],
    region_name: Optional[str],
    endpoint_url: Optional[str],
) -> tuple[ListingService, str]:
    """Bind a client and return the service with the session to use."""
    service = ListingService()
    if aws_profile:
        config = service.start_unattended(
            aws_profile, s3_uri, region_name=region_name, endpoint_url=endpoint_url
        )
        assert config.session_id is not None
        return service, config.session_id

    session_id = service.connect(
        S3ClientConfig(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            region_name=region_name,
            endpoint_url=endpoint_url,
        )
    )
    return service, session_id


@app.command("list")
def list_cmd(
    s3_uri: Annotated[str, typer.Argument(help="S3 URI, e.g. s3://bucket/prefix")],
    aws_profile: Annotated[
        Optional[str],
        typer.Option("--aws-profile", "--profile", help="AWS CLI profile name"),
    ] = None,
    access_key_id: Annotated[
        Optional[str],
        typer.Option("--access-key-id", help="AWS access key ID"),
    ] = None,
    secret_access_key: Annotated[
        Optional[str],
        typer.Option("--secret-access-key", help="AWS secret access key"),
    ] = None,
    session_token: Annotated[
        Optional[str],
        typer.Option("--session-token", help="AWS session token"),
    ] = None,
    region_name: Annotated[
        Optional[str],
        typer.Option("--region", help="AWS region (defaults to the profile's region)"),
    ] = None,
    endpoint_url: Annotated[
        Optional[str], typer.Option("--endpoint-url", help="Custom S3 endpoint URL")
    ] = None,
    refresh: Annotated[
        bool, typer.Option("--refresh", help="Bypass the listing cache")
    ] = False,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the listing as JSON")
    ] = False,
) -> None:
    """
    List the folders and files directly under an S3 URI.

    Examples:
        s3-explorer list s3://bucket/prefix --aws-profile myprofile
        s3-explorer list s3://bucket --access-key-id KEY --secret-access-key SECRET
    """
    try:
        bucket, prefix = parse_s3_uri(s3_uri)
        service, session_id = _create_service(
            s3_uri,
            aws_profile=aws_profile,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            region_name=region_name,
            endpoint_url=endpoint_url,
        )

        view = service.list_objects(session_id, bucket, prefix, refresh=refresh)

        if as_json:
            typer.echo(json.dumps(_view_to_dict(view), indent=2))
            return

        if not view.folders and not view.files:
            typer.echo("No folders or files found.")
            return

        typer.echo(f"s3://{bucket}/{prefix}")
        for folder in view.folders:
            typer.echo(f"  {folder.name}")
        for file in view.files:
            typer.echo(f"  {file.name}  ({_format_size(file.size)})")
        typer.echo(f"{len(view.folders)} folders, {len(view.files)} files")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
