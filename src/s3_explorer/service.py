"""Listing service: the public entry point of the listing subsystem.

The service resolves a session's client, answers from the listing cache when
it can, and otherwise paginates, builds the folder/file view and stores it.

Callers must pass a ``prefix`` that is empty or ends with ``/``; use
:func:`s3_explorer.objectstorage.parse_s3_uri` to normalize user input.

Two concurrent misses for the same key both fetch from S3 and both write the
cache; the later write wins.
"""

from typing import Optional

from s3_explorer.core import Settings, get_logger, get_tracer, settings
from s3_explorer.core.exceptions import S3ExplorerError, StorageError, ValidationError
from s3_explorer.objectstorage.clients import (
    CLI_SESSION_ID,
    ObjectStream,
    S3ClientConfig,
    StorageClient,
    bind_client,
    parse_s3_uri,
)
from s3_explorer.objectstorage.listing import (
    ListingCache,
    ListingKey,
    ListingView,
    build_listing_view,
    fetch_all,
)
from s3_explorer.schemas import BrowserConfig
from s3_explorer.sessions import SessionRegistry

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class ListingService:
    """Orchestrates session lookup, caching and listing."""

    def __init__(
        self,
        registry: Optional[SessionRegistry] = None,
        cache: Optional[ListingCache] = None,
        config: Optional[Settings] = None,
    ):
        self.config = config if config is not None else settings
        self.registry = registry if registry is not None else SessionRegistry()
        self.cache = (
            cache
            if cache is not None
            else ListingCache(ttl_seconds=self.config.cache_ttl_seconds)
        )
        self.browser_config = BrowserConfig()

    def connect(self, client_config: S3ClientConfig, session_id: Optional[str] = None) -> str:
        """Bind a client for ``client_config`` and register it as a session.

        Raises ``ValidationError`` unless an access key pair or an AWS profile
        is given.
        """
        if self.browser_config.cli_mode:
            raise ValidationError("Server is running in CLI mode")
        has_keys = client_config.access_key_id and client_config.secret_access_key
        if not has_keys and not client_config.aws_profile:
            raise ValidationError("Missing credentials")
        client = bind_client(client_config)
        return self.register_client(client, session_id=session_id)

    def register_client(self, client: StorageClient, session_id: Optional[str] = None) -> str:
        return self.registry.register(client, session_id=session_id)

    def disconnect(self, session_id: str) -> None:
        self.registry.remove(session_id)

    def list_objects(
        self,
        session_id: str,
        bucket: str,
        prefix: str = "",
        refresh: bool = False,
    ) -> ListingView:
        """List the folders and files directly under ``prefix``.

        Args:
            session_id: Session returned by :meth:`connect`
            bucket: Bucket name
            prefix: Empty for the bucket root, otherwise ending with ``/``
            refresh: Skip the cache and overwrite it with a fresh listing

        Returns:
            The cached or freshly built :class:`ListingView`

        Raises:
            ValidationError: If an argument is malformed
            SessionError: If the session is unknown
            StorageError: If S3 fails; the cache is left untouched
        """
        if not session_id:
            raise ValidationError("Missing sessionId")
        if not bucket:
            raise ValidationError("Missing bucket name")
        if prefix and not prefix.endswith("/"):
            raise ValidationError(f"Prefix must be empty or end with '/': {prefix!r}")

        client = self.registry.resolve(session_id)
        key = ListingKey(session_id=session_id, bucket=bucket, prefix=prefix)

        if not refresh:
            cached = self.cache.get(key)
            if cached is not None:
                logger.info("Cache hit", bucket=bucket, prefix=prefix)
                return cached

        logger.info("Refreshing" if refresh else "Listing", bucket=bucket, prefix=prefix)

        with tracer.start_as_current_span("listing.list_objects") as span:
            span.set_attribute("s3.bucket", bucket)
            span.set_attribute("s3.prefix", prefix)
            span.set_attribute("listing.refresh", refresh)

            entries = fetch_all(
                client,
                bucket,
                prefix,
                max_pages=self.config.max_pages,
                page_size=self.config.page_size,
            )
            view = build_listing_view(entries, prefix)

        self.cache.put(key, view)
        return view

    def read_object(self, session_id: str, bucket: str, key: str) -> ObjectStream:
        """Open a single object for preview or download.

        Raises:
            ValidationError: If the session id, bucket or key is missing
            SessionError: If the session is unknown
            StorageError: If S3 fails
        """
        if not session_id:
            raise ValidationError("Missing sessionId")
        if not bucket or not key:
            raise ValidationError("Missing bucket or key")

        client = self.registry.resolve(session_id)

        try:
            return client.read_object(bucket, key)
        except S3ExplorerError:
            raise
        except Exception as e:
            logger.error("Failed to get file", bucket=bucket, key=key, error=str(e))
            raise StorageError("Failed to get file", cause=e, bucket=bucket) from e

    def start_unattended(
        self,
        aws_profile: str,
        s3_uri: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ) -> BrowserConfig:
        """Bind ``aws_profile`` under the well-known CLI session id.

        Returns the configuration the UI uses to skip the credential form.
        """
        bucket, root_prefix = parse_s3_uri(s3_uri)
        client = bind_client(
            S3ClientConfig(
                aws_profile=aws_profile,
                region_name=region_name,
                endpoint_url=endpoint_url,
            )
        )
        session_id = self.register_client(client, session_id=CLI_SESSION_ID)
        logger.info(
            "CLI mode enabled",
            profile=aws_profile,
            bucket=bucket,
            root_prefix=root_prefix,
            region=client.region_name,
        )
        self.browser_config = BrowserConfig(
            cli_mode=True,
            bucket=bucket,
            root_prefix=root_prefix,
            region=client.region_name,
            session_id=session_id,
        )
        return self.browser_config
